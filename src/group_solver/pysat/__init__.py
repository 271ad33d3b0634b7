"""
PySAT backend for the group solver.
"""

from .oracle import PySATOracle

__all__ = ["PySATOracle"]
