"""
Z3 backend for the group solver.
"""

from .oracle import Z3Oracle

__all__ = ["Z3Oracle"]
