"""
Backend-independent core of the group solver.
"""

from .base_oracle import CheckResult, Oracle

__all__ = ["CheckResult", "Oracle"]
