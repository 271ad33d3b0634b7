"""
Group solver error handling module.

This module defines the exception hierarchy used across the group solver:
- Configuration failures (unreadable or invalid input, unresolved names)
- Oracle failures (errors raised inside the satisfiability backend)
- A decorator that translates backend library exceptions into OracleError
"""

import traceback
import logging
import functools
from typing import Any, Callable, Dict, Optional, TypeVar

# Setup logger
logger = logging.getLogger(__name__)

# Type variable for generic function decorator
T = TypeVar("T")

# Map of common backend exceptions to user-friendly messages
EXCEPTION_MESSAGES = {
    "Z3Exception": {
        "canceled": "The z3 search was canceled (timeout or resource limit reached)",
        "out of memory": "z3 ran out of memory during the search",
        "Sort mismatch": "A non-boolean expression reached a boolean connective",
    },
    "ValueError": {
        "literal should be a non-zero integer": "Clause literals must be non-zero integers",
        "unexpected literal value": "Invalid literal value in clause",
    },
    "RuntimeError": {
        "solver is not initialized": "The SAT solver was not properly initialized",
    },
    "MemoryError": {
        "": "The SAT solver ran out of memory during the search",
    },
}


class GroupSolverError(Exception):
    """Base class for all errors raised by the group solver."""

    pass


class ConfigError(GroupSolverError, ValueError):
    """Raised when the configuration cannot be read or is structurally invalid."""

    pass


class NameNotFoundError(GroupSolverError, LookupError):
    """Raised when an item or group name does not resolve."""

    def __init__(self, name: str, kind: str = "name"):
        self.name = name
        self.kind = kind
        super().__init__(f'{kind} "{name}" not found')


class OracleError(GroupSolverError):
    """Exception raised when the satisfiability oracle fails internally."""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize an oracle error with enhanced context.

        Args:
            message: User-friendly error message
            original_error: The original exception that was caught
            context: Additional context about the error (e.g., backend, variable count)
        """
        self.original_error = original_error
        self.context = context or {}
        self.original_traceback = traceback.format_exc() if original_error else None

        # Build enhanced message with context
        enhanced_message = message
        if context:
            enhanced_message += "\n\nContext:"
            for key, value in context.items():
                enhanced_message += f"\n- {key}: {value}"

        if original_error:
            error_type = type(original_error).__name__
            enhanced_message += f"\n\nOriginal error ({error_type}): {original_error}"

        super().__init__(enhanced_message)


def friendly_message(error: Exception) -> str:
    """
    Find a user-friendly message for a backend exception.

    Args:
        error: The exception raised by the backend library

    Returns:
        The matching message, or a generic one when no pattern matches
    """
    error_type = type(error).__name__
    error_msg = str(error)
    for pattern, message in EXCEPTION_MESSAGES.get(error_type, {}).items():
        if pattern in error_msg:
            return message
    return f"Error in oracle operation: {error_msg}"


def oracle_error_handler(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator translating backend exceptions into OracleError.

    Our own errors and assertion failures pass through untouched; anything
    else raised by the backend library is wrapped with the oracle's context.

    Args:
        func: The oracle method to wrap with error handling

    Returns:
        Wrapped function with error handling
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except (GroupSolverError, AssertionError):
            raise
        except Exception as e:
            context = {}
            if args and hasattr(args[0], "describe"):
                context = args[0].describe()

            logger.error(
                f"Oracle error in {func.__name__}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise OracleError(friendly_message(e), original_error=e, context=context) from e

    return wrapper
