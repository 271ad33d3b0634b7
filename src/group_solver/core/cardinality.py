from typing import Any, Iterable

from .base_oracle import Oracle


def exactly(oracle: Oracle, variables: Iterable[Any], k: int) -> Any:
    """
    Create a formula true iff exactly k of the variables are true.

    Args:
        oracle: Oracle providing the at-least / at-most builders
        variables: Boolean variables
        k: Required number of true variables

    Returns:
        Conjunction of at-least-k and at-most-k over the same variables
    """
    variables = list(variables)
    return oracle.and_(oracle.at_least(variables, k), oracle.at_most(variables, k))
