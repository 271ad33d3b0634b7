import logging
from typing import Any, Iterator, NamedTuple, Optional, Sequence, Tuple

from .base_oracle import Oracle

logger = logging.getLogger(__name__)


class Solution(NamedTuple):
    """One satisfying assignment, aligned with the canonical item and group arrays."""

    item_values: Tuple[bool, ...]
    group_values: Tuple[bool, ...]


def enumerate_solutions(
    oracle: Oracle,
    item_vars: Sequence[Any],
    group_vars: Sequence[Any],
    limit: Optional[int] = None,
) -> Iterator[Solution]:
    """
    Lazily produce up to ``limit`` pairwise-distinct solutions.

    The same item and group sequences are handed to the oracle on every call
    so value positions line up with the domain model. An unsatisfiable
    formula yields nothing. If the oracle fails mid-way, solutions already
    yielded remain valid and the OracleError propagates to the caller.

    Args:
        oracle: Oracle holding the asserted formula
        item_vars: Item variables in canonical order
        group_vars: Group variables in canonical order
        limit: Maximum number of solutions, or None for all

    Yields:
        Solution tuples
    """
    if limit is not None and limit <= 0:
        return

    count = 0
    assignments = oracle.solutions(item_vars, group_vars, limit)
    try:
        for item_values, group_values in assignments:
            count += 1
            logger.debug(
                f"Solution {count}: {sum(item_values)} items, {sum(group_values)} groups"
            )
            yield Solution(tuple(item_values), tuple(group_values))
    finally:
        # Retract the oracle's blocking clauses even when the caller stops early
        assignments.close()

    logger.info(f"Enumeration finished after {count} solution(s)")
