"""
Constraint encoder.

Translates a GroupModel into boolean assertions over one variable per item
("is this item selected") and one per group ("is this group active").
"""

import itertools
import logging
from dataclasses import dataclass, fields
from typing import Any, Sequence

from .base_oracle import Oracle
from .cardinality import exactly
from .model import GroupModel
from .sorted_sets import intersection

logger = logging.getLogger(__name__)


@dataclass
class EncodingStats:
    """Number of assertions added per constraint family."""

    membership: int = 0
    overlap: int = 0
    group_size: int = 0
    avoid_grouping: int = 0
    ignore_groups: int = 0
    total: int = 0

    @property
    def assertions(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))


def encode_membership(model, oracle, item_vars, group_vars) -> int:
    # Selected items need an active group containing them
    groups_of_items = model.groups_of_items()
    for i, selected in enumerate(item_vars):
        containing = [group_vars[g] for g in groups_of_items[i]]
        oracle.add(oracle.implies(selected, oracle.or_(*containing)))
    return model.num_items


def encode_overlap(model, oracle, item_vars, group_vars, group_size: int) -> int:
    # Two active groups sharing a selected item agree on the whole shared region
    count = 0
    for a, b in itertools.combinations(range(model.num_groups), 2):
        shared = intersection(model.members(a), model.members(b))
        if not shared:
            continue
        shared_vars = [item_vars[i] for i in shared]
        some_shared = oracle.or_(*shared_vars)
        both = oracle.and_(group_vars[a], group_vars[b], some_shared)
        oracle.add(oracle.implies(both, exactly(oracle, shared_vars, group_size)))
        count += 1
    return count


def encode_group_size(model, oracle, item_vars, group_vars, group_size: int) -> int:
    for g, active in enumerate(group_vars):
        members = [item_vars[i] for i in model.members(g)]
        oracle.add(oracle.implies(active, exactly(oracle, members, group_size)))
    return model.num_groups


def encode_avoid_grouping(model, oracle, item_vars, group_vars) -> int:
    # No active group holds two selected members of one avoid-set
    count = 0
    for g, active in enumerate(group_vars):
        for avoid in model.avoid_grouping:
            inside = intersection(model.members(g), avoid)
            for p, q in itertools.combinations(inside, 2):
                oracle.add(oracle.not_(oracle.and_(active, item_vars[p], item_vars[q])))
                count += 1
    return count


def encode_ignore_groups(model, oracle, group_vars) -> int:
    for g in model.ignore_groups:
        oracle.add(oracle.not_(group_vars[g]))
    return len(model.ignore_groups)


def encode_total(oracle, item_vars, total: int) -> int:
    oracle.add(exactly(oracle, item_vars, total))
    return 1


def encode(
    model: GroupModel,
    oracle: Oracle,
    item_vars: Sequence[Any],
    group_vars: Sequence[Any],
    params,
) -> EncodingStats:
    """
    Assert every constraint family of the model on the oracle.

    Args:
        model: The canonical problem
        oracle: Oracle receiving the assertions
        item_vars: One boolean per item, aligned with ``model.names``
        group_vars: One boolean per group, aligned with ``model.groups``
        params: Selection parameters providing ``group_size`` and ``total``

    Returns:
        Per-family assertion counts
    """
    assert len(item_vars) == model.num_items
    assert len(group_vars) == model.num_groups

    stats = EncodingStats(
        membership=encode_membership(model, oracle, item_vars, group_vars),
        overlap=encode_overlap(model, oracle, item_vars, group_vars, params.group_size),
        group_size=encode_group_size(model, oracle, item_vars, group_vars, params.group_size),
        avoid_grouping=encode_avoid_grouping(model, oracle, item_vars, group_vars),
        ignore_groups=encode_ignore_groups(model, oracle, group_vars),
        total=encode_total(oracle, item_vars, params.total),
    )
    logger.debug(f"Encoding stats: {stats}")
    logger.info(f"Asserted {stats.assertions} constraints on {oracle.name} oracle")
    return stats
