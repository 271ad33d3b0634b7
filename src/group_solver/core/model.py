"""
Domain model builder.

This module canonicalizes raw, name-keyed configuration tables into the
indexed structures the encoder and projector work on: a name-sorted item
array, name-sorted groups holding sorted member indices, sorted avoid-sets
and resolved ignore-group indices.
"""

import bisect
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..errors import ConfigError, NameNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupModel:
    """
    Canonical, immutable view of a group-selection problem.

    Attributes:
        names: Item names, sorted ascending; an item's index is its position
        groups: ``(group_name, member_indices)`` pairs sorted by group name
        avoid_grouping: Sorted avoid-sets of item indices
        ignore_groups: Sorted indices into ``groups`` that must stay inactive
    """

    names: Tuple[str, ...]
    groups: Tuple[Tuple[str, Tuple[int, ...]], ...]
    avoid_grouping: Tuple[Tuple[int, ...], ...] = ()
    ignore_groups: Tuple[int, ...] = ()

    @property
    def num_items(self) -> int:
        return len(self.names)

    @property
    def num_groups(self) -> int:
        return len(self.groups)

    @property
    def group_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.groups)

    def members(self, group: int) -> Tuple[int, ...]:
        """Sorted item indices of the group at ``group``."""
        return self.groups[group][1]

    def item_index(self, name: str) -> int:
        """Resolve an item name to its index."""
        return _lookup(self.names, name, "name")

    def group_index(self, name: str) -> int:
        """Resolve a group name to its index."""
        return _lookup(self.group_names, name, "group")

    def groups_of_items(self) -> List[List[int]]:
        """For each item, the ascending indices of the groups containing it."""
        out: List[List[int]] = [[] for _ in self.names]
        for g, (_, members) in enumerate(self.groups):
            for i in members:
                out[i].append(g)
        return out


def _lookup(sorted_names: Sequence[str], name: str, kind: str) -> int:
    """Binary search ``name`` in ``sorted_names``; raise NameNotFoundError on a miss."""
    pos = bisect.bisect_left(sorted_names, name)
    if pos < len(sorted_names) and sorted_names[pos] == name:
        return pos
    raise NameNotFoundError(name, kind)


def _resolve(
    sorted_names: Sequence[str], refs: Iterable[str], owner: str
) -> Tuple[int, ...]:
    """Resolve item names, returning sorted, duplicate-free indices."""
    indices = [_lookup(sorted_names, ref, "name") for ref in refs]
    unique = sorted(set(indices))
    if len(unique) != len(indices):
        logger.warning(f"Collapsed duplicate members in {owner}")
    return tuple(unique)


def build_model(
    names: Iterable[str],
    groups: Mapping[str, Iterable[str]],
    avoid_grouping: Optional[Iterable[Iterable[str]]] = None,
    ignore_groups: Optional[Iterable[str]] = None,
) -> GroupModel:
    """
    Build the canonical model from raw configuration tables.

    Args:
        names: The item universe
        groups: Mapping from group name to the names of its members
        avoid_grouping: Sets of item names that must not co-occur in an active group
        ignore_groups: Names of groups that must never be active

    Returns:
        The canonical GroupModel

    Raises:
        ConfigError: If the item universe contains a name twice
        NameNotFoundError: If a member, avoid-set entry or ignored group is unknown
    """
    sorted_names = sorted(names)
    for a, b in zip(sorted_names, sorted_names[1:]):
        if a == b:
            raise ConfigError(f'duplicate item name "{a}"')

    canonical_groups = sorted(
        (group_name, _resolve(sorted_names, members, f'group "{group_name}"'))
        for group_name, members in groups.items()
    )

    avoid = sorted(
        _resolve(sorted_names, avoid_set, "avoid-grouping set")
        for avoid_set in (avoid_grouping or [])
    )

    group_names = [group_name for group_name, _ in canonical_groups]
    ignored = sorted(
        set(_lookup(group_names, ref, "group") for ref in (ignore_groups or []))
    )

    model = GroupModel(
        names=tuple(sorted_names),
        groups=tuple(canonical_groups),
        avoid_grouping=tuple(avoid),
        ignore_groups=tuple(ignored),
    )
    logger.info(
        f"Built model with {model.num_items} items, {model.num_groups} groups, "
        f"{len(model.avoid_grouping)} avoid-sets and {len(model.ignore_groups)} ignored groups"
    )
    return model


def model_summary(model: GroupModel) -> Dict[str, int]:
    """Sizes of the model's tables, used for logging and error context."""
    return {
        "items": model.num_items,
        "groups": model.num_groups,
        "avoid_sets": len(model.avoid_grouping),
        "ignored_groups": len(model.ignore_groups),
    }
