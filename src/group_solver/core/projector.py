from typing import List, Tuple

from .enumerator import Solution
from .model import GroupModel
from .sorted_sets import intersection


def chosen(values) -> List[int]:
    """Ascending indices whose value is true."""
    return [i for i, value in enumerate(values) if value]


def project(model: GroupModel, solution: Solution) -> List[Tuple[str, List[str]]]:
    """
    Map an assignment back to active groups and their selected members.

    Args:
        model: The canonical problem the assignment belongs to
        solution: Item and group values in canonical order

    Returns:
        ``(group_name, item_names)`` for every active group, in canonical group
        order, with member names in canonical item order
    """
    selected = chosen(solution.item_values)
    out = []
    for g in chosen(solution.group_values):
        group_name, members = model.groups[g]
        including = intersection(selected, members)
        out.append((group_name, [model.names[i] for i in including]))
    return out
