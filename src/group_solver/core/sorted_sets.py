"""
Set operations over ascending index lists.

Every index list in the domain model is kept sorted, which lets overlap checks
run as a linear merge instead of building hash sets.
"""

from typing import List, Sequence


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` is strictly ascending."""
    return all(values[i] < values[i + 1] for i in range(len(values) - 1))


def intersection(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Intersect two ascending, duplicate-free index sequences.

    Runs a two-pointer merge in O(len(a) + len(b)).

    Args:
        a: Sorted sequence of indices
        b: Sorted sequence of indices

    Returns:
        The ascending list of indices present in both inputs
    """
    assert is_sorted(a), f"intersection input is not sorted: {list(a)}"
    assert is_sorted(b), f"intersection input is not sorted: {list(b)}"

    out = []
    i = 0
    j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            out.append(a[i])
            i += 1
            j += 1
    return out
