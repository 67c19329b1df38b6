"""Checks on the number list and rank normalisation."""

from __future__ import annotations

from collections.abc import Sequence


def has_duplicates(values: Sequence[int]) -> bool:
    """Return True when some number occurs more than once."""
    return len(set(values)) != len(values)


def is_sorted(values: Sequence[int]) -> bool:
    """Return True when the numbers never decrease from first to last."""
    return all(left <= right for left, right in zip(values, values[1:]))


def find_index(sorted_values: Sequence[int], number: int) -> int:
    """Return the position of ``number`` in ``sorted_values``, or 0 if absent."""
    try:
        return list(sorted_values).index(number)
    except ValueError:
        return 0


def normalize(values: Sequence[int]) -> list[int]:
    """Replace every number by its rank among all the numbers.

    The smallest number becomes 0, the next 1 and so on.  Equal numbers
    share the rank of their first occurrence in sorted order.
    """
    ranks: dict[int, int] = {}
    for position, value in enumerate(sorted(values)):
        ranks.setdefault(value, position)
    return [ranks[value] for value in values]