"""Small operations on lists of integers."""

from __future__ import annotations

from collections.abc import Sequence


def minimum(values: Sequence[int]) -> int:
    """Smallest value; raises ValueError when there are none."""
    if not values:
        raise ValueError("no values given")
    return min(values)


def maximum(values: Sequence[int]) -> int:
    """Largest value; raises ValueError when there are none."""
    if not values:
        raise ValueError("no values given")
    return max(values)


def reverse_values(values: Sequence[int]) -> list[int]:
    """A new list with the values in reverse order."""
    return list(reversed(values))


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """A new list where each value moves k places to the right, wrapping around."""
    if not values:
        return []
    shift = k % len(values)
    return list(values[-shift:]) + list(values[:-shift]) if shift else list(values)


def swap_pairs(values: Sequence[int]) -> list[int]:
    """Swap neighbours two by two; an odd last value stays where it is."""
    result = list(values)
    result[0:-1:2], result[1::2] = result[1::2], result[0:-1:2]
    return result


def is_sorted_and_rotated(values: Sequence[int]) -> bool:
    """True when the values step down at most once going left to right."""
    drops = sum(1 for left, right in zip(values, values[1:]) if left > right)
    return drops <= 1


def is_sorted(values: Sequence[int]) -> bool:
    """True when the values never decrease."""
    return all(left <= right for left, right in zip(values, values[1:]))


def total(values: Sequence[int]) -> int:
    """Sum of the values."""
    return sum(values)


def count_adjacent_repeats(values: Sequence[int]) -> int:
    """One plus the number of neighbouring positions holding equal values."""
    return 1 + sum(1 for left, right in zip(values, values[1:]) if left == right)