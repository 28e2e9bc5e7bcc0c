"""Linear and binary searches over lists of integers."""

from __future__ import annotations

from collections.abc import Sequence


def linear_search(values: Sequence[int], key: int) -> bool:
    """Tell whether key occurs anywhere in values, scanning left to right."""
    return any(value == key for value in values)


def recursive_contains(values: Sequence[int], key: int) -> bool:
    """Tell whether key occurs in values, checking one element per call."""

    def search(start: int) -> bool:
        if start >= len(values):
            return False
        if values[start] == key:
            return True
        return search(start + 1)

    return search(0)


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Index of key in the ascending values, or None when it is absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == key:
            return mid
        if key > values[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return None


def binary_contains(values: Sequence[int], key: int) -> bool:
    """Tell whether key occurs in the ascending values, halving recursively."""

    def search(start: int, end: int) -> bool:
        if start > end:
            return False
        mid = start + (end - start) // 2
        if values[mid] == key:
            return True
        if values[mid] < key:
            return search(mid + 1, end)
        return search(start, mid - 1)

    return search(0, len(values) - 1)


def _boundary(values: Sequence[int], key: int, leftmost: bool) -> int | None:
    start, end = 0, len(values) - 1
    found: int | None = None
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == key:
            found = mid
            if leftmost:
                end = mid - 1
            else:
                start = mid + 1
        elif key > values[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return found


def first_occurrence(values: Sequence[int], key: int) -> int | None:
    """Lowest index of key in the ascending values, or None when absent."""
    return _boundary(values, key, leftmost=True)


def last_occurrence(values: Sequence[int], key: int) -> int | None:
    """Highest index of key in the ascending values, or None when absent."""
    return _boundary(values, key, leftmost=False)


def find_pivot(values: Sequence[int]) -> int:
    """Index of the smallest value in a rotated ascending list.

    A list that is not rotated at all yields its last index.
    """
    if not values:
        raise ValueError("no values given")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] >= values[0]:
            start = mid + 1
        else:
            end = mid
    return start


def integer_sqrt(n: int) -> int:
    """Largest integer whose square does not exceed n."""
    if n < 0:
        raise ValueError("square root of a negative number")
    start, end = 0, n
    answer = 0
    while start <= end:
        mid = start + (end - start) // 2
        square = mid * mid
        if square == n:
            return mid
        if square < n:
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer