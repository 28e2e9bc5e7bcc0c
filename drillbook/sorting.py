"""Classic comparison sorts that return new ascending lists."""

from __future__ import annotations

from collections.abc import Sequence


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Sort by repeatedly swapping out-of-order neighbours."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        for i in range(end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
    return result


def recursive_bubble_sort(values: Sequence[int]) -> list[int]:
    """Bubble sort where each pass is followed by a call on one fewer element."""
    result = list(values)

    def sort_prefix(n: int) -> None:
        if n <= 1:
            return
        for i in range(n - 1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
        sort_prefix(n - 1)

    sort_prefix(len(result))
    return result


def insertion_sort(values: Sequence[int]) -> list[int]:
    """Sort by sliding each value left past larger ones."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(values: Sequence[int]) -> list[int]:
    """Sort by moving the smallest remaining value to the front each round."""
    result = list(values)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Sequence[int]) -> list[int]:
    """Sort by splitting in halves, sorting each and merging them."""
    if len(values) <= 1:
        return list(values)
    mid = (len(values) - 1) // 2 + 1
    return merge_sorted(merge_sort(values[:mid]), merge_sort(values[mid:]))