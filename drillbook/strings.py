"""Recursive exercises on strings and sequences: permutations, subsets, palindromes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def permutations(items: Sequence[T]) -> list[list[T]]:
    """Every ordering of items, produced by swapping each choice into place."""
    pool = list(items)
    result: list[list[T]] = []

    def solve(index: int) -> None:
        if index >= len(pool):
            result.append(list(pool))
            return
        for j in range(index, len(pool)):
            pool[index], pool[j] = pool[j], pool[index]
            solve(index + 1)
            pool[index], pool[j] = pool[j], pool[index]

    solve(0)
    return result


def subsets(items: Sequence[T]) -> list[list[T]]:
    """Every subset of items, each element first left out and then taken in."""
    pool = list(items)
    result: list[list[T]] = []

    def solve(index: int, chosen: list[T]) -> None:
        if index >= len(pool):
            result.append(chosen)
            return
        solve(index + 1, chosen)
        solve(index + 1, chosen + [pool[index]])

    solve(0, [])
    return result


def is_palindrome(text: str) -> bool:
    """Tell whether text reads the same in both directions."""
    return text == text[::-1]


def count_palindromic_substrings(text: str) -> int:
    """Number of (start, end) pairs whose substring is a palindrome."""
    count = 0
    length = len(text)
    for centre in range(2 * length - 1):
        left = centre // 2
        right = left + centre % 2
        while left >= 0 and right < length and text[left] == text[right]:
            count += 1
            left -= 1
            right += 1
    return count


def reverse_string(text: str) -> str:
    """The characters of text in reverse order."""
    return text[::-1]