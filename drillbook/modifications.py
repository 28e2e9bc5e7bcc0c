"""Decide whether a sequence of writes can turn one array into another."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from pathlib import Path


def _check_lengths(original: Sequence[int], target: Sequence[int]) -> None:
    if len(original) != len(target):
        raise ValueError("original and target differ in length")


def matches_last_writes(
    original: Sequence[int],
    target: Sequence[int],
    writes: Iterable[tuple[int, int]],
) -> bool:
    """Tell whether applying the writes yields target.

    Each write is a (1-based index, value) pair; only the last write to an
    index counts. Indices outside the array are ignored.
    """
    _check_lengths(original, target)
    last = {index - 1: value for index, value in writes}
    return all(
        last.get(i, before) == after
        for i, (before, after) in enumerate(zip(original, target))
    )


def _needed(original: Sequence[int], target: Sequence[int]) -> Counter[int]:
    return Counter(after for before, after in zip(original, target) if before != after)


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("at least one value is required")


def can_reach_with_values(
    original: Sequence[int], target: Sequence[int], values: Sequence[int]
) -> bool:
    """Tell whether the values, written in order at chosen positions, can yield target.

    The last value must appear in target, and every position that differs
    needs its own copy of the target value among the values.
    """
    _check_lengths(original, target)
    _require_values(values)
    if values[-1] not in target:
        return False
    available = Counter(values)
    for value, count in _needed(original, target).items():
        if available[value] < count:
            return False
    return True


def can_reach_by_counting(
    original: Sequence[int], target: Sequence[int], values: Sequence[int]
) -> bool:
    """Same question answered by cancelling counts of needed and offered values."""
    _check_lengths(original, target)
    _require_values(values)
    last_fits = values[-1] in target
    missing = _needed(original, target) - Counter(values)
    return last_fits and not missing


def parse_cases(text: str) -> list[tuple[list[int], list[int], list[int]]]:
    """Read a case count, then for each case n, two arrays of n, m and m values."""
    tokens = iter(text.split())

    def take() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError("input ended early") from None

    def take_many(count: int) -> list[int]:
        return [take() for _ in range(count)]

    cases = []
    for _ in range(take()):
        n = take()
        original = take_many(n)
        target = take_many(n)
        values = take_many(take())
        cases.append((original, target, values))
    return cases


def main(argv: list[str] | None = None) -> int:
    """Answer YES or NO for every case read from a file or standard input."""
    parser = argparse.ArgumentParser(description="Check whether writes can reach a target array.")
    parser.add_argument("path", nargs="?", help="input file; standard input when omitted")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text() if args.path else sys.stdin.read()
    for original, target, values in parse_cases(text):
        print("YES" if can_reach_with_values(original, target, values) else "NO")
    return 0