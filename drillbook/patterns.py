"""Text patterns built from stars, digits and letters."""

from __future__ import annotations


def star_square(n: int) -> list[str]:
    """An n-by-n square of stars."""
    return ["*" * n for _ in range(n)]


def number_rows(n: int) -> list[str]:
    """n rows where row i repeats the digit string of i, n times."""
    return [str(i) * n for i in range(1, n + 1)]


def letter_staircase(n: int) -> list[str]:
    """Row i holds i consecutive letters ending at the n-th letter after 'A'."""
    lines = []
    for i in range(1, n + 1):
        start = ord("A") + n - i
        lines.append("".join(chr(start + j) for j in range(i)))
    return lines


def number_pyramid(n: int) -> list[str]:
    """A right-aligned pyramid where row i counts up to i and back down."""
    lines = []
    for i in range(1, n + 1):
        rising = "".join(str(j) for j in range(1, i + 1))
        falling = "".join(str(j) for j in range(i - 1, 0, -1))
        lines.append(" " * (n - i) + rising + falling)
    return lines