"""Traversals, rotation and row/column summaries for rectangular matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Matrix = Sequence[Sequence[int]]


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the elements in clockwise spiral order, starting at the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    rows, cols = len(matrix), len(matrix[0])
    total = rows * cols
    result: list[int] = []

    def take(cells: Iterable[int]) -> None:
        for value in cells:
            if len(result) >= total:
                return
            result.append(value)

    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while len(result) < total:
        take(matrix[top][c] for c in range(left, right + 1))
        top += 1
        take(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        take(matrix[bottom][c] for c in range(right, left - 1, -1))
        bottom -= 1
        take(matrix[r][left] for r in range(bottom, top - 1, -1))
        left += 1
    return result


def wave_order(matrix: Matrix) -> list[int]:
    """Read columns left to right, going down even columns and up odd ones."""
    result: list[int] = []
    for index, column in enumerate(zip(*matrix)):
        result.extend(reversed(column) if index % 2 else column)
    return result


def rotate_clockwise(matrix: Matrix) -> list[list[int]]:
    """Return a new matrix turned 90 degrees clockwise."""
    return [list(column) for column in zip(*reversed(matrix))]


def contains(matrix: Matrix, target: int) -> bool:
    """Tell whether any cell holds the target."""
    return any(target in row for row in matrix)


def row_sums(matrix: Matrix) -> list[int]:
    """Sum of each row, top to bottom."""
    return [sum(row) for row in matrix]


def column_sums(matrix: Matrix) -> list[int]:
    """Sum of each column, left to right."""
    return [sum(column) for column in zip(*matrix)]


def largest_row_index(matrix: Matrix) -> int:
    """Index of the row with the largest sum; the first one wins a tie."""
    sums = row_sums(matrix)
    if not sums:
        raise ValueError("matrix has no rows")
    return max(range(len(sums)), key=sums.__getitem__)