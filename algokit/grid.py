"""Grid routines: matrix rotation, multiplication tables and a landmine path search."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any

MINE = 0

LANDMINE_FIELD: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 0, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 0, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 0, 1, 1, 1, 1),
    (1, 0, 1, 1, 1, 1, 1, 1, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (0, 1, 1, 1, 1, 0, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 0, 1, 1, 1, 1, 1, 1),
)


def _dimensions(grid: Sequence[Sequence[Any]]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, cols


def rotate_clockwise(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return *matrix* rotated by 90 degrees clockwise."""
    _dimensions(matrix)
    return [list(column) for column in zip(*reversed(matrix))]


def multiplication_table(rows: int = 10, columns: int = 10) -> list[str]:
    """Return the lines ``"i x a = product"`` for every i <= rows, a <= columns."""
    return [
        f"{i} x {a} = {i * a}"
        for i in range(1, rows + 1)
        for a in range(1, columns + 1)
    ]


def is_safe(field: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """Tell whether no orthogonal neighbour of (row, col) holds a mine."""
    rows, cols = _dimensions(field)
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError(f"cell ({row}, {col}) lies outside the field")
    for dr, dc in ((-1, 0), (1, 0), (0, 1), (0, -1)):
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols and field[r][c] == MINE:
            return False
    return True


def shortest_safe_path(field: Sequence[Sequence[int]]) -> int | None:
    """Return the fewest steps from the first column to the last one.

    Steps go right, down or up; a cell is left only if none of its neighbours
    is a mine. Returns None when the last column cannot be reached.
    """
    rows, cols = _dimensions(field)
    if rows == 0 or cols == 0:
        return None
    starts = [(r, 0) for r in range(rows)]
    seen = set(starts)
    frontier = deque((cell, 0) for cell in starts)
    while frontier:
        (row, col), steps = frontier.popleft()
        if col == cols - 1:
            return steps
        if not is_safe(field, row, col):
            continue
        for dr, dc in ((0, 1), (1, 0), (-1, 0)):
            nxt = (row + dr, col + dc)
            if 0 <= nxt[0] < rows and nxt not in seen:
                seen.add(nxt)
                frontier.append((nxt, steps + 1))
    return None