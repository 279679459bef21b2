"""Text patterns built from stars and numbers, returned as lists of lines."""

from __future__ import annotations

STAR = "*"


def _counting(values) -> str:
    return "".join(f"{value} " for value in values)


def rectangle(rows: int, cols: int) -> list[str]:
    """Return a solid block of *rows* lines, each *cols* stars wide."""
    return [STAR * cols for _ in range(rows)]


def hollow_rectangle(rows: int, cols: int) -> list[str]:
    """Return a rectangle outline: full first and last rows, stars on the sides."""

    def cell(i: int, j: int) -> str:
        on_border = i in (1, rows) or j in (1, cols)
        return STAR if on_border else " "

    return [
        "".join(cell(i, j) for j in range(1, cols + 1))
        for i in range(1, rows + 1)
    ]


def right_triangle(rows: int) -> list[str]:
    """Return a left-aligned triangle whose line i holds i stars."""
    return [STAR * i for i in range(1, rows + 1)]


def inverted_triangle(rows: int) -> list[str]:
    """Return a left-aligned triangle that shrinks from *rows* stars to one."""
    return [STAR * i for i in range(rows, 0, -1)]


def right_aligned_triangle(rows: int) -> list[str]:
    """Return a right-aligned triangle of ``"* "`` cells, two columns per cell."""
    return ["  " * (rows - i) + "* " * i for i in range(1, rows + 1)]


def number_triangle(rows: int) -> list[str]:
    """Return lines counting ``1 2 ... i`` for i from 1 to *rows*."""
    return [_counting(range(1, i + 1)) for i in range(1, rows + 1)]


def repeated_number_triangle(rows: int) -> list[str]:
    """Return lines in which the number i is written i times."""
    return [f"{i} " * i for i in range(1, rows + 1)]


def descending_count_triangle(rows: int) -> list[str]:
    """Return shrinking lines: *rows* ones, then rows-1 twos, down to one number."""
    return [
        f"{count} " * width
        for count, width in enumerate(range(rows, 0, -1), start=1)
    ]


def centered_number_pyramid(rows: int) -> list[str]:
    """Return a pyramid of counting numbers, each line padded on the right."""
    padding = " " * max(rows - 1, 0)
    return [
        " " * (rows - i) + _counting(range(1, i + 1)) + padding
        for i in range(1, rows + 1)
    ]


def parallelogram(rows: int) -> list[str]:
    """Return *rows* lines of *rows* stars, each shifted one column further left."""
    return [" " * (rows - i) + STAR * rows for i in range(1, rows + 1)]


def hollow_parallelogram(rows: int) -> list[str]:
    """Return the outline of :func:`parallelogram`."""

    def cell(i: int, k: int) -> str:
        on_border = i in (1, rows) or k in (1, rows)
        return STAR if on_border else " "

    return [
        " " * (rows - i) + "".join(cell(i, k) for k in range(1, rows + 1))
        for i in range(1, rows + 1)
    ]


def pyramid(rows: int) -> list[str]:
    """Return a centred pyramid of ``"* "`` cells."""
    return [
        " " * (2 * rows - 2 - i) + "* " * (i + 1)
        for i in range(rows)
    ]