"""Cell and axis type aliases plus coordinate helpers.

Board layout: ``(row, col)`` with row 0 on RED's home edge and col 0 on the
left. Human-readable names use a column letter and a 1-based row::

    (0, 0) = a1, (0, 1) = b1, ..., (12, 12) = m13
"""

from __future__ import annotations

from typing import TypeAlias

Cell: TypeAlias = tuple[int, int]  # (row, col)
Axis: TypeAlias = tuple[int, int]  # (d_row, d_col), components in -1..1

MIN_BOARD_SIZE = 5
MAX_BOARD_SIZE = 26  # one column letter per file
DEFAULT_BOARD_SIZE = 13


def check_board_size(size: int) -> int:
    """Return *size* unchanged or raise ``ValueError`` when it is unplayable."""
    if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise ValueError(
            f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}: {size!r}"
        )
    return size
