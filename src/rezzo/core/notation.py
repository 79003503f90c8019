"""Cell names and text board diagrams.

A diagram lists rows from the highest row index down to row 0, the way a FEN
board field lists ranks from 8 down to 1::

    B B B B B
    . . . . .
    . R . . .
    . . . . .
    R . R R R

``R`` is red, ``B`` is blue and ``.`` is empty. Whitespace between cells is
optional.
"""

from __future__ import annotations

import string

from rezzo.core.board import Board
from rezzo.core.enums import Side
from rezzo.core.types import MAX_BOARD_SIZE, Cell
from rezzo.core.zobrist import ZobristKeys

_FILES = string.ascii_lowercase[:MAX_BOARD_SIZE]

_CHAR_TO_SIDE: dict[str, Side | None] = {"R": Side.RED, "B": Side.BLUE, ".": None}
_SIDE_TO_CHAR: dict[Side | None, str] = {v: k for k, v in _CHAR_TO_SIDE.items()}


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. ``(0, 0)`` -> ``'a1'``, ``(12, 4)`` -> ``'e13'``."""
    row, col = cell
    if not (0 <= col < MAX_BOARD_SIZE) or row < 0:
        raise ValueError(f"Cell has no name: {cell!r}")
    return f"{_FILES[col]}{row + 1}"


def parse_cell(name: str) -> Cell:
    """Parse a cell name, e.g. ``'e13'`` -> ``(12, 4)``."""
    if len(name) < 2 or name[0] not in _FILES or not name[1:].isdigit():
        raise ValueError(f"Invalid cell name: {name!r}")
    row = int(name[1:]) - 1
    if row < 0:
        raise ValueError(f"Invalid cell name: {name!r}")
    return (row, _FILES.index(name[0]))


def board_to_diagram(board: Board, *, labels: bool = True) -> str:
    """Render *board* as text, highest row first."""
    size = board.size
    width = len(str(size))
    lines: list[str] = []
    for row in range(size - 1, -1, -1):
        cells = " ".join(_SIDE_TO_CHAR[board[row, col]] for col in range(size))
        lines.append(f"{row + 1:>{width}} {cells}" if labels else cells)
    if labels:
        lines.append(" " * (width + 1) + " ".join(_FILES[:size]))
    return "\n".join(lines)


def board_from_diagram(diagram: str, keys: ZobristKeys | None = None) -> Board:
    """Build a board from a diagram (see module docstring)."""
    rows: list[list[Side | None]] = []
    for line in diagram.strip().splitlines():
        chars = "".join(line.split())
        if not chars:
            continue
        try:
            rows.append([_CHAR_TO_SIDE[ch] for ch in chars])
        except KeyError as exc:
            raise ValueError(f"Invalid diagram character {exc.args[0]!r}") from None

    size = len(rows)
    if any(len(r) != size for r in rows):
        raise ValueError(f"Invalid diagram (must be square, {size} rows): {diagram!r}")

    board = Board(size, keys)
    for i, cells in enumerate(rows):
        row = size - 1 - i
        for col, side in enumerate(cells):
            board[row, col] = side
    return board
