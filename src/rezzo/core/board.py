"""Board - cell occupancy on an N x N grid."""

from __future__ import annotations

from rezzo.core.enums import Side
from rezzo.core.types import DEFAULT_BOARD_SIZE, Cell, check_board_size
from rezzo.core.zobrist import DEFAULT_SEED, ZobristKeys, keys_for


class Board:
    """Mutable N x N board with an incrementally maintained occupancy key.

    A cell holds ``Side.RED``, ``Side.BLUE`` or ``None`` (empty). The
    occupancy key is the XOR of the Zobrist key of every occupied cell and is
    updated on each write, so cloning and restoring a board also restores its
    key.
    """

    __slots__ = ("_size", "_cells", "_keys", "_occupancy_key", "_counts")

    def __init__(self, size: int = DEFAULT_BOARD_SIZE, keys: ZobristKeys | None = None) -> None:
        self._size = check_board_size(size)
        if keys is None:
            keys = keys_for(size, DEFAULT_SEED)
        elif keys.size != size:
            raise ValueError(f"Zobrist table is for size {keys.size}, board is {size}")
        self._keys = keys
        self._cells: list[Side | None] = [None] * (size * size)
        self._occupancy_key = 0
        # [side] -> number of pieces on the board
        self._counts: dict[Side, int] = {Side.RED: 0, Side.BLUE: 0}

    @property
    def size(self) -> int:
        return self._size

    @property
    def keys(self) -> ZobristKeys:
        return self._keys

    @property
    def occupancy_key(self) -> int:
        return self._occupancy_key

    def _index(self, cell: Cell) -> int:
        row, col = cell
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise IndexError(f"Cell {cell!r} is off a {self._size}x{self._size} board")
        return row * self._size + col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Side | None:
        return self._cells[self._index(cell)]

    def __setitem__(self, cell: Cell, side: Side | None) -> None:
        idx = self._index(cell)
        old = self._cells[idx]
        if old == side:
            return
        if old is not None:
            self._occupancy_key ^= self._keys.cell_key(cell, old)
            self._counts[old] -= 1
        self._cells[idx] = side
        if side is not None:
            self._occupancy_key ^= self._keys.cell_key(cell, side)
            self._counts[side] += 1

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell[0] < self._size and 0 <= cell[1] < self._size

    def is_empty(self, cell: Cell) -> bool:
        return self._cells[self._index(cell)] is None

    def is_occupied(self, cell: Cell) -> bool:
        return self._cells[self._index(cell)] is not None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side) -> list[Cell]:
        """Cells occupied by *side*, in row-major order."""
        size = self._size
        return [divmod(idx, size) for idx, occ in enumerate(self._cells) if occ is side]

    def count(self, side: Side) -> int:
        return self._counts[side]

    def row_cells(self, row: int, side: Side) -> list[Cell]:
        """Cells of *row* occupied by *side*."""
        return [(row, col) for col in range(self._size) if self[row, col] is side]

    def compute_occupancy_key(self) -> int:
        """Recompute the occupancy key from scratch (ignores the cached value)."""
        key = 0
        for idx, occ in enumerate(self._cells):
            if occ is not None:
                key ^= self._keys.cell_key(divmod(idx, self._size), occ)
        return key

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._size = self._size
        b._keys = self._keys
        b._cells = self._cells.copy()
        b._occupancy_key = self._occupancy_key
        b._counts = self._counts.copy()
        return b

    def clear(self) -> None:
        self._cells = [None] * (self._size * self._size)
        self._occupancy_key = 0
        self._counts = {Side.RED: 0, Side.BLUE: 0}

    def to_rows(self) -> list[list[int]]:
        """Plain ``int`` grid (0 empty, 1 red, 2 blue), row 0 first."""
        size = self._size
        return [
            [int(occ) if occ is not None else 0 for occ in self._cells[r * size : (r + 1) * size]]
            for r in range(size)
        ]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, size: int = DEFAULT_BOARD_SIZE, keys: ZobristKeys | None = None) -> Board:
        """Starting position: RED fills rows 0-1, BLUE fills the last two rows."""
        b = cls(size, keys)
        for side in (Side.RED, Side.BLUE):
            for row in side.home_rows(size):
                for col in range(size):
                    b[row, col] = side
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __repr__(self) -> str:
        from rezzo.core.notation import board_to_diagram

        return board_to_diagram(self)
