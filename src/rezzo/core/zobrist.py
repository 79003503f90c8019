"""Zobrist hashing keys for incremental position signatures."""

from __future__ import annotations

from functools import lru_cache
from typing import Final

from rezzo.core.enums import Side
from rezzo.core.types import Cell

DEFAULT_SEED: Final = 0xA5B3C7D9E1F23412
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF


def _splitmix64(state: int) -> int:
    """Deterministic 64-bit bit-mixer suitable for static key generation."""
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


class ZobristKeys:
    """Immutable key table for one board size.

    Every ``(cell, side)`` pair and the side-to-move marker draw a distinct
    index from the same splitmix64 stream, so no two keys are derived from
    the same input.
    """

    __slots__ = ("size", "seed", "_cell_keys", "_side_to_move_key")

    def __init__(self, size: int, seed: int = DEFAULT_SEED) -> None:
        self.size = size
        self.seed = seed
        n_cells = size * size
        # [side - 1][row * size + col]
        self._cell_keys: tuple[tuple[int, ...], ...] = tuple(
            tuple(_splitmix64(seed + side_idx * n_cells + idx) for idx in range(n_cells))
            for side_idx in range(2)
        )
        self._side_to_move_key: int = _splitmix64(seed + 2 * n_cells)

    def cell_key(self, cell: Cell, side: Side) -> int:
        """Hash key for *side* occupying *cell*."""
        return self._cell_keys[int(side) - 1][cell[0] * self.size + cell[1]]

    @property
    def side_to_move_key(self) -> int:
        """Toggle applied when BLUE is the next side to move."""
        return self._side_to_move_key

    def signature(self, occupancy_key: int, side_to_move: Side) -> int:
        """Fold the side to move into a board occupancy key."""
        if side_to_move is Side.BLUE:
            return occupancy_key ^ self._side_to_move_key
        return occupancy_key


@lru_cache(maxsize=None)
def keys_for(size: int, seed: int = DEFAULT_SEED) -> ZobristKeys:
    """Shared key table for a board size and seed."""
    return ZobristKeys(size, seed)
