"""Move value objects: single steps and train slides."""

from __future__ import annotations

from dataclasses import dataclass

from rezzo.core.enums import AlignmentKind
from rezzo.core.types import Axis, Cell


@dataclass(frozen=True, slots=True)
class Alignment:
    """Classification of an enemy piece met by a train.

    ``length`` is the enemy run length along the train's axis; it is only
    meaningful for :attr:`AlignmentKind.SAME_ORIENTATION` and is 1 otherwise.
    """

    kind: AlignmentKind
    length: int = 1

    def is_capturable_by(self, train_length: int) -> bool:
        """Whether an attacking train of *train_length* may capture here."""
        if self.kind is AlignmentKind.SAME_ORIENTATION:
            return train_length > self.length
        return True


@dataclass(frozen=True, slots=True)
class SingleMove:
    """One piece stepping to an empty cell (king step or knight leap)."""

    from_cell: Cell
    to_cell: Cell

    @property
    def origin(self) -> Cell:
        return self.from_cell

    @property
    def highlights(self) -> tuple[Cell, Cell]:
        return (self.from_cell, self.to_cell)


@dataclass(frozen=True, slots=True)
class TrainMove:
    """A straight run of two or more pieces sliding along its own axis.

    The train occupies ``tail``, ``tail + axis``, ..., ``head``; after the move
    the head sits on ``dest``.
    """

    tail: Cell
    head: Cell
    dest: Cell
    axis: Axis
    length: int
    capture: bool = False
    alignment: Alignment | None = None

    @property
    def origin(self) -> Cell:
        return self.tail

    @property
    def highlights(self) -> tuple[Cell, Cell]:
        return (self.tail, self.dest)

    @property
    def cells(self) -> list[Cell]:
        """Cells occupied by the train before the move, tail first."""
        dr, dc = self.axis
        return [(self.tail[0] + dr * i, self.tail[1] + dc * i) for i in range(self.length)]

    @property
    def shift(self) -> tuple[int, int]:
        return (self.dest[0] - self.head[0], self.dest[1] - self.head[1])


Move = SingleMove | TrainMove
