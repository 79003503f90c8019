"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable, Iterator

import pytest

from rezzo.core.board import Board
from rezzo.core.enums import Side
from rezzo.core.types import Cell
from rezzo.game.controller import GameController

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

BoardFactory = Callable[..., Board]
ControllerFactory = Callable[..., GameController]


def _build_board(size: int, red: Iterable[Cell] = (), blue: Iterable[Cell] = ()) -> Board:
    board = Board(size)
    for cell in red:
        board[cell] = Side.RED
    for cell in blue:
        board[cell] = Side.BLUE
    return board


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton Qt core application for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def make_board() -> BoardFactory:
    """``make_board(size, red=[...], blue=[...])`` on an otherwise empty board."""
    return _build_board


@pytest.fixture
def make_controller() -> ControllerFactory:
    """Controller whose game starts from a custom, post-opening position."""

    def _make(
        size: int,
        red: Iterable[Cell] = (),
        blue: Iterable[Cell] = (),
        side_to_move: Side = Side.RED,
    ) -> GameController:
        ctrl = GameController()
        ctrl.new_game(board=_build_board(size, red, blue), side_to_move=side_to_move)
        return ctrl

    return _make
