"""Game management layer - controller, turn state machine, sessions.

Quick start::

    from rezzo.game import GameController

    ctrl = GameController.create(13)
    result = ctrl.process_intent((1, 6), (2, 6))
    print(result.success, ctrl.state.side_to_move)
"""

from rezzo.game.controller import GameController, GameEvents
from rezzo.game.interfaces import IGameController, MoveResult, RejectReason, TurnPhase
from rezzo.game.session import GameSession, GameStore, Seat
from rezzo.game.state import GameSnapshot, GameState, TurnTransition

__all__ = [
    # Interfaces
    "IGameController",
    "MoveResult",
    "RejectReason",
    "TurnPhase",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSession",
    "GameSnapshot",
    "GameState",
    "GameStore",
    "Seat",
    "TurnTransition",
]
