"""Tests for seating, turn enforcement and the game registry."""

import pytest

from rezzo.config import GameSettings
from rezzo.core.enums import GameResult, Side
from rezzo.errors import (
    GameFinishedError,
    GameNotFoundError,
    NotYourTurnError,
    SeatError,
    SpectatorMoveError,
)
from rezzo.game.interfaces import RejectReason
from rezzo.game.session import GameSession, GameStore, Seat


def _seated(session: GameSession, *identities: str) -> GameSession:
    for identity in identities:
        session.join(identity)
    return session


class TestSeating:
    def test_creator_plays_red(self) -> None:
        session = GameStore().create("alice")
        assert session.seat_of("alice") == Seat.RED
        assert not session.is_full

    def test_second_plays_blue_rest_watch(self) -> None:
        session = _seated(GameStore().create("alice"), "bob", "carol", "dave")
        assert session.seat_of("bob") == Seat.BLUE
        assert session.seat_of("carol") == Seat.SPECTATOR
        assert session.seat_of("dave") == Seat.SPECTATOR
        assert session.is_full
        assert session.identities == ["alice", "bob", "carol", "dave"]

    def test_rejoin_keeps_seat(self) -> None:
        session = _seated(GameStore().create("alice"), "bob")
        assert session.join("alice") == Seat.RED
        assert session.join("bob") == Seat.BLUE
        assert len(session.identities) == 2

    def test_unknown_identity_has_no_seat(self) -> None:
        assert GameStore().create("alice").seat_of("mallory") is None

    def test_seat_sides(self) -> None:
        assert Seat.RED.side is Side.RED
        assert Seat.BLUE.side is Side.BLUE
        assert Seat.SPECTATOR.side is None


class TestSubmit:
    def test_players_alternate(self) -> None:
        session = _seated(GameStore().create("alice"), "bob")
        assert session.submit("alice", (1, 6), (2, 6))
        result = session.submit("bob", (11, 6), (10, 6))
        assert result.success
        assert not result.turn_ended

    def test_rule_violations_are_results(self) -> None:
        session = _seated(GameStore().create("alice"), "bob")
        result = session.submit("alice", (1, 6), (5, 6))
        assert result.reason == RejectReason.INVALID_MOVE

    def test_spectator_cannot_move(self) -> None:
        session = _seated(GameStore().create("alice"), "bob", "carol")
        with pytest.raises(SpectatorMoveError) as exc_info:
            session.submit("carol", (1, 6), (2, 6))
        assert exc_info.value.code == "SPECTATOR_MOVE"
        assert exc_info.value.context["identity"] == "carol"

    def test_stranger_cannot_move(self) -> None:
        session = GameStore().create("alice")
        with pytest.raises(SpectatorMoveError):
            session.submit("mallory", (1, 6), (2, 6))

    def test_wrong_turn(self) -> None:
        session = _seated(GameStore().create("alice"), "bob")
        with pytest.raises(NotYourTurnError) as exc_info:
            session.submit("bob", (11, 6), (10, 6))
        assert isinstance(exc_info.value, SeatError)
        assert session.controller.state.ply_count == 0

    def test_finished_game(self, make_controller) -> None:
        ctrl = make_controller(7, red=[(5, 2)], blue=[(3, 3)])
        session = _seated(GameSession("G1", ctrl), "alice", "bob")
        session.submit("alice", (5, 2), (6, 2))
        assert ctrl.state.result == GameResult.RED_WINS
        with pytest.raises(GameFinishedError):
            session.submit("bob", (3, 3), (2, 3))

    def test_snapshot_for_reconnect(self) -> None:
        session = _seated(GameStore().create("alice"), "bob")
        session.submit("alice", (1, 6), (2, 6))
        data = session.snapshot().to_dict()
        assert data["turn"] == 2
        assert data["board"][2][6] == 1


class TestGameStore:
    def test_create_registers(self) -> None:
        store = GameStore()
        session = store.create("alice")
        assert session.game_id in store
        assert store.get(session.game_id) is session
        assert len(store) == 1
        assert list(store) == [session]

    def test_ids_are_short_codes(self) -> None:
        game_id = GameStore().create("alice").game_id
        assert len(game_id) == 6
        assert game_id.isalnum() and game_id.upper() == game_id

    def test_id_length_from_settings(self) -> None:
        store = GameStore(GameSettings(game_id_length=10))
        assert len(store.create("alice").game_id) == 10

    def test_ids_unique(self) -> None:
        store = GameStore()
        ids = {store.create(f"player{i}").game_id for i in range(20)}
        assert len(ids) == 20

    def test_board_size(self) -> None:
        store = GameStore(GameSettings(board_size=9))
        assert store.create("alice").controller.state.size == 9
        assert store.create("bob", size=7).controller.state.size == 7

    def test_unknown_game(self) -> None:
        with pytest.raises(GameNotFoundError) as exc_info:
            GameStore().get("NOPE42")
        assert exc_info.value.context == {"game_id": "NOPE42"}

    def test_remove(self) -> None:
        store = GameStore()
        session = store.create("alice")
        assert store.remove(session.game_id) is session
        assert session.game_id not in store
        with pytest.raises(GameNotFoundError):
            store.remove(session.game_id)
