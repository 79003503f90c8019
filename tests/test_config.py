"""Tests for GameSettings and the error hierarchy."""

import pytest

from rezzo.config import GameSettings
from rezzo.core.zobrist import DEFAULT_SEED
from rezzo.errors import (
    ConfigurationError,
    NotYourTurnError,
    RezzoError,
    SeatError,
)


class TestGameSettings:
    def test_defaults(self) -> None:
        settings = GameSettings()
        assert settings.board_size == 13
        assert settings.zobrist_seed == DEFAULT_SEED
        assert settings.game_id_length == 6

    def test_from_empty_env(self) -> None:
        assert GameSettings.from_env({}) == GameSettings()

    def test_from_env(self) -> None:
        settings = GameSettings.from_env(
            {
                "REZZO_BOARD_SIZE": "9",
                "REZZO_ZOBRIST_SEED": "0x10",
                "REZZO_GAME_ID_LENGTH": " 8 ",
            }
        )
        assert settings == GameSettings(board_size=9, zobrist_seed=16, game_id_length=8)

    def test_blank_value_means_default(self) -> None:
        assert GameSettings.from_env({"REZZO_BOARD_SIZE": "  "}).board_size == 13

    def test_reads_process_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REZZO_BOARD_SIZE", "11")
        assert GameSettings.from_env().board_size == 11

    def test_not_a_number(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            GameSettings.from_env({"REZZO_BOARD_SIZE": "big"})
        assert exc_info.value.context == {"REZZO_BOARD_SIZE": "big"}

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"board_size": 4},
            {"board_size": 27},
            {"zobrist_seed": -1},
            {"game_id_length": 3},
            {"game_id_length": 33},
        ],
    )
    def test_out_of_range(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ConfigurationError):
            GameSettings(**kwargs)


class TestErrors:
    def test_str_without_context(self) -> None:
        assert str(RezzoError("boom")) == "[REZZO_ERROR] boom"

    def test_str_with_context(self) -> None:
        err = NotYourTurnError("Not your turn", context={"game_id": "ABC123"})
        assert str(err) == "[NOT_YOUR_TURN] Not your turn (game_id=ABC123)"

    def test_code_override(self) -> None:
        assert RezzoError("x", code="CUSTOM").code == "CUSTOM"

    def test_to_dict(self) -> None:
        err = ConfigurationError("bad", context={"board_size": 4})
        assert err.to_dict() == {
            "code": "CONFIGURATION_ERROR",
            "message": "bad",
            "context": {"board_size": 4},
        }

    def test_hierarchy(self) -> None:
        err = NotYourTurnError("Not your turn")
        assert isinstance(err, SeatError)
        assert isinstance(err, RezzoError)
        assert isinstance(err, Exception)
