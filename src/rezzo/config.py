"""Engine settings with environment-variable overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from rezzo.core.types import DEFAULT_BOARD_SIZE, check_board_size
from rezzo.core.zobrist import DEFAULT_SEED
from rezzo.errors import ConfigurationError

ENV_BOARD_SIZE = "REZZO_BOARD_SIZE"
ENV_ZOBRIST_SEED = "REZZO_ZOBRIST_SEED"
ENV_GAME_ID_LENGTH = "REZZO_GAME_ID_LENGTH"


@dataclass
class GameSettings:
    """All host-configurable settings."""

    # Board
    board_size: int = DEFAULT_BOARD_SIZE

    # Hashing; changing the seed changes every position signature
    zobrist_seed: int = DEFAULT_SEED

    # Registry
    game_id_length: int = 6

    def __post_init__(self) -> None:
        try:
            check_board_size(self.board_size)
        except ValueError as exc:
            raise ConfigurationError(str(exc), context={"board_size": self.board_size}) from exc
        if self.zobrist_seed < 0:
            raise ConfigurationError(
                "Zobrist seed must be non-negative", context={"zobrist_seed": self.zobrist_seed}
            )
        if not 4 <= self.game_id_length <= 32:
            raise ConfigurationError(
                "Game id length must be between 4 and 32",
                context={"game_id_length": self.game_id_length},
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameSettings:
        """Defaults overridden by ``REZZO_*`` environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            board_size=_int_setting(env, ENV_BOARD_SIZE, DEFAULT_BOARD_SIZE),
            zobrist_seed=_int_setting(env, ENV_ZOBRIST_SEED, DEFAULT_SEED),
            game_id_length=_int_setting(env, ENV_GAME_ID_LENGTH, 6),
        )


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw, 0)  # accepts 0x.. for seeds
    except ValueError:
        raise ConfigurationError(
            f"Invalid integer for {name}", context={name: raw}
        ) from None
