"""
Game configuration: player count and the rule variants the engine honours.

Defaults describe traditional Argentine Truco (4 players, Flor, Falta Envido
to the losing side, 30 points with Las Buenas from 15).
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from .errors import InvalidConfiguration, InvalidPlayerCount

SUPPORTED_PLAYER_COUNTS = (2, 4, 6)
PICA_PICA_PLAYERS = 6


class FaltaEnvidoMode(str, Enum):
    """Whose distance to the winning score Falta Envido is worth."""
    TO_LEADER = "to_leader"
    TO_LOSER = "to_loser"  # traditional


@dataclass(frozen=True)
class GameConfig:
    num_players: int = 4
    flor_enabled: bool = True
    # Allow Real Envido to be called again after any answered Envido bet
    real_envido_multiple: bool = False
    falta_envido_mode: FaltaEnvidoMode = FaltaEnvidoMode.TO_LOSER
    winning_score: int = 30
    las_buenas_threshold: int = 15
    # 6 players, everyone on their own
    pica_pica_mode: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.falta_envido_mode, FaltaEnvidoMode):
            try:
                object.__setattr__(self, "falta_envido_mode", FaltaEnvidoMode(self.falta_envido_mode))
            except ValueError:
                raise InvalidConfiguration(
                    f"Unknown Falta Envido mode: {self.falta_envido_mode!r}"
                ) from None
        validate_game_config(self)

    def with_options(self, **options: Any) -> "GameConfig":
        """Copy with some options changed (validated again)."""
        return replace(self, **options)


def validate_game_config(config: GameConfig) -> bool:
    """Return True for a valid config, raise InvalidConfiguration otherwise."""
    if config.num_players not in SUPPORTED_PLAYER_COUNTS:
        raise InvalidPlayerCount("Number of players must be 2, 4, or 6")
    if config.pica_pica_mode and config.num_players != PICA_PICA_PLAYERS:
        raise InvalidConfiguration("Pica Pica mode is only available for 6-player games")
    if config.winning_score <= 0:
        raise InvalidConfiguration("Winning score must be positive")
    if config.las_buenas_threshold < 0 or config.las_buenas_threshold >= config.winning_score:
        raise InvalidConfiguration("Las Buenas threshold must be between 0 and winning score")
    return True


def create_game_config(**options: Any) -> GameConfig:
    """Traditional config with the given options overridden."""
    unknown = set(options) - {f.name for f in fields(GameConfig)}
    if unknown:
        raise InvalidConfiguration(f"Unknown config options: {', '.join(sorted(unknown))}")
    return GameConfig(**options)


GAME_PRESETS: Mapping[str, GameConfig] = MappingProxyType({
    "traditional": GameConfig(),
    "two_player": GameConfig(num_players=2, flor_enabled=False),
    "quick": GameConfig(winning_score=15, las_buenas_threshold=8),
    "flexible_envido": GameConfig(real_envido_multiple=True),
    "falta_to_leader": GameConfig(falta_envido_mode=FaltaEnvidoMode.TO_LEADER),
    "pica_pica": GameConfig(num_players=6, pica_pica_mode=True),
})
