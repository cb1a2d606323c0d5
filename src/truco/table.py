"""
Seating: players and teams for a new game, dealer rotation and turn order.

Positions run 0..n-1 and turn order always moves to the next position, so
the player to the dealer's right (``dealer + 1``) is mano and plays first.
Standard games have two teams, even seats against odd seats. Pica Pica
(6 players) gives every player a team of their own.
"""
from __future__ import annotations

import logging
from typing import Mapping, NamedTuple, Sequence

from .config import GameConfig
from .errors import NotFound, PlayerNotFound, TeamNotFound
from .players import Player, PlayerId, Team, TeamId, create_player, create_team, set_player_dealer

logger = logging.getLogger(__name__)

TEAM_1_ID: TeamId = "team-1"
TEAM_2_ID: TeamId = "team-2"


class GameSetup(NamedTuple):
    players: tuple[Player, ...]
    teams: tuple[Team, ...]
    dealer_position: int


def player_id_for(position: int) -> PlayerId:
    return f"player-{position}"


def setup_game(config: GameConfig, player_names: Sequence[str | None] = ()) -> GameSetup:
    """
    Seat ``config.num_players`` players. Missing or empty names default to
    'Player N' (1-indexed). Position 0 deals first.
    """
    n = config.num_players
    names = [
        (player_names[i] if i < len(player_names) and player_names[i] else f"Player {i + 1}")
        for i in range(n)
    ]

    players: list[Player] = []
    teams: list[Team] = []

    if config.pica_pica_mode:
        for i in range(n):
            pid = player_id_for(i)
            tid = f"team-{i}"
            teams.append(create_team(tid, names[i], [pid]))
            players.append(create_player(pid, names[i], tid, i))
    else:
        for i in range(n):
            tid = TEAM_1_ID if i % 2 == 0 else TEAM_2_ID
            players.append(create_player(player_id_for(i), names[i], tid, i))
        for tid, tname in ((TEAM_1_ID, "Team 1"), (TEAM_2_ID, "Team 2")):
            teams.append(create_team(tid, tname, [p.id for p in players if p.team_id == tid]))

    dealer_position = 0
    players[dealer_position] = set_player_dealer(players[dealer_position], True)

    logger.debug(
        "Set up %d players in %d teams%s",
        n,
        len(teams),
        " (Pica Pica)" if config.pica_pica_mode else "",
    )
    return GameSetup(players=tuple(players), teams=tuple(teams), dealer_position=dealer_position)


def rotate_dealer(players: Sequence[Player], current_dealer_position: int) -> tuple[Player, ...]:
    """New players with the dealer moved to the next position."""
    next_dealer = (current_dealer_position + 1) % len(players)
    logger.debug("Dealer moves from position %d to %d", current_dealer_position, next_dealer)
    return tuple(set_player_dealer(p, p.position == next_dealer) for p in players)


def get_first_player(dealer_position: int, num_players: int) -> int:
    """Mano: the player right after the dealer leads the first trick."""
    return (dealer_position + 1) % num_players


def get_next_player(current_position: int, num_players: int) -> int:
    return (current_position + 1) % num_players


def get_players_in_turn_order(players: Sequence[Player], start_position: int) -> list[Player]:
    """All players, rotated so that ``start_position`` comes first."""
    by_position = {p.position: p for p in players}
    n = len(players)
    ordered: list[Player] = []
    for i in range(n):
        player = by_position.get((start_position + i) % n)
        if player is not None:
            ordered.append(player)
    return ordered


def get_player_at_position(players: Sequence[Player], position: int) -> Player:
    for p in players:
        if p.position == position:
            return p
    raise PlayerNotFound(f"No player found at position {position}")


def get_team_players(players: Sequence[Player], team_id: TeamId) -> list[Player]:
    return [p for p in players if p.team_id == team_id]


def get_player_team(teams: Sequence[Team], player_id: PlayerId) -> Team:
    for t in teams:
        if player_id in t.player_ids:
            return t
    raise NotFound(f"No team found for player {player_id}")


def get_opposing_teams(teams: Sequence[Team], team_id: TeamId) -> tuple[Team, ...]:
    """
    Every team other than ``team_id``: a single team in standard play,
    five in Pica Pica.
    """
    if not any(t.id == team_id for t in teams):
        raise TeamNotFound(f"Team {team_id} not found")
    return tuple(t for t in teams if t.id != team_id)


def build_position_team_map(players: Sequence[Player]) -> Mapping[int, TeamId]:
    """position -> team id, as consumed by trick resolution."""
    return {p.position: p.team_id for p in players}
