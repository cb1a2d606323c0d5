"""
Players and teams. Both are frozen; every update returns a new value.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from .cards import Card
from .errors import InvalidIndex

PlayerId = str
TeamId = str


@dataclass(frozen=True)
class Player:
    id: PlayerId
    name: str
    team_id: TeamId
    position: int  # 0..5, turn order follows position
    hand: tuple[Card, ...] = ()
    is_dealer: bool = False


@dataclass(frozen=True)
class Team:
    id: TeamId
    name: str
    player_ids: tuple[PlayerId, ...] = ()  # join order
    score: int = 0


def create_player(
    player_id: PlayerId,
    name: str,
    team_id: TeamId,
    position: int,
    hand: Sequence[Card] = (),
    is_dealer: bool = False,
) -> Player:
    return Player(
        id=player_id,
        name=name,
        team_id=team_id,
        position=position,
        hand=tuple(hand),
        is_dealer=is_dealer,
    )


def create_team(
    team_id: TeamId,
    name: str,
    player_ids: Sequence[PlayerId] = (),
    score: int = 0,
) -> Team:
    # Duplicates dropped, first occurrence keeps its place
    return Team(id=team_id, name=name, player_ids=tuple(dict.fromkeys(player_ids)), score=score)


def update_player_hand(player: Player, hand: Sequence[Card]) -> Player:
    return replace(player, hand=tuple(hand))


def remove_card_from_hand(player: Player, card_index: int) -> Player:
    """New player without the card at ``card_index``."""
    if card_index < 0 or card_index >= len(player.hand):
        raise InvalidIndex(f"Invalid card index: {card_index}")
    hand = player.hand[:card_index] + player.hand[card_index + 1:]
    return replace(player, hand=hand)


def set_player_dealer(player: Player, is_dealer: bool) -> Player:
    return replace(player, is_dealer=is_dealer)


def update_team_score(team: Team, score: int) -> Team:
    return replace(team, score=score)


def add_team_points(team: Team, points: int) -> Team:
    return replace(team, score=team.score + points)


def has_team_won(team: Team, winning_score: int) -> bool:
    return team.score >= winning_score
