"""
Trick (baza) and hand resolution.

A trick goes to the highest card. Two different cards of equal hierarchy
held by different players make the trick parda (nobody wins it), even though
get_winning_card keeps the first one played.

A hand goes to the first side with two tricks, or to the only side that won
a trick alongside pardas. With one trick each and a parda, the side that won
first takes the hand. If every trick is parda the hand goes to the mano's team.
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import Mapping, NamedTuple

from .errors import EmptyTrick, MissingWinnerPosition, NoResultYet, TeamNotFound
from .hierarchy import compare_cards, get_winning_card
from .players import TeamId
from .state import MAX_TRICKS, Hand, Trick, TrickResult, set_trick_result
from .table import TEAM_1_ID, TEAM_2_ID

logger = logging.getLogger(__name__)

_RESULT_TEAMS = {TrickResult.TEAM1_WIN: TEAM_1_ID, TrickResult.TEAM2_WIN: TEAM_2_ID}


class TrickResolution(NamedTuple):
    result: TrickResult
    winner_position: int | None
    winner_team_id: TeamId | None = None


def _result_for_team(team_id: TeamId, position_to_team: Mapping[int, TeamId]) -> TrickResult:
    # Team labels only mean something in two-team play; Pica Pica wins are all WIN
    if len(set(position_to_team.values())) != 2:
        return TrickResult.WIN
    if team_id == TEAM_1_ID:
        return TrickResult.TEAM1_WIN
    if team_id == TEAM_2_ID:
        return TrickResult.TEAM2_WIN
    return TrickResult.WIN


def resolve_trick(trick: Trick, position_to_team: Mapping[int, TeamId]) -> TrickResolution:
    """Result of a trick from the cards played so far."""
    if not trick.played_cards:
        raise EmptyTrick("Cannot resolve empty trick")

    cards = [pc.card for pc in trick.played_cards]
    winning_index = get_winning_card(cards)
    winning_card = cards[winning_index]

    for i, card in enumerate(cards):
        if i != winning_index and compare_cards(card, winning_card) == 0:
            logger.debug("Trick %d is parda", trick.trick_number)
            return TrickResolution(TrickResult.PARDA, None, None)

    winner_position = trick.played_cards[winning_index].position
    team_id = position_to_team.get(winner_position)
    if team_id is None:
        raise TeamNotFound(f"No team found for position {winner_position}")

    logger.debug("Trick %d won by position %d (%s)", trick.trick_number, winner_position, team_id)
    return TrickResolution(_result_for_team(team_id, position_to_team), winner_position, team_id)


def apply_trick_resolution(trick: Trick, position_to_team: Mapping[int, TeamId]) -> Trick:
    """The trick with its result filled in."""
    resolution = resolve_trick(trick, position_to_team)
    return set_trick_result(trick, resolution.result, resolution.winner_position, resolution.winner_team_id)


def _trick_winner_team(trick: Trick) -> TeamId | None:
    if trick.winner_team_id is not None:
        return trick.winner_team_id
    return _RESULT_TEAMS.get(trick.result)


def determine_hand_winner(hand: Hand) -> TeamId | None:
    """Team that has won the hand, or None while it is undecided."""
    resolved = [t for t in hand.tricks if t.result is not None]
    if not resolved:
        return None

    wins: Counter[TeamId] = Counter()
    pardas = 0
    first_winner: TeamId | None = None
    for trick in resolved:
        if trick.result == TrickResult.PARDA:
            pardas += 1
            continue
        team = _trick_winner_team(trick)
        if team is None:
            continue
        wins[team] += 1
        if first_winner is None:
            first_winner = team

    for team, count in wins.items():
        if count >= 2:
            return team

    if len(resolved) >= 2 and len(wins) == 1 and pardas >= 1:
        return first_winner

    if len(resolved) == MAX_TRICKS:
        if pardas == MAX_TRICKS:
            return hand.mano_team_id
        return first_winner

    return None


def is_hand_complete(hand: Hand) -> bool:
    return hand.winner is not None


def needs_another_trick(hand: Hand) -> bool:
    if hand.winner is not None:
        return False
    if len(hand.tricks) >= MAX_TRICKS and hand.tricks[MAX_TRICKS - 1].result is not None:
        return False
    return determine_hand_winner(hand) is None


def get_next_trick_leader(hand: Hand, previous_leader: int) -> int:
    """
    Who leads the current trick: ``previous_leader`` for the first one, then
    the winner of the trick before (the same leader again after a parda).
    """
    idx = hand.current_trick_index
    if idx == 0:
        return previous_leader

    previous = hand.tricks[idx - 1]
    if previous.result is None:
        raise NoResultYet("Previous trick has no result")
    if previous.result == TrickResult.PARDA:
        return previous_leader
    if previous.winner_position is None:
        raise MissingWinnerPosition("Previous trick has winner result but no winner position")
    return previous.winner_position
