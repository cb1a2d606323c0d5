"""
Envido and Flor hand values.

Envido: two cards of one suit score their values + 20 (best two if all
three share the suit); otherwise the best single card. Figures (10, 11, 12)
count 0. Flor: three cards of one suit, their values + 20.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Literal, Sequence

from .cards import Card, Suit
from .players import TeamId

Side = Literal[1, 2]

ENVIDO_BONUS = 20
FLOR_SIZE = 3


def get_envido_value(card: Card) -> int:
    """Face value for 1-7, 0 for figures."""
    if card.rank >= 10:
        return 0
    return card.rank


def _by_suit(hand: Sequence[Card]) -> dict[Suit, list[Card]]:
    groups: dict[Suit, list[Card]] = defaultdict(list)
    for card in hand:
        groups[card.suit].append(card)
    return groups


def calculate_envido_score(hand: Sequence[Card]) -> int:
    """Best Envido in the hand, 0..33 (0 for an empty hand)."""
    best = 0
    for cards in _by_suit(hand).values():
        values = sorted((get_envido_value(c) for c in cards), reverse=True)
        if len(values) >= 2:
            score = values[0] + values[1] + ENVIDO_BONUS
        else:
            score = values[0]
        best = max(best, score)
    return best


def has_flor(hand: Sequence[Card]) -> bool:
    """True if at least three cards share a suit."""
    return any(len(cards) >= FLOR_SIZE for cards in _by_suit(hand).values())


def calculate_flor_score(hand: Sequence[Card]) -> int | None:
    """Flor value 20..37, or None without Flor."""
    for cards in _by_suit(hand).values():
        if len(cards) >= FLOR_SIZE:
            return sum(get_envido_value(c) for c in cards[:FLOR_SIZE]) + ENVIDO_BONUS
    return None


def determine_envido_winner(score1: int, score2: int, caller_team_id: TeamId) -> Side:
    """
    1 or 2 for the side with the higher score. A tie goes to the side that
    did not call; ``caller_team_id`` is 'team-1' for side 1, anything else
    for side 2.
    """
    if score1 > score2:
        return 1
    if score2 > score1:
        return 2
    return 2 if caller_team_id == "team-1" else 1


def determine_flor_winner(score1: int | None, score2: int | None, tie_winner: Side = 1) -> Side | None:
    """
    None when nobody has Flor, otherwise the side holding it (or the higher
    Flor when both do). Equal Flores go to ``tie_winner``.
    """
    if score1 is None and score2 is None:
        return None
    if score2 is None:
        return 1
    if score1 is None:
        return 2
    if score1 > score2:
        return 1
    if score2 > score1:
        return 2
    return tie_winner
