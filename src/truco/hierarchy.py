"""
Card hierarchy for Argentine Truco.

From highest to lowest: Ancho de Espadas, Ancho de Bastos, 7 de Espadas,
7 de Oros, 3s, 2s, falsos Anchos (1 de Oros / Copas), 12s, 11s, 10s,
falsos 7s (7 de Bastos / Copas), 6s, 5s, 4s. Only the four special cards
care about suit; everything else ties across suits.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Sequence

from .cards import ALL_SUITS, SPECIAL_CARDS, VALID_RANKS, Card, Suit
from .errors import InvalidInput

CardComparison = Literal[1, -1, 0]

# (rank, suit) for suit-dependent cards
_SUITED_VALUES = MappingProxyType({
    (1, Suit.ESPADAS): 14,
    (1, Suit.BASTOS): 13,
    (7, Suit.ESPADAS): 12,
    (7, Suit.OROS): 11,
    (1, Suit.OROS): 8,
    (1, Suit.COPAS): 8,
    (7, Suit.BASTOS): 4,
    (7, Suit.COPAS): 4,
})

# rank -> value when suit does not matter
_RANK_VALUES = MappingProxyType({
    3: 10,
    2: 9,
    12: 7,
    11: 6,
    10: 5,
    6: 3,
    5: 2,
    4: 1,
})


def card_value(card: Card) -> int:
    """Hierarchy value of a card, 14 (Ancho de Espadas) down to 1 (any 4)."""
    value = _SUITED_VALUES.get((card.rank, card.suit))
    if value is None:
        value = _RANK_VALUES.get(card.rank)
    if value is None:
        raise InvalidInput(f"Invalid card: {card.rank} of {card.suit}")
    return value


def compare_cards(a: Card, b: Card) -> CardComparison:
    """
    1 if ``a`` beats ``b``, -1 if ``b`` beats ``a``, 0 on a tie.

    Different cards of equal hierarchy (e.g. two 3s) tie: play order is not
    known here, callers break the tie.
    """
    if a == b:
        return 0
    va = card_value(a)
    vb = card_value(b)
    if va > vb:
        return 1
    if va < vb:
        return -1
    return 0


def compare_cards_with_order(a: Card, b: Card) -> CardComparison:
    """Like compare_cards, but ``a`` was played first so it wins ties."""
    result = compare_cards(a, b)
    if result == 0:
        return 1
    return result


def get_winning_card(cards: Sequence[Card]) -> int:
    """
    Index of the winning card in play order.

    A later card only takes over when it is strictly higher, so on equal
    hierarchy the earliest card is kept.
    """
    if not cards:
        raise InvalidInput("Cannot determine winner with no cards")

    winning_index = 0
    winning_card = cards[0]
    for i in range(1, len(cards)):
        if compare_cards(winning_card, cards[i]) == -1:
            winning_index = i
            winning_card = cards[i]
    return winning_index


def is_special_card(card: Card) -> bool:
    """True for the two Anchos and the 7s of Espadas and Oros."""
    return card in SPECIAL_CARDS


def is_valid_card(rank: object, suit: object) -> bool:
    """True if (rank, suit) names a card of the 40-card deck."""
    if isinstance(rank, bool) or not isinstance(rank, int) or rank not in VALID_RANKS:
        return False
    return suit in ALL_SUITS
