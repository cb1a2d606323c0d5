"""
Spanish deck cards: 4 suits × 10 ranks (1-7, 10 Sota, 11 Caballo, 12 Rey).
8s and 9s are not used in Truco.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidInput


class Suit(str, Enum):
    """Espadas, Bastos, Oros, Copas. Declaration order is the canonical deck order."""
    ESPADAS = "espadas"
    BASTOS = "bastos"
    OROS = "oros"
    COPAS = "copas"


VALID_RANKS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 10, 11, 12)
ALL_SUITS: tuple[Suit, ...] = (Suit.ESPADAS, Suit.BASTOS, Suit.OROS, Suit.COPAS)

RANK_NAMES = {
    1: "Ace",
    2: "Two",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    10: "Jack",
    11: "Knight",
    12: "King",
}

SUIT_NAMES = {
    Suit.ESPADAS: "Swords",
    Suit.BASTOS: "Clubs",
    Suit.OROS: "Coins",
    Suit.COPAS: "Cups",
}


@dataclass(frozen=True)
class Card:
    """A single card. Equal rank and suit means the same card."""

    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or self.rank not in VALID_RANKS:
            raise InvalidInput(f"Invalid rank for a Spanish deck: {self.rank}")
        if not isinstance(self.suit, Suit):
            try:
                object.__setattr__(self, "suit", Suit(self.suit))
            except ValueError:
                raise InvalidInput(f"Invalid suit: {self.suit!r}") from None

    def __str__(self) -> str:
        return f"{self.rank} de {self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({self.rank}, {self.suit.name})"


# Cards whose strength depends on the suit
ANCHO_ESPADAS = Card(1, Suit.ESPADAS)
ANCHO_BASTOS = Card(1, Suit.BASTOS)
SIETE_ESPADAS = Card(7, Suit.ESPADAS)
SIETE_OROS = Card(7, Suit.OROS)

SPECIAL_CARDS: tuple[Card, ...] = (ANCHO_ESPADAS, ANCHO_BASTOS, SIETE_ESPADAS, SIETE_OROS)


def card_name(card: Card) -> str:
    """Display name, e.g. 'Ace of Swords'."""
    return f"{RANK_NAMES[card.rank]} of {SUIT_NAMES[card.suit]}"
