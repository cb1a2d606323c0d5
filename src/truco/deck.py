"""
The 40-card Spanish deck: creation, shuffling and dealing.
Every function returns new lists; input decks are never modified.
"""
from __future__ import annotations

import logging
import random
from typing import NamedTuple, Sequence

from .cards import ALL_SUITS, VALID_RANKS, Card
from .errors import InsufficientCards, InvalidPlayerCount

logger = logging.getLogger(__name__)

CARDS_PER_PLAYER = 3
DEALABLE_PLAYER_COUNTS = (2, 4, 6)


class DealResult(NamedTuple):
    """Hands in seat order (index 0 receives the first cards) and the undealt rest."""
    hands: list[list[Card]]
    remaining_deck: list[Card]


def create_deck() -> list[Card]:
    """Unshuffled deck, suit by suit (Espadas, Bastos, Oros, Copas), ranks ascending."""
    deck: list[Card] = []
    for suit in ALL_SUITS:
        for rank in VALID_RANKS:
            deck.append(Card(rank, suit))
    return deck


def shuffle_deck(deck: Sequence[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a shuffled copy (Fisher-Yates via ``Random.shuffle``)."""
    if rng is None:
        rng = random.Random()
    shuffled = list(deck)
    rng.shuffle(shuffled)
    return shuffled


def deal_cards(
    deck: Sequence[Card],
    num_players: int,
    cards_per_player: int = CARDS_PER_PLAYER,
) -> DealResult:
    """
    Deal ``cards_per_player`` cards to each of ``num_players`` hands, taking
    consecutive blocks from the front of the deck.
    """
    needed = num_players * cards_per_player
    if len(deck) < needed:
        raise InsufficientCards(
            f"Not enough cards in deck. Need {needed}, have {len(deck)}"
        )
    if num_players not in DEALABLE_PLAYER_COUNTS:
        raise InvalidPlayerCount("Truco must be played with 2, 4, or 6 players")

    hands: list[list[Card]] = []
    idx = 0
    for _ in range(num_players):
        hands.append(list(deck[idx:idx + cards_per_player]))
        idx += cards_per_player

    remaining = list(deck[idx:])
    logger.debug("Dealt %d hands of %d cards, %d left", num_players, cards_per_player, len(remaining))
    return DealResult(hands=hands, remaining_deck=remaining)


def create_shuffled_deck(rng: random.Random | None = None) -> list[Card]:
    """A fresh deck, shuffled and ready to deal."""
    return shuffle_deck(create_deck(), rng=rng)
