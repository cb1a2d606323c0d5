"""
Errors raised by the rules engine.

Query-style checks (``can_call_*``, ``can_respond_to_bet``) never raise; they
return False. Everything below signals a caller passing data that should have
been validated upstream.
"""
from __future__ import annotations


class TrucoError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(TrucoError, ValueError):
    """Bad game configuration (thresholds, Pica Pica misuse, ...)."""


class InvalidPlayerCount(InvalidConfiguration):
    """Player count outside the supported set."""


class InvalidInput(TrucoError, ValueError):
    """Malformed argument, e.g. a card that is not in the Spanish deck."""


class NotFound(TrucoError, LookupError):
    """Missing player, team or position."""


class PlayerNotFound(NotFound):
    pass


class TeamNotFound(NotFound):
    pass


class InvalidState(TrucoError, ValueError):
    """Operation not applicable to the given game state."""


class EmptyTrick(InvalidState):
    pass


class NoResultYet(InvalidState):
    pass


class MissingWinnerPosition(InvalidState):
    pass


class InvalidIndex(TrucoError, IndexError):
    """Out-of-range index into a player's hand."""


class InsufficientCards(TrucoError, ValueError):
    """Not enough cards left in the deck."""
