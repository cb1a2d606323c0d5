"""
Which bets may be called or answered right now, and what a refusal pays.

All predicates return False instead of raising: "not now" is an ordinary
answer the orchestrator uses to reject a player's action.
"""
from __future__ import annotations

from .betting import (
    BetFamily,
    BetStatus,
    BetType,
    BettingState,
    EnvidoBet,
    FlorBet,
    TrucoBet,
    bet_family,
    get_envido_points,
    get_flor_points,
)
from .config import GameConfig
from .errors import InvalidInput
from .players import PlayerId
from .state import GamePhase

# Envido and Flor are only callable before the first card of the hand
PRE_PLAY_PHASES = (GamePhase.BETTING, GamePhase.DEALING)

_ANSWERED = (BetStatus.ACCEPTED, BetStatus.RAISED)


def can_call_truco_bet(state: BettingState, bet_type: BetType) -> bool:
    if not isinstance(bet_type, TrucoBet):
        return False
    last = state.last_bet(BetFamily.TRUCO)

    if bet_type == TrucoBet.TRUCO:
        return last is None or not last.is_pending
    # Retruco after an accepted Truco, Vale Cuatro after an accepted Retruco
    previous = TrucoBet.RETRUCO if bet_type == TrucoBet.VALE_CUATRO else TrucoBet.TRUCO
    return last is not None and last.type == previous and last.status == BetStatus.ACCEPTED


def can_call_envido_bet(
    state: BettingState,
    bet_type: BetType,
    phase: GamePhase,
    config: GameConfig,
) -> bool:
    if not isinstance(bet_type, EnvidoBet):
        return False
    if phase not in PRE_PLAY_PHASES:
        return False
    if state.envido_resolved:
        return False

    last = state.last_bet(BetFamily.ENVIDO)

    if bet_type == EnvidoBet.ENVIDO:
        return last is None or not last.is_pending

    if last is None:
        return False

    if bet_type == EnvidoBet.ENVIDO_ENVIDO:
        return last.type == EnvidoBet.ENVIDO and last.status in _ANSWERED

    if bet_type == EnvidoBet.REAL_ENVIDO:
        if config.real_envido_multiple:
            return not last.is_pending
        return (
            last.type in (EnvidoBet.ENVIDO, EnvidoBet.ENVIDO_ENVIDO)
            and last.status in _ANSWERED
        )

    # Falta Envido
    return last.status in _ANSWERED


def can_call_flor_bet(
    state: BettingState,
    bet_type: BetType,
    phase: GamePhase,
    player_has_flor: bool,
    config: GameConfig,
) -> bool:
    if not isinstance(bet_type, FlorBet):
        return False
    if not config.flor_enabled:
        return False
    if phase not in PRE_PLAY_PHASES:
        return False
    if state.flor_resolved:
        return False

    last = state.last_bet(BetFamily.FLOR)

    if bet_type == FlorBet.FLOR:
        # Only once per hand, even after a refusal
        return player_has_flor and last is None
    if bet_type == FlorBet.CONTRA_FLOR:
        return (
            player_has_flor
            and last is not None
            and last.type == FlorBet.FLOR
            and last.is_pending
        )
    return last is not None and last.type == FlorBet.CONTRA_FLOR and last.status == BetStatus.ACCEPTED


def can_respond_to_bet(
    state: BettingState,
    bet_type: BetType,
    player_id: PlayerId,
    caller_id: PlayerId,
) -> bool:
    """A player other than the caller may answer while the family's last bet is pending."""
    if player_id == caller_id:
        return False
    try:
        family = bet_family(bet_type)
    except InvalidInput:
        return False
    last = state.last_bet(family)
    return last is not None and last.is_pending


def get_decline_points(bet_type: BetType, state: BettingState) -> int:
    """
    Points the caller's side earns when ``bet_type`` is refused.

    Truco: the value before the refused call (1, 2, 3). Envido: the calls
    made before the refused one, at least 1. Flor: 3 or 6, REST_OF_GAME for
    Contra Flor al Resto.
    """
    if isinstance(bet_type, TrucoBet):
        return bet_type.rank

    if isinstance(bet_type, EnvidoBet):
        bets = state.envido_bets
        if not bets:
            return 0
        total = 0
        for bet in bets[:-1]:
            points = get_envido_points(bet.type)
            if points > 0:
                total += points
        return total or 1

    if isinstance(bet_type, FlorBet):
        return get_flor_points(bet_type)

    return 0
