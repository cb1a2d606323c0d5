"""
Bets and the per-hand betting state.

Three independent ladders:
  Truco:  Truco (2) < Retruco (3) < Vale Cuatro (4)
  Envido: Envido (2) < Envido Envido (+2) < Real Envido (+3) < Falta Envido
  Flor:   Flor (3) < Contra Flor (6) < Contra Flor al Resto

Each ladder keeps its bets in call order; only the last one may be pending.
Answering a bet never edits it: the answered copy replaces it in a new state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from .config import FaltaEnvidoMode, GameConfig
from .errors import InvalidInput, InvalidState
from .players import PlayerId, TeamId

logger = logging.getLogger(__name__)

# Sentinel for "whatever the leader/loser still needs to win the game"
REST_OF_GAME = -1


class _Ladder(str, Enum):
    """Bet names of one family, declared lowest first."""

    @property
    def rank(self) -> int:
        return list(type(self)).index(self) + 1


class TrucoBet(_Ladder):
    TRUCO = "truco"
    RETRUCO = "retruco"
    VALE_CUATRO = "vale_cuatro"


class EnvidoBet(_Ladder):
    ENVIDO = "envido"
    ENVIDO_ENVIDO = "envido_envido"
    REAL_ENVIDO = "real_envido"
    FALTA_ENVIDO = "falta_envido"


class FlorBet(_Ladder):
    FLOR = "flor"
    CONTRA_FLOR = "contra_flor"
    CONTRA_FLOR_AL_RESTO = "contra_flor_al_resto"


BetType = Union[TrucoBet, EnvidoBet, FlorBet]


class BetFamily(str, Enum):
    TRUCO = "truco"
    ENVIDO = "envido"
    FLOR = "flor"


class BetResponse(str, Enum):
    ACCEPT = "accept"
    DECLINE = "decline"
    RAISE = "raise"


class BetStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    RAISED = "raised"


_STATUS_FOR_RESPONSE = {
    BetResponse.ACCEPT: BetStatus.ACCEPTED,
    BetResponse.DECLINE: BetStatus.DECLINED,
    BetResponse.RAISE: BetStatus.RAISED,
}

TRUCO_POINTS = {TrucoBet.TRUCO: 2, TrucoBet.RETRUCO: 3, TrucoBet.VALE_CUATRO: 4}
# What each call adds to the Envido chain
ENVIDO_POINTS = {
    EnvidoBet.ENVIDO: 2,
    EnvidoBet.ENVIDO_ENVIDO: 2,
    EnvidoBet.REAL_ENVIDO: 3,
    EnvidoBet.FALTA_ENVIDO: REST_OF_GAME,
}
FLOR_POINTS = {FlorBet.FLOR: 3, FlorBet.CONTRA_FLOR: 6, FlorBet.CONTRA_FLOR_AL_RESTO: REST_OF_GAME}


def bet_family(bet_type: BetType) -> BetFamily:
    if isinstance(bet_type, TrucoBet):
        return BetFamily.TRUCO
    if isinstance(bet_type, EnvidoBet):
        return BetFamily.ENVIDO
    if isinstance(bet_type, FlorBet):
        return BetFamily.FLOR
    raise InvalidInput(f"Unknown bet type: {bet_type!r}")


@dataclass(frozen=True)
class Bet:
    type: BetType
    caller_id: PlayerId
    caller_team_id: TeamId
    points_at_stake: int
    status: BetStatus = BetStatus.PENDING
    responder_id: PlayerId | None = None
    response: BetResponse | None = None

    @property
    def family(self) -> BetFamily:
        return bet_family(self.type)

    @property
    def is_pending(self) -> bool:
        return self.status == BetStatus.PENDING


@dataclass(frozen=True)
class BettingState:
    truco_bets: tuple[Bet, ...] = ()
    envido_bets: tuple[Bet, ...] = ()
    flor_bets: tuple[Bet, ...] = ()
    current_truco_value: int = 1  # 1 until a Truco bet is accepted
    envido_resolved: bool = False
    flor_resolved: bool = False

    def bets_for(self, family: BetFamily) -> tuple[Bet, ...]:
        if family == BetFamily.TRUCO:
            return self.truco_bets
        if family == BetFamily.ENVIDO:
            return self.envido_bets
        return self.flor_bets

    def last_bet(self, family: BetFamily) -> Bet | None:
        bets = self.bets_for(family)
        return bets[-1] if bets else None


_FIELD_FOR_FAMILY = {
    BetFamily.TRUCO: "truco_bets",
    BetFamily.ENVIDO: "envido_bets",
    BetFamily.FLOR: "flor_bets",
}


def create_bet(
    bet_type: BetType,
    caller_id: PlayerId,
    caller_team_id: TeamId,
    points_at_stake: int | None = None,
) -> Bet:
    """New pending bet. Points default to the call's own table value."""
    if points_at_stake is None:
        points_at_stake = get_bet_points(bet_type)
    return Bet(
        type=bet_type,
        caller_id=caller_id,
        caller_team_id=caller_team_id,
        points_at_stake=points_at_stake,
    )


def respond_to_bet(bet: Bet, response: BetResponse, responder_id: PlayerId) -> Bet:
    """Answered copy of ``bet``."""
    return replace(
        bet,
        response=response,
        responder_id=responder_id,
        status=_STATUS_FOR_RESPONSE[response],
    )


def create_betting_state() -> BettingState:
    return BettingState()


def add_bet(state: BettingState, bet: Bet) -> BettingState:
    """Append ``bet`` to its family. The previous bet of that family must be answered."""
    family = bet.family
    last = state.last_bet(family)
    if last is not None and last.is_pending:
        raise InvalidState(f"Cannot add {bet.type.value}: {last.type.value} is still pending")
    field_name = _FIELD_FOR_FAMILY[family]
    logger.debug("%s called %s (%d points at stake)", bet.caller_id, bet.type.value, bet.points_at_stake)
    return replace(state, **{field_name: state.bets_for(family) + (bet,)})


def update_last_bet(state: BettingState, bet: Bet) -> BettingState:
    """Replace the last bet of ``bet``'s family, e.g. with its answered copy."""
    family = bet.family
    bets = state.bets_for(family)
    if not bets or bets[-1].type != bet.type or bets[-1].caller_id != bet.caller_id:
        raise InvalidState(f"{bet.type.value} by {bet.caller_id} is not the last {family.value} bet")
    field_name = _FIELD_FOR_FAMILY[family]
    return replace(state, **{field_name: bets[:-1] + (bet,)})


def answer_pending_bet(
    state: BettingState,
    family: BetFamily,
    response: BetResponse,
    responder_id: PlayerId,
) -> BettingState:
    """
    Answer the pending bet of ``family``. An accepted Truco call also raises
    ``current_truco_value`` to that call's value.
    """
    last = state.last_bet(family)
    if last is None or not last.is_pending:
        raise InvalidState(f"No pending {family.value} bet to answer")
    answered = respond_to_bet(last, response, responder_id)
    new_state = update_last_bet(state, answered)
    if family == BetFamily.TRUCO and response == BetResponse.ACCEPT:
        new_state = set_truco_value(new_state, get_truco_points(last.type))
    logger.debug("%s answered %s with %s", responder_id, last.type.value, response.value)
    return new_state


def set_truco_value(state: BettingState, value: int) -> BettingState:
    return replace(state, current_truco_value=value)


def resolve_envido(state: BettingState) -> BettingState:
    return replace(state, envido_resolved=True)


def resolve_flor(state: BettingState) -> BettingState:
    return replace(state, flor_resolved=True)


def get_next_truco_bet(current: TrucoBet | None) -> TrucoBet | None:
    """Next call up the Truco ladder, None past Vale Cuatro."""
    if current is None:
        return TrucoBet.TRUCO
    ladder = list(TrucoBet)
    if current.rank < len(ladder):
        return ladder[current.rank]
    return None


def get_truco_points(bet_type: BetType) -> int:
    """Hand value once this call is accepted; 1 for anything else."""
    return TRUCO_POINTS.get(bet_type, 1)


def get_envido_points(bet_type: BetType) -> int:
    """What this call adds to the Envido chain (REST_OF_GAME for Falta)."""
    return ENVIDO_POINTS.get(bet_type, 0)


def get_flor_points(bet_type: BetType) -> int:
    return FLOR_POINTS.get(bet_type, 0)


def get_bet_points(bet_type: BetType) -> int:
    family = bet_family(bet_type)
    if family == BetFamily.TRUCO:
        return get_truco_points(bet_type)
    if family == BetFamily.ENVIDO:
        return get_envido_points(bet_type)
    return get_flor_points(bet_type)


def calculate_envido_chain_points(state: BettingState) -> int:
    """Sum of the fixed-value calls in the Envido chain (Falta not included)."""
    total = 0
    for bet in state.envido_bets:
        points = get_envido_points(bet.type)
        if points > 0:
            total += points
    return total


def calculate_falta_envido_points(score1: int, score2: int, config: GameConfig) -> int:
    """
    Points for Falta Envido (and Contra Flor al Resto).

    To the leader: what the leading side still needs. To the loser: while the
    leader is still in las malas, what the trailing side needs; once the
    leader reaches las buenas, what the leader needs.
    """
    leader = max(score1, score2)
    trailer = min(score1, score2)
    if config.falta_envido_mode == FaltaEnvidoMode.TO_LEADER:
        return config.winning_score - leader
    if leader < config.las_buenas_threshold:
        return config.winning_score - trailer
    return config.winning_score - leader
