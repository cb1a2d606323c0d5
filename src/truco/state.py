"""
Game value types: phase, tricks (bazas), the hand that holds them and the
whole-game snapshot an orchestrator passes around. A hand is at most three
tricks. All updates return new values.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Sequence

from .betting import BettingState, create_betting_state
from .cards import Card
from .errors import InvalidState
from .players import Player, PlayerId, Team, TeamId
from .table import GameSetup, get_first_player, get_player_at_position, rotate_dealer

MAX_TRICKS = 3


class GamePhase(str, Enum):
    WAITING = "waiting"
    DEALING = "dealing"
    BETTING = "betting"  # Envido / Flor may still be called
    PLAYING = "playing"
    SCORING = "scoring"
    FINISHED = "finished"


class TrickResult(str, Enum):
    TEAM1_WIN = "team1_win"
    TEAM2_WIN = "team2_win"
    WIN = "win"  # decisive trick won by a Pica Pica individual team
    PARDA = "parda"


@dataclass(frozen=True)
class PlayedCard:
    player_id: PlayerId
    card: Card
    position: int


@dataclass(frozen=True)
class Trick:
    trick_number: int  # 1, 2 or 3
    played_cards: tuple[PlayedCard, ...] = ()
    result: TrickResult | None = None
    winner_position: int | None = None
    winner_team_id: TeamId | None = None


@dataclass(frozen=True)
class Hand:
    hand_number: int
    tricks: tuple[Trick, ...] = ()
    current_trick_index: int = 0
    winner: TeamId | None = None
    points_at_stake: int = 1
    # Team of the player after the dealer; takes the hand if every trick is parda
    mano_team_id: TeamId | None = None


def create_trick(trick_number: int) -> Trick:
    return Trick(trick_number=trick_number)


def create_hand(hand_number: int, points_at_stake: int = 1, mano_team_id: TeamId | None = None) -> Hand:
    """New hand with its first trick open."""
    return Hand(
        hand_number=hand_number,
        tricks=(create_trick(1),),
        current_trick_index=0,
        points_at_stake=points_at_stake,
        mano_team_id=mano_team_id,
    )


def create_played_card(player_id: PlayerId, card: Card, position: int) -> PlayedCard:
    return PlayedCard(player_id=player_id, card=card, position=position)


def add_card_to_trick(trick: Trick, played_card: PlayedCard) -> Trick:
    return replace(trick, played_cards=trick.played_cards + (played_card,))


def is_trick_complete(trick: Trick, num_players: int) -> bool:
    """True once every active player has played."""
    return len(trick.played_cards) == num_players


def set_trick_result(
    trick: Trick,
    result: TrickResult,
    winner_position: int | None,
    winner_team_id: TeamId | None = None,
) -> Trick:
    return replace(trick, result=result, winner_position=winner_position, winner_team_id=winner_team_id)


def replace_current_trick(hand: Hand, trick: Trick) -> Hand:
    tricks = list(hand.tricks)
    tricks[hand.current_trick_index] = trick
    return replace(hand, tricks=tuple(tricks))


def add_trick_to_hand(hand: Hand, trick_number: int) -> Hand:
    """Open the next trick. The current one must already be resolved."""
    if hand.tricks and hand.tricks[-1].result is None:
        raise InvalidState(f"Trick {hand.tricks[-1].trick_number} has no result yet")
    if len(hand.tricks) >= MAX_TRICKS:
        raise InvalidState("A hand has at most three tricks")
    return replace(
        hand,
        tricks=hand.tricks + (create_trick(trick_number),),
        current_trick_index=hand.current_trick_index + 1,
    )


def set_hand_winner(hand: Hand, winner: TeamId) -> Hand:
    return replace(hand, winner=winner)


def set_hand_points(hand: Hand, points: int) -> Hand:
    return replace(hand, points_at_stake=points)


@dataclass(frozen=True)
class GameState:
    phase: GamePhase
    players: tuple[Player, ...]
    teams: tuple[Team, ...]
    current_hand: Hand
    dealer_position: int
    current_player_position: int
    deck: tuple[Card, ...] = ()
    betting: BettingState = field(default_factory=BettingState)


def _mano_team(players: Sequence[Player], dealer_position: int) -> TeamId:
    mano = get_first_player(dealer_position, len(players))
    return get_player_at_position(players, mano).team_id


def create_game_state(
    setup: GameSetup,
    deck: Sequence[Card] = (),
    phase: GamePhase = GamePhase.WAITING,
    hand_number: int = 1,
) -> GameState:
    """Snapshot for a freshly seated game: first hand open, mano to play."""
    players = setup.players
    dealer = setup.dealer_position
    return GameState(
        phase=phase,
        players=tuple(players),
        teams=tuple(setup.teams),
        current_hand=create_hand(hand_number, mano_team_id=_mano_team(players, dealer)),
        dealer_position=dealer,
        current_player_position=get_first_player(dealer, len(players)),
        deck=tuple(deck),
        betting=create_betting_state(),
    )


def set_game_phase(state: GameState, phase: GamePhase) -> GameState:
    return replace(state, phase=phase)


def set_current_hand(state: GameState, hand: Hand) -> GameState:
    return replace(state, current_hand=hand)


def set_betting_state(state: GameState, betting: BettingState) -> GameState:
    return replace(state, betting=betting)


def advance_turn(state: GameState) -> GameState:
    """Pass the turn to the next position."""
    n = len(state.players)
    return replace(state, current_player_position=(state.current_player_position + 1) % n)


def start_next_hand(state: GameState, deck: Sequence[Card] = ()) -> GameState:
    """
    Rotate the dealer and open the next hand with fresh betting. Team scores
    carry over.
    """
    players = rotate_dealer(state.players, state.dealer_position)
    dealer = (state.dealer_position + 1) % len(players)
    return replace(
        state,
        phase=GamePhase.DEALING,
        players=players,
        current_hand=create_hand(state.current_hand.hand_number + 1, mano_team_id=_mano_team(players, dealer)),
        dealer_position=dealer,
        current_player_position=get_first_player(dealer, len(players)),
        deck=tuple(deck),
        betting=create_betting_state(),
    )
