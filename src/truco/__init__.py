"""Argentine Truco rules engine (2, 4 or 6 players, Envido, Flor, Pica Pica)."""

__version__ = "0.1.0"

from .errors import (
    TrucoError,
    InvalidConfiguration,
    InvalidPlayerCount,
    InvalidInput,
    NotFound,
    PlayerNotFound,
    TeamNotFound,
    InvalidState,
    EmptyTrick,
    NoResultYet,
    MissingWinnerPosition,
    InvalidIndex,
    InsufficientCards,
)
from .cards import Card, Suit, ALL_SUITS, VALID_RANKS, SPECIAL_CARDS, card_name
from .hierarchy import (
    card_value,
    compare_cards,
    compare_cards_with_order,
    get_winning_card,
    is_special_card,
    is_valid_card,
)
from .deck import DealResult, create_deck, shuffle_deck, deal_cards, create_shuffled_deck
from .config import FaltaEnvidoMode, GameConfig, GAME_PRESETS, create_game_config, validate_game_config
from .players import (
    Player,
    Team,
    create_player,
    create_team,
    update_player_hand,
    remove_card_from_hand,
    set_player_dealer,
    update_team_score,
    add_team_points,
    has_team_won,
)
from .table import (
    TEAM_1_ID,
    TEAM_2_ID,
    GameSetup,
    setup_game,
    rotate_dealer,
    get_first_player,
    get_next_player,
    get_players_in_turn_order,
    get_player_at_position,
    get_team_players,
    get_player_team,
    get_opposing_teams,
    build_position_team_map,
)
from .state import (
    GamePhase,
    TrickResult,
    PlayedCard,
    Trick,
    Hand,
    GameState,
    create_trick,
    create_hand,
    create_played_card,
    add_card_to_trick,
    is_trick_complete,
    set_trick_result,
    replace_current_trick,
    add_trick_to_hand,
    set_hand_winner,
    set_hand_points,
    create_game_state,
    set_game_phase,
    set_current_hand,
    set_betting_state,
    advance_turn,
    start_next_hand,
)
from .betting import (
    REST_OF_GAME,
    TrucoBet,
    EnvidoBet,
    FlorBet,
    BetType,
    BetFamily,
    BetResponse,
    BetStatus,
    Bet,
    BettingState,
    bet_family,
    create_bet,
    respond_to_bet,
    create_betting_state,
    add_bet,
    update_last_bet,
    answer_pending_bet,
    set_truco_value,
    resolve_envido,
    resolve_flor,
    get_next_truco_bet,
    get_truco_points,
    get_envido_points,
    get_flor_points,
    calculate_envido_chain_points,
    calculate_falta_envido_points,
)
from .validation import (
    can_call_truco_bet,
    can_call_envido_bet,
    can_call_flor_bet,
    can_respond_to_bet,
    get_decline_points,
)
from .envido import (
    get_envido_value,
    calculate_envido_score,
    has_flor,
    calculate_flor_score,
    determine_envido_winner,
    determine_flor_winner,
)
from .tricks import (
    TrickResolution,
    resolve_trick,
    apply_trick_resolution,
    determine_hand_winner,
    is_hand_complete,
    needs_another_trick,
    get_next_trick_leader,
)
