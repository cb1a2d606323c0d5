"""Tests for hand state, trick resolution and hand winners."""
import pytest

from truco.cards import Card, Suit
from truco.config import GameConfig
from truco.errors import EmptyTrick, InvalidState, MissingWinnerPosition, NoResultYet, TeamNotFound
from truco.state import (
    Hand,
    Trick,
    TrickResult,
    add_card_to_trick,
    add_trick_to_hand,
    create_hand,
    create_played_card,
    create_trick,
    is_trick_complete,
    replace_current_trick,
    set_hand_points,
    set_hand_winner,
    set_trick_result,
)
from truco.table import TEAM_1_ID, TEAM_2_ID, build_position_team_map, setup_game
from truco.tricks import (
    apply_trick_resolution,
    determine_hand_winner,
    get_next_trick_leader,
    is_hand_complete,
    needs_another_trick,
    resolve_trick,
)

E, B, O, C = Suit.ESPADAS, Suit.BASTOS, Suit.OROS, Suit.COPAS
TEAMS = {0: TEAM_1_ID, 1: TEAM_2_ID, 2: TEAM_1_ID, 3: TEAM_2_ID}


def _trick(*cards, number=1):
    trick = create_trick(number)
    for pos, card in enumerate(cards):
        trick = add_card_to_trick(trick, create_played_card(f"player-{pos}", card, pos))
    return trick


def _hand(*results, mano_team_id=None):
    tricks = tuple(
        Trick(trick_number=i + 1, result=r, winner_position=None if r == TrickResult.PARDA else i % 2)
        for i, r in enumerate(results)
    )
    return Hand(
        hand_number=1,
        tricks=tricks,
        current_trick_index=max(len(tricks) - 1, 0),
        mano_team_id=mano_team_id,
    )


def test_trick_helpers_do_not_mutate():
    trick = create_trick(1)
    played = add_card_to_trick(trick, create_played_card("player-0", Card(3, E), 0))
    assert trick.played_cards == ()
    assert len(played.played_cards) == 1
    assert not is_trick_complete(played, 2)
    assert played.result is None


def test_resolve_trick_clear_winner():
    trick = _trick(Card(4, B), Card(1, E), Card(7, B), Card(3, O))
    resolution = resolve_trick(trick, TEAMS)
    assert resolution.result == TrickResult.TEAM2_WIN
    assert resolution.winner_position == 1
    assert resolution.winner_team_id == TEAM_2_ID


def test_resolve_trick_equal_hierarchy_is_parda():
    trick = _trick(Card(3, E), Card(3, C), Card(2, O), Card(4, B))
    resolution = resolve_trick(trick, TEAMS)
    assert resolution.result == TrickResult.PARDA
    assert resolution.winner_position is None


def test_resolve_trick_lower_tie_does_not_matter():
    trick = _trick(Card(4, E), Card(4, C), Card(12, O))
    assert resolve_trick(trick, TEAMS).result == TrickResult.TEAM1_WIN


def test_resolve_trick_errors():
    with pytest.raises(EmptyTrick):
        resolve_trick(create_trick(1), TEAMS)
    with pytest.raises(TeamNotFound):
        resolve_trick(_trick(Card(4, E), Card(1, E)), {0: TEAM_1_ID})


def test_resolve_trick_pica_pica():
    setup = setup_game(GameConfig(num_players=6, pica_pica_mode=True))
    teams = build_position_team_map(setup.players)
    trick = _trick(Card(4, E), Card(5, E), Card(6, E), Card(7, E), Card(10, E), Card(11, E))
    resolved = apply_trick_resolution(trick, teams)
    assert resolved.result == TrickResult.WIN
    assert resolved.winner_position == 3
    assert resolved.winner_team_id == "team-3"
    assert trick.result is None


def test_hand_winner_two_wins():
    assert determine_hand_winner(_hand(TrickResult.TEAM1_WIN, TrickResult.TEAM1_WIN)) == TEAM_1_ID
    assert determine_hand_winner(
        _hand(TrickResult.TEAM2_WIN, TrickResult.TEAM1_WIN, TrickResult.TEAM2_WIN)
    ) == TEAM_2_ID


def test_hand_winner_win_and_parda():
    assert determine_hand_winner(_hand(TrickResult.TEAM1_WIN, TrickResult.PARDA)) == TEAM_1_ID
    assert determine_hand_winner(_hand(TrickResult.PARDA, TrickResult.TEAM2_WIN)) == TEAM_2_ID


def test_hand_winner_undecided():
    assert determine_hand_winner(create_hand(1)) is None
    assert determine_hand_winner(_hand(TrickResult.TEAM1_WIN)) is None
    assert determine_hand_winner(_hand(TrickResult.TEAM1_WIN, TrickResult.TEAM2_WIN)) is None
    assert determine_hand_winner(_hand(TrickResult.PARDA, TrickResult.PARDA)) is None


def test_hand_winner_one_each_and_parda_goes_to_first():
    assert determine_hand_winner(
        _hand(TrickResult.TEAM1_WIN, TrickResult.TEAM2_WIN, TrickResult.PARDA)
    ) == TEAM_1_ID
    assert determine_hand_winner(
        _hand(TrickResult.TEAM2_WIN, TrickResult.PARDA, TrickResult.TEAM1_WIN)
    ) == TEAM_2_ID


def test_hand_winner_three_pardas_goes_to_mano_team():
    pardas = (TrickResult.PARDA,) * 3
    assert determine_hand_winner(_hand(*pardas, mano_team_id=TEAM_2_ID)) == TEAM_2_ID
    assert determine_hand_winner(_hand(*pardas)) is None


def test_needs_another_trick():
    assert needs_another_trick(create_hand(1))
    assert needs_another_trick(_hand(TrickResult.TEAM1_WIN, TrickResult.TEAM2_WIN))
    assert not needs_another_trick(_hand(TrickResult.TEAM1_WIN, TrickResult.TEAM1_WIN))
    assert not needs_another_trick(_hand(TrickResult.PARDA, TrickResult.PARDA, TrickResult.PARDA))
    won = set_hand_winner(create_hand(1), TEAM_1_ID)
    assert not needs_another_trick(won)
    assert is_hand_complete(won)


def test_next_trick_leader():
    hand = create_hand(1)
    assert get_next_trick_leader(hand, 1) == 1

    first = set_trick_result(create_trick(1), TrickResult.TEAM2_WIN, 3, TEAM_2_ID)
    hand = add_trick_to_hand(replace_current_trick(hand, first), 2)
    assert get_next_trick_leader(hand, 1) == 3

    parda = set_trick_result(create_trick(1), TrickResult.PARDA, None)
    hand = add_trick_to_hand(replace_current_trick(create_hand(1), parda), 2)
    assert get_next_trick_leader(hand, 1) == 1


def test_next_trick_leader_errors():
    unresolved = Hand(hand_number=1, tricks=(create_trick(1), create_trick(2)), current_trick_index=1)
    with pytest.raises(NoResultYet):
        get_next_trick_leader(unresolved, 0)
    broken = set_trick_result(create_trick(1), TrickResult.TEAM1_WIN, None)
    hand = add_trick_to_hand(replace_current_trick(create_hand(1), broken), 2)
    with pytest.raises(MissingWinnerPosition):
        get_next_trick_leader(hand, 0)


def test_add_trick_requires_resolved_trick():
    with pytest.raises(InvalidState):
        add_trick_to_hand(create_hand(1), 2)


def test_set_hand_points():
    hand = create_hand(1)
    assert set_hand_points(hand, 3).points_at_stake == 3
    assert hand.points_at_stake == 1


def test_play_a_full_hand():
    setup = setup_game(GameConfig(num_players=2))
    teams = build_position_team_map(setup.players)
    hands = {
        0: [Card(1, E), Card(4, C), Card(3, O)],
        1: [Card(7, O), Card(5, B), Card(2, C)],
    }
    hand = create_hand(1, mano_team_id=TEAM_2_ID)
    leader = 1
    for number in range(1, 4):
        leader = get_next_trick_leader(hand, leader)
        trick = hand.tricks[hand.current_trick_index]
        for pos in (leader, (leader + 1) % 2):
            card = hands[pos].pop(0)
            trick = add_card_to_trick(trick, create_played_card(f"player-{pos}", card, pos))
        hand = replace_current_trick(hand, apply_trick_resolution(trick, teams))
        if not needs_another_trick(hand):
            break
        hand = add_trick_to_hand(hand, number + 1)
    winner = determine_hand_winner(hand)
    # Ancho over 7 de Oros, then 5 over 4, then 3 over 2
    assert winner == TEAM_1_ID
    assert len(hand.tricks) == 3


def test_pica_pica_wins_are_labelled_alike_from_every_seat():
    setup = setup_game(GameConfig(num_players=6, pica_pica_mode=True))
    teams = build_position_team_map(setup.players)
    fillers = [Card(4, E), Card(5, O), Card(6, B), Card(10, C), Card(11, O)]
    for winner in range(6):
        cards = list(fillers)
        cards.insert(winner, Card(1, E))
        resolution = resolve_trick(_trick(*cards), teams)
        assert resolution.winner_position == winner
        assert resolution.winner_team_id == f"team-{winner}"
        assert resolution.result == TrickResult.WIN


def test_two_team_six_players_keep_team_labels():
    setup = setup_game(GameConfig(num_players=6))
    teams = build_position_team_map(setup.players)
    trick = _trick(Card(4, E), Card(5, O), Card(6, B), Card(10, C), Card(1, E), Card(11, O))
    assert resolve_trick(trick, teams).result == TrickResult.TEAM1_WIN
