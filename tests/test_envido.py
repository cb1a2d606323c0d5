"""Tests for Envido and Flor scoring."""
from truco.cards import Card, Suit
from truco.envido import (
    calculate_envido_score,
    calculate_flor_score,
    determine_envido_winner,
    determine_flor_winner,
    get_envido_value,
    has_flor,
)

E, B, O, C = Suit.ESPADAS, Suit.BASTOS, Suit.OROS, Suit.COPAS


def test_envido_values():
    assert get_envido_value(Card(7, E)) == 7
    assert get_envido_value(Card(1, C)) == 1
    for rank in (10, 11, 12):
        assert get_envido_value(Card(rank, O)) == 0


def test_envido_two_of_a_suit():
    assert calculate_envido_score([Card(7, E), Card(6, E), Card(2, B)]) == 33
    assert calculate_envido_score([Card(12, E), Card(11, E), Card(5, B)]) == 20


def test_envido_three_of_a_suit_takes_best_two():
    assert calculate_envido_score([Card(1, O), Card(7, O), Card(5, O)]) == 32


def test_envido_no_pair():
    assert calculate_envido_score([Card(4, E), Card(6, B), Card(12, O)]) == 6
    assert calculate_envido_score([Card(10, E), Card(11, B), Card(12, O)]) == 0
    assert calculate_envido_score([]) == 0


def test_flor():
    hand = [Card(7, E), Card(6, E), Card(4, E)]
    assert has_flor(hand)
    assert calculate_flor_score(hand) == 37
    assert calculate_flor_score([Card(10, C), Card(11, C), Card(12, C)]) == 20
    no_flor = [Card(7, E), Card(6, E), Card(4, B)]
    assert not has_flor(no_flor)
    assert calculate_flor_score(no_flor) is None
    assert not has_flor([Card(7, E), Card(6, E)])


def test_envido_winner_tie_goes_to_non_caller():
    assert determine_envido_winner(30, 25, "team-2") == 1
    assert determine_envido_winner(20, 33, "team-1") == 2
    assert determine_envido_winner(28, 28, "team-1") == 2
    assert determine_envido_winner(28, 28, "team-2") == 1


def test_flor_winner():
    assert determine_flor_winner(None, None) is None
    assert determine_flor_winner(25, None) == 1
    assert determine_flor_winner(None, 21) == 2
    assert determine_flor_winner(30, 35) == 2
    assert determine_flor_winner(30, 30) == 1
    assert determine_flor_winner(30, 30, tie_winner=2) == 2
