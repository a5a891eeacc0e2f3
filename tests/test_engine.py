"""Unit tests for cards, deck and players."""

import random

from kaboo.engine import Card, Player, Rank, Suit, create_deck


def test_create_deck_size() -> None:
    deck = create_deck(random.Random(42))
    assert len(deck) == 52
    assert len({(c.suit, c.rank) for c in deck}) == 52


def test_create_deck_reproducible() -> None:
    d1 = create_deck(random.Random(123))
    d2 = create_deck(random.Random(123))
    assert [str(c) for c in d1] == [str(c) for c in d2]


def test_power_cards() -> None:
    deck = create_deck(random.Random(1))
    power = [c for c in deck if c.is_power_card]
    assert len(power) == 24
    assert {c.rank for c in power} == {
        Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.TEN, Rank.JACK, Rank.QUEEN,
    }
    assert not Card(Suit.HEARTS, Rank.KING).is_power_card
    assert not Card(Suit.HEARTS, Rank.SIX).is_power_card


def test_deck_cards_start_face_down() -> None:
    assert not any(c.revealed for c in create_deck(random.Random(3)))


def test_cards_compare_by_identity() -> None:
    a = Card(Suit.SPADES, Rank.FIVE)
    b = Card(Suit.SPADES, Rank.FIVE)
    assert a == a
    assert a != b
    assert b not in [a]


def test_card_str() -> None:
    assert str(Card(Suit.HEARTS, Rank.QUEEN)) == "Q♥"
    assert str(Card(Suit.CLUBS, Rank.TEN)) == "10♣"


def test_card_points() -> None:
    assert Card(Suit.CLUBS, Rank.ACE).points == 1
    assert Card(Suit.CLUBS, Rank.SEVEN).points == 7
    assert Card(Suit.CLUBS, Rank.TEN).points == 10
    assert Card(Suit.CLUBS, Rank.JACK).points == 10
    assert Card(Suit.CLUBS, Rank.QUEEN).points == 10
    assert Card(Suit.CLUBS, Rank.KING).points == -1


def test_player_find_and_score() -> None:
    king = Card(Suit.HEARTS, Rank.KING)
    ace = Card(Suit.SPADES, Rank.ACE)
    queen = Card(Suit.CLUBS, Rank.QUEEN)
    four = Card(Suit.DIAMONDS, Rank.FOUR)
    player = Player(name="Alice", hand=[[king, ace], [queen, four]])

    assert player.find(queen) == (1, 0)
    assert player.find(Card(Suit.CLUBS, Rank.QUEEN)) is None
    assert player.owns(four)
    assert player.bottom_row() == [queen, four]
    assert player.score() == -1 + 1 + 10 + 4


def test_new_player_has_empty_grid() -> None:
    player = Player(name="Bob")
    assert player.cards() == []
    assert player.drawn_card is None
    assert player.starting_cards == []
    assert str(player) == "Bob: 0 cards"
