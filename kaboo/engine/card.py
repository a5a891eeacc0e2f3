"""Card, Suit and Rank types for Kaboo."""

from dataclasses import dataclass
from enum import Enum


class Suit(str, Enum):
    """Card suits."""

    CLUBS = "clubs"
    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"


SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
}


class Rank(str, Enum):
    """Card ranks, Ace to King."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


POWER_RANKS = frozenset({
    Rank.SEVEN, Rank.EIGHT,
    Rank.NINE, Rank.TEN,
    Rank.JACK, Rank.QUEEN,
})

# Penalty points per rank; the lower hand total wins.
RANK_POINTS = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: -1,
}


@dataclass(eq=False)
class Card:
    """A playing card.

    Cards compare by identity: two instances with the same suit and rank are
    still different cards. ``revealed`` is True while the card is face-up.
    """

    suit: Suit
    rank: Rank
    revealed: bool = False

    @property
    def is_power_card(self) -> bool:
        return self.rank in POWER_RANKS

    @property
    def points(self) -> int:
        return RANK_POINTS[self.rank]

    def __str__(self) -> str:
        return f"{self.rank.value}{SUIT_SYMBOLS[self.suit]}"
