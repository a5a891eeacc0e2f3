"""Player model: a named 2x2 grid of cards."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from kaboo.engine.card import Card

GRID_SIZE = 2

Position = Tuple[int, int]


def _empty_grid() -> List[List[Optional[Card]]]:
    return [[None] * GRID_SIZE for _ in range(GRID_SIZE)]


@dataclass(eq=False)
class Player:
    """A Kaboo player.

    ``hand[0]`` is the top row, ``hand[1]`` the bottom row that the player
    may peek at once before the game begins. Slots are only empty while
    cards are being dealt.
    """

    name: str
    hand: List[List[Optional[Card]]] = field(default_factory=_empty_grid)
    drawn_card: Optional[Card] = None
    starting_cards: List[Card] = field(default_factory=list)

    def cards(self) -> List[Card]:
        """Return the cards in the grid, row-major, skipping empty slots."""
        return [card for row in self.hand for card in row if card is not None]

    def bottom_row(self) -> List[Card]:
        return [card for card in self.hand[GRID_SIZE - 1] if card is not None]

    def find(self, card: Card) -> Optional[Position]:
        """Return the (row, col) holding this exact card instance, or None."""
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                if self.hand[row][col] is card:
                    return row, col
        return None

    def owns(self, card: Card) -> bool:
        return self.find(card) is not None

    def score(self) -> int:
        return sum(card.points for card in self.cards())

    def __str__(self) -> str:
        return f"{self.name}: {len(self.cards())} cards"
