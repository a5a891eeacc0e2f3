"""Deck creation and shuffling."""

import random
from typing import List, Optional

from kaboo.engine.card import Card, Rank, Suit


def create_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Create a shuffled 52-card deck.

    - 4 suits × 13 ranks, one instance each
    - 24 power cards (7, 8, 9, 10, J, Q)
    - Top of the deck is the last element
    """
    cards: List[Card] = [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]

    if rng is not None:
        rng.shuffle(cards)
    else:
        random.shuffle(cards)

    return cards
