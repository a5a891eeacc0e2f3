"""Game state for Kaboo."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from kaboo.engine.card import Card
from kaboo.engine.errors import InvalidStateError
from kaboo.engine.player import Player

logger = logging.getLogger(__name__)


class GamePhase(str, Enum):
    """Phases of the Kaboo state machine."""

    INITIALIZED = "initialized"
    PLAYER_ADDITION = "player_addition"
    PLAYERS_ADDED = "players_added"
    SHOW_STARTING_HANDS_1 = "show_starting_hands_1"
    REVEAL = "reveal"
    SHOW_STARTING_HANDS_2 = "show_starting_hands_2"
    READY_TO_DRAW = "ready_to_draw"
    DRAW_FROM_DECK = "draw_from_deck"
    POWER_CARD_DRAWN = "power_card_drawn"
    POINT_CARD_DRAWN = "point_card_drawn"
    DRAW_FROM_PILE = "draw_from_pile"
    PLAY_JACK = "play_jack"
    PLAY_QUEEN = "play_queen"
    CONFIRM_QUEEN_SHOW = "confirm_queen_show"
    PLAY_SEVEN_OR_EIGHT = "play_seven_or_eight"
    PLAY_NINE_OR_TEN = "play_nine_or_ten"
    SHOW_CARDS = "show_cards"
    KNOCKED = "knocked"
    END_TURN = "end_turn"
    FINISHED = "finished"


SETUP_PHASES = frozenset({
    GamePhase.INITIALIZED,
    GamePhase.PLAYER_ADDITION,
    GamePhase.PLAYERS_ADDED,
    GamePhase.SHOW_STARTING_HANDS_1,
    GamePhase.REVEAL,
    GamePhase.SHOW_STARTING_HANDS_2,
})

DRAW_PHASES = frozenset({
    GamePhase.DRAW_FROM_DECK,
    GamePhase.POWER_CARD_DRAWN,
    GamePhase.POINT_CARD_DRAWN,
    GamePhase.DRAW_FROM_PILE,
})

POWER_PHASES = frozenset({
    GamePhase.PLAY_JACK,
    GamePhase.PLAY_QUEEN,
    GamePhase.PLAY_SEVEN_OR_EIGHT,
    GamePhase.PLAY_NINE_OR_TEN,
})


@dataclass
class GameState:
    """Mutable state of a single Kaboo game.

    Both piles keep their top card last. ``selected`` holds the cards picked
    while resolving a swap or power card; it never grows beyond two entries.
    """

    current_player: int
    players: List[Player] = field(default_factory=list)
    phase: GamePhase = GamePhase.INITIALIZED
    draw_pile: List[Card] = field(default_factory=list)
    discard_pile: List[Card] = field(default_factory=list)
    selected: List[Card] = field(default_factory=list)
    last_round: bool = False
    knock_initiator: int = -1
    log: List[str] = field(default_factory=list)
    scores: List[int] = field(default_factory=list)  # by seat
    winner: Optional[Player] = None

    def current(self) -> Player:
        return self.players[self.current_player]

    def opponent(self) -> Player:
        return self.players[1 - self.current_player]

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def all_cards(self) -> List[Card]:
        """Every card in play: hands, piles and held drawn cards."""
        cards: List[Card] = []
        for player in self.players:
            cards.extend(player.cards())
            if player.drawn_card is not None:
                cards.append(player.drawn_card)
        cards.extend(self.draw_pile)
        cards.extend(self.discard_pile)
        return cards


def _visible_grid(player: Player) -> List[List[Optional[str]]]:
    return [
        [str(card) if card is not None and card.revealed else None for card in row]
        for row in player.hand
    ]


@dataclass
class PlayerView:
    """Game state as seen by a single player.

    Face-down cards are None; revealed cards and the viewer's own drawn card
    are shown.
    """

    name: str
    my_grid: List[List[Optional[str]]]
    opponent_name: str
    opponent_grid: List[List[Optional[str]]]
    drawn_card: Optional[str]
    top_discard: Optional[str]
    draw_pile_size: int
    phase: GamePhase
    current_player: str
    selected: List[str]
    last_round: bool
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, player_index: int) -> "PlayerView":
        """Create a view for one player, hiding face-down cards."""
        me = state.players[player_index]
        other = state.players[1 - player_index]
        top = state.top_discard()
        return cls(
            name=me.name,
            my_grid=_visible_grid(me),
            opponent_name=other.name,
            opponent_grid=_visible_grid(other),
            drawn_card=str(me.drawn_card) if me.drawn_card is not None else None,
            top_discard=str(top) if top is not None else None,
            draw_pile_size=len(state.draw_pile),
            phase=state.phase,
            current_player=state.current().name,
            selected=[str(card) if card.revealed else "??" for card in state.selected],
            last_round=state.last_round,
            history=list(state.log[-10:]),  # Last 10 events
        )


def require_phase(game: GameState, *phases: GamePhase, action: str) -> None:
    """Raise InvalidStateError unless the game is in one of ``phases``."""
    if game.phase not in phases:
        allowed = ", ".join(p.value for p in phases)
        logger.debug("%s rejected in phase %s", action, game.phase.value)
        raise InvalidStateError(
            f"{action} is only allowed in phase {allowed} (current: {game.phase.value})"
        )
