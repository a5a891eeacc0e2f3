"""Notifications sent to the presentation layer after each state change."""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


class GameEvent(str, Enum):
    """Named notifications fired after a successful mutation."""

    GAME_STARTED = "game_started"
    PLAYERS_EDITED = "players_edited"
    STARTING_CARDS_SHOWN = "starting_cards_shown"
    STARTING_CARDS_HIDDEN = "starting_cards_hidden"
    CARDS_SHOWN = "cards_shown"  # card1, card2 (may be None)
    POWER_PLAYED = "power_played"
    CARD_SELECTED = "card_selected"
    CARDS_SWAPPED = "cards_swapped"
    CARD_DISCARDED = "card_discarded"
    CARD_DRAWN_FROM_DECK = "card_drawn_from_deck"
    CARD_DRAWN_FROM_PILE = "card_drawn_from_pile"
    KNOCKED = "knocked"
    CHOICE_CONFIRMED = "choice_confirmed"
    TURN_STARTED = "turn_started"
    TURN_ENDED = "turn_ended"
    GAME_OVER = "game_over"  # winner (None on a tie), score
    HIDE_CARDS = "hide_cards"
    QUIT = "quit"
    RESTART = "restart"


Listener = Callable[[GameEvent, Dict[str, Any]], None]


class EventEmitter:
    """Synchronous fan-out of game events to registered listeners."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def emit(self, event: GameEvent, **payload: Any) -> None:
        """Call every listener in registration order."""
        logger.debug("emit %s %s", event.value, payload)
        for listener in list(self._listeners):
            listener(event, payload)
