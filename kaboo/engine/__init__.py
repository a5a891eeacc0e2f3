"""Game engine for Kaboo."""

from kaboo.engine.card import Card, Rank, Suit
from kaboo.engine.deck import create_deck
from kaboo.engine.errors import (
    InvalidArgumentError,
    InvalidStateError,
    KabooError,
    NoActiveGameError,
)
from kaboo.engine.events import EventEmitter, GameEvent
from kaboo.engine.game_state import GamePhase, GameState, PlayerView
from kaboo.engine.player import Player
from kaboo.engine.session import GameSession
from kaboo.engine.rules import (
    Action,
    SelectCard,
    get_legal_actions,
    apply_action,
)

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "create_deck",
    "InvalidArgumentError",
    "InvalidStateError",
    "KabooError",
    "NoActiveGameError",
    "EventEmitter",
    "GameEvent",
    "GamePhase",
    "GameState",
    "PlayerView",
    "Player",
    "GameSession",
    "Action",
    "SelectCard",
    "get_legal_actions",
    "apply_action",
]
