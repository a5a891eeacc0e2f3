"""Game session: the single active game plus the services acting on it."""

import logging
import random
from typing import Optional

from kaboo.engine.errors import NoActiveGameError
from kaboo.engine.events import EventEmitter, GameEvent, Listener
from kaboo.engine.game_state import GameState

logger = logging.getLogger(__name__)


class GameSession:
    """Holds at most one running game and wires up both services.

    Front ends subscribe to ``events`` and call into ``game_service`` and
    ``player_action_service``. A seed makes the shuffle and the random
    starting-player picks reproducible.
    """

    def __init__(self, seed: Optional[int] = None):
        from kaboo.engine.game_flow import GameFlowService
        from kaboo.engine.player_actions import PlayerActionService

        self.rng = random.Random(seed)
        self.events = EventEmitter()
        self.game: Optional[GameState] = None
        self.game_service = GameFlowService(self)
        self.player_action_service = PlayerActionService(self)

    @property
    def is_active(self) -> bool:
        return self.game is not None

    def require_game(self) -> GameState:
        if self.game is None:
            raise NoActiveGameError("No game is currently active")
        return self.game

    def subscribe(self, listener: Listener) -> None:
        self.events.subscribe(listener)

    def notify(self, event: GameEvent, **payload) -> None:
        self.events.emit(event, **payload)

    def record(self, message: str) -> None:
        """Append to the game log and mirror it to the logger."""
        self.require_game().log.append(message)
        logger.info(message)
