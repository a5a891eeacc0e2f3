"""Pytest fixtures for the Kaboo engine."""

from typing import Any, Dict, List, Tuple

import pytest

from kaboo.engine import GameEvent, GameSession, GameState

from helpers import start_playing


class EventRecorder:
    """Listener that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: List[Tuple[GameEvent, Dict[str, Any]]] = []

    def __call__(self, event: GameEvent, payload: Dict[str, Any]) -> None:
        self.events.append((event, payload))

    def names(self) -> List[GameEvent]:
        return [event for event, _ in self.events]

    def last(self, event: GameEvent) -> Dict[str, Any]:
        for name, payload in reversed(self.events):
            if name == event:
                return payload
        raise AssertionError(f"{event} was not emitted")


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def session(recorder: EventRecorder) -> GameSession:
    session = GameSession(seed=42)
    session.subscribe(recorder)
    session.game_service.start_new_game("Alice", "Bob")
    return session


@pytest.fixture
def game(session: GameSession) -> GameState:
    """A game past the opening peek with Alice (player 0) to move."""
    return start_playing(session, current=0)
