"""Single game runner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from kaboo.engine import (
    GameEvent,
    GamePhase,
    GameSession,
    PlayerView,
    get_legal_actions,
    apply_action,
)

if TYPE_CHECKING:
    from kaboo.agent.protocol import AgentProtocol


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[int]  # seat index, None on a tie
    scores: tuple[int, ...] = ()  # by seat
    num_steps: int = 0
    player_names: tuple[str, ...] = ()

    @property
    def winner_name(self) -> Optional[str]:
        return self.player_names[self.winner] if self.winner is not None else None


class GameRunner:
    """Runs a single Kaboo game to completion, asking each agent in turn."""

    def __init__(
        self,
        agents: Sequence["AgentProtocol"],
        seed: Optional[int] = None,
        max_steps: int = 5000,
    ):
        if len(agents) != 2:
            raise ValueError("Kaboo is played by exactly two agents")
        self._agents: List["AgentProtocol"] = list(agents)
        self._session = GameSession(seed=seed)
        self._max_steps = max_steps
        self._turn_open = False
        self._session.subscribe(self._on_event)

    @property
    def session(self) -> GameSession:
        return self._session

    def _on_event(self, event: GameEvent, payload: Dict[str, Any]) -> None:
        if event == GameEvent.TURN_STARTED:
            self._turn_open = True
        elif event in (GameEvent.TURN_ENDED, GameEvent.STARTING_CARDS_HIDDEN):
            self._turn_open = False

    def run(self) -> GameResult:
        """Run the game and return the result."""
        session = self._session
        names = [agent.name for agent in self._agents]
        state = session.game_service.start_new_game(names[0], names[1])
        num_steps = 0

        while state.phase != GamePhase.FINISHED and num_steps < self._max_steps:
            if state.phase == GamePhase.READY_TO_DRAW and not self._turn_open:
                session.game_service.start_turn()

            idx = state.current_player
            legal = get_legal_actions(session)
            if not legal:
                break

            player_view = PlayerView.from_state(state, idx)
            action = self._agents[idx].get_action(player_view, legal, idx)
            if action is None:
                action = legal[0]

            state = apply_action(session, action)
            num_steps += 1

        return GameResult(
            winner=state.players.index(state.winner) if state.winner is not None else None,
            scores=tuple(state.scores),
            num_steps=num_steps,
            player_names=tuple(names),
        )
