"""Agent protocol - interface that the front-end players implement."""

from typing import Protocol

from kaboo.engine import Action, PlayerView


class AgentProtocol(Protocol):
    """Interface for Kaboo-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: What this player can see: face-down cards are hidden.
            legal_actions: List of valid actions to choose from.
            player_index: This agent's seat (0 or 1).

        Returns:
            One of the legal actions, or None to take the first one.
        """
        ...
