"""Built-in agents."""

from kaboo.agents.human_agent import HumanAgent

__all__ = ["HumanAgent"]
