"""Game orchestration."""

from kaboo.orchestration.game_runner import GameResult, GameRunner

__all__ = ["GameResult", "GameRunner"]
