"""Human agent - reads actions from terminal."""

from typing import List, Optional

import typer

from kaboo.engine import Action, PlayerView
from kaboo.engine.rules import describe_action


def _format_grid(grid: List[List[Optional[str]]]) -> str:
    return "\n".join("  " + " ".join(f"[{c or '??':>3}]" for c in row) for row in grid)


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        if not legal_actions:
            return None

        print(f"\n--- {player_view.name}'s turn ({player_view.phase.value}) ---")
        for line in player_view.history[-3:]:
            print(f"> {line}")
        print(f"{player_view.opponent_name}'s cards:")
        print(_format_grid(player_view.opponent_grid))
        print("Your cards:")
        print(_format_grid(player_view.my_grid))
        print("Drawn card:", player_view.drawn_card or "-")
        print("Top discard:", player_view.top_discard or "-")
        print("Draw pile:", player_view.draw_pile_size, "cards")
        if player_view.last_round:
            print("Last round!")
        print("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            print(f"  {i}: {describe_action(a, player_index)}")

        while True:
            try:
                raw = input("Enter number: ").strip()
                idx = int(raw)
                if 0 <= idx < len(legal_actions):
                    return legal_actions[idx]
            except ValueError:
                pass
            except EOFError as exc:
                raise typer.Abort() from exc
            print("Invalid. Try again.")
