"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Kaboo, the two-player memory card game")


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level: {level}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def play(
    player1: str = typer.Option(
        "Player 1",
        "--player1",
        envvar="KABOO_PLAYER1",
        help="Name of the first player",
    ),
    player2: str = typer.Option(
        "Player 2",
        "--player2",
        envvar="KABOO_PLAYER2",
        help="Name of the second player",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="KABOO_SEED", help="Random seed"),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        envvar="KABOO_LOG_LEVEL",
        help="Logging level: DEBUG, INFO, WARNING or ERROR",
    ),
) -> None:
    """Play a hot-seat game of Kaboo in the terminal."""
    from kaboo.agents.human_agent import HumanAgent
    from kaboo.engine import KabooError
    from kaboo.orchestration.game_runner import GameRunner

    _configure_logging(log_level)
    if player1.strip() == player2.strip():
        raise typer.BadParameter("Players need different names")

    runner = GameRunner([HumanAgent(name=player1), HumanAgent(name=player2)], seed=seed)
    try:
        result = runner.run()
    except KabooError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    for name, score in zip(result.player_names, result.scores):
        typer.echo(f"{name}: {score} points")
    typer.echo(f"Winner: {result.winner_name or 'None (tie)'}")


@app.command()
def rules() -> None:
    """Print the card values and power card effects."""
    from kaboo.engine.card import POWER_RANKS, RANK_POINTS, Rank

    effects = {
        Rank.SEVEN: "look at one of your cards",
        Rank.EIGHT: "look at one of your cards",
        Rank.NINE: "look at one opponent card",
        Rank.TEN: "look at one opponent card",
        Rank.JACK: "swap one of your cards with an opponent card, unseen",
        Rank.QUEEN: "look at one own and one opponent card, then maybe swap",
    }
    typer.echo("Card points (lowest total wins):")
    for rank, points in RANK_POINTS.items():
        line = f"  {rank.value:>2}: {points:>3}"
        if rank in POWER_RANKS:
            line += f"  power: {effects[rank]}"
        typer.echo(line)


if __name__ == "__main__":
    app()
