"""Tests for the command line interface and the terminal agent."""

import pytest
import typer
from typer.testing import CliRunner

from kaboo.agents import HumanAgent
from kaboo.cli import app
from kaboo.engine import GameSession, PlayerView, get_legal_actions

from helpers import start_playing

runner = CliRunner()


def test_rules_lists_every_rank():
    result = runner.invoke(app, ["rules"])
    assert result.exit_code == 0
    assert "Card points (lowest total wins):" in result.output
    assert "   K:  -1" in result.output
    assert "   Q:  10  power:" in result.output
    assert result.output.count("power:") == 6


def test_play_rejects_identical_names():
    result = runner.invoke(app, ["play", "--player1", "Ann", "--player2", "Ann"])
    assert result.exit_code == 2


def test_play_reads_names_from_environment():
    result = runner.invoke(app, ["play"], env={"KABOO_PLAYER1": "Ann", "KABOO_PLAYER2": "Ann"})
    assert result.exit_code == 2


def test_play_rejects_unknown_log_level():
    result = runner.invoke(app, ["play", "--log-level", "LOUD"])
    assert result.exit_code == 2


def test_human_agent_retries_until_valid(monkeypatch, capsys):
    session = GameSession(seed=4)
    session.game_service.start_new_game("Alice", "Bob")
    game = start_playing(session)
    legal = get_legal_actions(session)
    answers = iter(["draw", str(len(legal)), "1"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    agent = HumanAgent(name="Alice")
    action = agent.get_action(PlayerView.from_state(game, 0), legal, 0)

    assert action is legal[1]
    out = capsys.readouterr().out
    assert out.count("Invalid. Try again.") == 2
    assert "Alice's turn" in out
    assert "Bob's cards:" in out


def test_human_agent_aborts_on_closed_input(monkeypatch):
    session = GameSession(seed=4)
    session.game_service.start_new_game("Alice", "Bob")
    game = start_playing(session)

    def closed(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    with pytest.raises(typer.Abort):
        HumanAgent(name="Alice").get_action(
            PlayerView.from_state(game, 0), get_legal_actions(session), 0
        )


def test_play_stops_when_input_ends():
    result = runner.invoke(app, ["play", "--seed", "1"], input="")
    assert result.exit_code == 1
    assert "Traceback" not in result.output
