"""Tests for the command line interface."""

from typer.testing import CliRunner

from unosim.cli import app

runner = CliRunner()


def test_play_identity_game() -> None:
    result = runner.invoke(app, ["play", "--players", "2", "--shuffle", "identity"])
    assert result.exit_code == 0, result.output
    assert "Winner: player 0" in result.output
    assert "Turns: 11" in result.output


def test_play_verbose_prints_states() -> None:
    result = runner.invoke(app, ["play", "--shuffle", "identity", "--verbose"])
    assert result.exit_code == 0, result.output
    assert "player 1's turn, direction: clockwise, top: Yellow 9, players cards: P0:6, P1:7" in result.output


def test_play_turn_limit() -> None:
    result = runner.invoke(app, ["play", "--shuffle", "identity", "--max-turns", "2"])
    assert result.exit_code == 0, result.output
    assert "Winner: None (turn limit reached)" in result.output
    assert "Turns: 2" in result.output


def test_play_unknown_shuffle() -> None:
    result = runner.invoke(app, ["play", "--shuffle", "riffle"])
    assert result.exit_code != 0


def test_play_bad_environment() -> None:
    result = runner.invoke(app, ["play"], env={"UNOSIM_SEED": "abc"})
    assert result.exit_code != 0


def test_play_players_from_environment() -> None:
    result = runner.invoke(
        app,
        ["play", "--shuffle", "identity", "--verbose", "--max-turns", "1"],
        env={"UNOSIM_PLAYERS": "3"},
    )
    assert result.exit_code == 0, result.output
    assert "P2:7" in result.output


def test_tournament() -> None:
    result = runner.invoke(app, ["tournament", "--games", "3", "--players", "2", "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "Tournament results:" in result.output
