"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from unosim.config import Settings

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Deterministic UNO simulator")


def _settings() -> Settings:
    try:
        return Settings.from_env()
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _setup_logging(level: Optional[str], settings: Settings) -> None:
    name = (level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise typer.BadParameter(f"Unknown log level: {name}")
    logging.basicConfig(level=name, format="%(levelname)s %(name)s: %(message)s")


def _make_shuffler(shuffle: str, seed: int) -> "Shuffler":
    from unosim.engine import Shuffler
    from unosim.engine.deck import PERMUTATIONS

    try:
        permutation = PERMUTATIONS[shuffle.lower()]
    except KeyError:
        raise typer.BadParameter(
            f"Unknown shuffle: {shuffle}. Use one of: {', '.join(PERMUTATIONS)}."
        )
    return Shuffler(seed=seed, permutation=permutation)


@app.command()
def play(
    players: Optional[int] = typer.Option(None, "--players", "-n", help="Number of players (clamped to 2-4)"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Shuffle seed"),
    shuffle: str = typer.Option(
        "seeded",
        "--shuffle",
        help="Shuffle strategy: seeded, identity, or reverse",
    ),
    max_turns: Optional[int] = typer.Option(None, "--max-turns", "-t", help="Stop after this many turns"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print the game state after every turn"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Run a single UNO game."""
    from unosim.orchestration.game_runner import GameRunner

    settings = _settings()
    _setup_logging(log_level, settings)
    shuffler = _make_shuffler(shuffle, settings.seed if seed is None else seed)

    def echo_turn(game, record) -> None:
        typer.echo(game.get_state())

    runner = GameRunner(
        settings.players if players is None else players,
        shuffler=shuffler,
        max_turns=settings.max_turns if max_turns is None else max_turns,
        on_turn=echo_turn if verbose else None,
    )
    result = runner.run()
    if result.winner is None:
        typer.echo("Winner: None (turn limit reached)")
    else:
        typer.echo(f"Winner: player {result.winner}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def tournament(
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    players: Optional[int] = typer.Option(None, "--players", "-n", help="Number of players (clamped to 2-4)"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Tournament seed"),
    max_turns: Optional[int] = typer.Option(None, "--max-turns", "-t", help="Turn limit per game"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Run a tournament."""
    from unosim.orchestration.tournament import run_tournament

    settings = _settings()
    _setup_logging(log_level, settings)
    wins = run_tournament(
        num_games=games,
        num_players=settings.players if players is None else players,
        seed=settings.seed if seed is None else seed,
        max_turns=settings.max_turns if max_turns is None else max_turns,
    )
    typer.echo("Tournament results:")
    for pid, w in sorted(wins.items(), key=lambda x: -x[1]):
        if isinstance(pid, int):
            typer.echo(f"  player {pid}: {w} wins")
        else:
            typer.echo(f"  {pid}: {w} games")


if __name__ == "__main__":
    app()
