"""Simulate a game and print its event history."""

import logging
import sys

from unosim.engine import Shuffler
from unosim.orchestration.game_runner import GameRunner


def print_last_event(game, record):
    # Log the last move from history to see the game progress
    if game.state.history:
        print(f"> {game.state.history[-1]}")


def main():
    logging.basicConfig(level=logging.WARNING)
    players = int(sys.argv[1]) if len(sys.argv) > 1 else 4
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else 42

    runner = GameRunner(players, shuffler=Shuffler(seed=seed), on_turn=print_last_event)
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    print(result.final_state)

if __name__ == "__main__":
    main()
