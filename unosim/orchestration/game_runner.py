"""Single game runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from unosim.engine import NO_WINNER, Shuffler, TurnRecord, UNOGame

if TYPE_CHECKING:
    from unosim.agent.protocol import SelectionPolicy

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a game run."""

    winner: Optional[int]
    num_turns: int
    num_players: int
    completed: bool  # False if the turn budget ran out first
    final_state: str


class GameRunner:
    """Runs a single UNO game to completion or until max_turns."""

    def __init__(
        self,
        num_players: int = 2,
        shuffler: Optional[Shuffler] = None,
        policy: Optional["SelectionPolicy"] = None,
        max_turns: int = 1000,
        on_turn: Optional[Callable[[UNOGame, TurnRecord], None]] = None,
    ):
        self._num_players = num_players
        self._shuffler = shuffler
        self._policy = policy
        self._max_turns = max_turns
        self._on_turn = on_turn

    def run(self) -> GameResult:
        """Run the game and return the result."""
        game = UNOGame(self._num_players, shuffler=self._shuffler, policy=self._policy)
        game.initialize()
        num_turns = 0

        while not game.is_game_over() and num_turns < self._max_turns:
            record = game.play_turn()
            if record is None:
                break
            num_turns += 1
            if self._on_turn is not None:
                self._on_turn(game, record)

        if not game.is_game_over():
            logger.warning("Game stopped after %d turns without a winner", num_turns)

        winner = game.get_winner()
        return GameResult(
            winner=None if winner == NO_WINNER else winner,
            num_turns=num_turns,
            num_players=game.num_players,
            completed=game.is_game_over(),
            final_state=game.get_state(),
        )
