"""Tournament - run many games and aggregate results."""

import random
from collections import defaultdict
from typing import Dict, Optional, Union

from unosim.engine import Shuffler
from unosim.orchestration.game_runner import GameRunner

UNFINISHED = "unfinished"


def run_tournament(
    num_games: int = 100,
    num_players: int = 2,
    seed: Optional[int] = None,
    max_turns: int = 1000,
) -> Dict[Union[int, str], int]:
    """Run num_games games, each dealt from its own shuffle seed.

    Every game reuses its seed for every reshuffle, so the tournament as a
    whole is reproducible from `seed`.

    Returns:
        Dict mapping player index to number of wins, plus the number of
        games that hit max_turns under the key "unfinished".
    """
    wins: Dict[Union[int, str], int] = defaultdict(int)

    rng = random.Random(seed)
    for _ in range(num_games):
        shuffler = Shuffler(seed=rng.randint(0, 2**31 - 1))
        runner = GameRunner(num_players, shuffler=shuffler, max_turns=max_turns)
        result = runner.run()
        if result.winner is not None:
            wins[result.winner] += 1
        else:
            wins[UNFINISHED] += 1

    return dict(wins)
