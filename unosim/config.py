"""Settings read from the environment (and .env, loaded by the CLI)."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from unosim.engine.deck import DEFAULT_SEED


def _int_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Defaults for the CLI. Command-line options override these."""

    players: int = 2
    seed: int = DEFAULT_SEED
    max_turns: int = 1000
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            players=_int_env(env, "UNOSIM_PLAYERS", cls.players),
            seed=_int_env(env, "UNOSIM_SEED", cls.seed),
            max_turns=_int_env(env, "UNOSIM_MAX_TURNS", cls.max_turns),
            log_level=env.get("UNOSIM_LOG_LEVEL", cls.log_level).upper(),
        )
