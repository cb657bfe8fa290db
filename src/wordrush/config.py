"""Trainer configuration with environment overrides."""

import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .engine import DEFAULT_TTL_MILLIS, DEFAULT_WINDOW_SIZE, TrainerEngine

ENV_PREFIX = "WORDRUSH_"


def _env_int(environ: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    value = environ.get(ENV_PREFIX + name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}") from None


@dataclass
class TrainerConfig:
    """Session settings."""
    window_size: int = DEFAULT_WINDOW_SIZE
    ttl_millis: int = DEFAULT_TTL_MILLIS
    tick_millis: int = 1000  # How often hosts call advance_time
    seed: Optional[int] = None
    words_path: Optional[Path] = None

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "TrainerConfig":
        """Construct settings from WORDRUSH_* environment variables when set."""
        if environ is None:
            environ = os.environ
        words = environ.get(ENV_PREFIX + "WORDS")
        return cls(
            window_size=_env_int(environ, "WINDOW_SIZE", cls.window_size),
            ttl_millis=_env_int(environ, "TTL_MILLIS", cls.ttl_millis),
            tick_millis=_env_int(environ, "TICK_MILLIS", cls.tick_millis),
            seed=_env_int(environ, "SEED", None),
            words_path=Path(words) if words else None,
        )

    def engine(self) -> TrainerEngine:
        """Build an engine using these settings."""
        return TrainerEngine(
            ttl_millis=self.ttl_millis,
            window_size=self.window_size,
            rng=random.Random(self.seed),
        )
