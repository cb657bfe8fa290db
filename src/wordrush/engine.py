"""Trainer engine: the session state machine.

Every transition is a pure function from one `SessionState` to the next.
The caller owns the single mutable reference to the current state and
decides when to tick and when to submit input.
"""

import random
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Union

from .errors import NonMonotonicTimeError
from .matcher import find_match
from .metrics import wpm
from .pool import WordPool
from .window import DisplayWindow

DEFAULT_WINDOW_SIZE = 10
DEFAULT_TTL_MILLIS = 5000


@dataclass(frozen=True)
class SessionState:
    """Snapshot of a running session."""
    pool: WordPool
    started_at: int
    typed_count: int
    window: DisplayWindow
    now: int

    @property
    def words(self) -> list[str]:
        return self.window.words

    @property
    def elapsed_millis(self) -> int:
        return self.now - self.started_at


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of submitting input: the next state and whether it matched."""
    state: SessionState
    matched: bool
    index: Optional[int] = None


class TrainerEngine:
    """Drives sessions with a fixed expiry time and default window size."""

    def __init__(self, ttl_millis: int = DEFAULT_TTL_MILLIS,
                 window_size: int = DEFAULT_WINDOW_SIZE,
                 rng: Optional[random.Random] = None):
        self.ttl_millis = ttl_millis
        self.window_size = window_size
        self.rng = rng or random.Random()

    def start(self, pool: Union[WordPool, Iterable[str]],
              window_size: Optional[int] = None, now: int = 0) -> SessionState:
        """Begin a session at `now` with a freshly sampled window.

        A plain sequence of words is wrapped in a WordPool that shares the
        engine's random generator.
        """
        if not isinstance(pool, WordPool):
            pool = WordPool(pool, rng=self.rng)
        if window_size is None:
            window_size = self.window_size
        window = DisplayWindow.create_initial(pool, window_size, now)
        return SessionState(pool=pool, started_at=now, typed_count=0, window=window, now=now)

    def advance_time(self, state: SessionState, now: int) -> SessionState:
        """Move the session clock to `now` and rotate expired slots."""
        if now < state.now:
            raise NonMonotonicTimeError(state.now, now)
        window = state.window.refresh_expired(state.pool, now, self.ttl_millis)
        return replace(state, window=window, now=now)

    def submit_input(self, state: SessionState, raw_input: str, now: int) -> SubmitResult:
        """Match raw input against the current window.

        Only the matched slot changes; expiry is left to advance_time. A
        miss returns the state untouched. A timestamp older than the
        session clock is clamped to it.
        """
        index = find_match(state.window, raw_input)
        if index is None:
            return SubmitResult(state, False)
        now = max(now, state.now)
        window = state.window.replace_at(index, state.pool, now)
        next_state = replace(state, window=window, typed_count=state.typed_count + 1, now=now)
        return SubmitResult(next_state, True, index)

    def current_wpm(self, state: SessionState) -> float:
        return wpm(state.typed_count, state.started_at, state.now)
