"""Pytest fixtures for Word Rush tests."""

import random

import pytest

from wordrush.engine import SessionState, TrainerEngine
from wordrush.pool import WordPool
from wordrush.window import DisplayWindow, Slot


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for reproducible sampling."""
    return random.Random(1234)


@pytest.fixture
def animal_pool(rng) -> WordPool:
    return WordPool(["cat", "dog", "bird"], rng=rng)


@pytest.fixture
def engine(rng) -> TrainerEngine:
    return TrainerEngine(ttl_millis=5000, window_size=10, rng=rng)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_window():
    """Build a window from explicit words, all appearing at the same time."""
    def _make(words, appeared_at=0):
        return DisplayWindow(tuple(Slot(w, appeared_at) for w in words))
    return _make


@pytest.fixture
def make_state(make_window):
    """Build a session state with a known window.

    Replacement words are drawn from `refill`, which defaults to a single
    word so the outcome of any refresh is predictable.
    """
    def _make(words, refill=("zzz",), now=0, started_at=0, typed_count=0):
        return SessionState(
            pool=WordPool(refill),
            started_at=started_at,
            typed_count=typed_count,
            window=make_window(words, appeared_at=now),
            now=now,
        )
    return _make
