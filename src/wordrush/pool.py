"""Candidate word pool."""

import random
from typing import Iterable, Optional

from .errors import EmptyPoolError


class WordPool:
    """Immutable collection of candidate words with uniform sampling.

    Duplicates are kept; a word listed twice is twice as likely to be drawn.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        self._words = tuple(words)
        if not self._words:
            raise EmptyPoolError()
        self._rng = rng or random.Random()

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def sample(self) -> str:
        """Return a uniformly random word (with replacement)."""
        if not self._words:
            raise EmptyPoolError()
        return self._rng.choice(self._words)

    def __len__(self):
        return len(self._words)

    def __repr__(self):
        return f"WordPool({len(self._words)} words)"
