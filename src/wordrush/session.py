"""Host-side session driver.

Holds the single mutable reference to the engine state, a millisecond clock,
and the contents of the input field. Rendering layers (CLI, GUI) talk to
this class rather than to the engine directly.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .config import TrainerConfig
from .engine import SessionState, TrainerEngine
from .errors import NonMonotonicTimeError

logger = logging.getLogger(__name__)


def monotonic_millis() -> int:
    return int(time.monotonic() * 1000)


@dataclass(frozen=True)
class Snapshot:
    """What a renderer needs to draw one frame."""
    words: list[str]
    typed_count: int
    wpm: float
    elapsed_millis: int


class TrainerSession:
    """A running typing session fed by a clock and an input field."""

    def __init__(self, words: Iterable[str], config: Optional[TrainerConfig] = None,
                 clock: Optional[Callable[[], int]] = None,
                 engine: Optional[TrainerEngine] = None):
        self.config = config or TrainerConfig()
        self.engine = engine or self.config.engine()
        self.clock = clock or monotonic_millis
        self.input_text = ''
        self.state: Optional[SessionState] = None
        self._words = list(words)

    @property
    def is_running(self) -> bool:
        return self.state is not None

    def _require_state(self) -> SessionState:
        if self.state is None:
            raise RuntimeError("Session not started")
        return self.state

    def start(self) -> SessionState:
        """Start (or restart) the session at the current clock time."""
        self.input_text = ''
        self.state = self.engine.start(self._words, self.config.window_size, self.clock())
        logger.debug("Session started at %d with %d words", self.state.started_at,
                     len(self.state.pool))
        return self.state

    def tick(self) -> bool:
        """Advance to the current time. Returns True if any word rotated."""
        state = self._require_state()
        try:
            new_state = self.engine.advance_time(state, self.clock())
        except NonMonotonicTimeError as e:
            logger.warning("Ignoring tick: %s", e)
            return False
        self.state = new_state
        changed = new_state.window is not state.window
        if changed:
            logger.debug("Rotated expired words at %d", new_state.now)
        return changed

    def type_text(self, text: str) -> bool:
        """Update the input field and submit it.

        The whole field is checked on every change; on a match the field is
        cleared and the typed counter goes up.
        """
        state = self._require_state()
        self.input_text = text
        result = self.engine.submit_input(state, text, self.clock())
        if result.matched:
            logger.debug("Matched %r at slot %d", text.strip(), result.index)
            self.state = result.state
            self.input_text = ''
        return result.matched

    def snapshot(self) -> Snapshot:
        state = self._require_state()
        return Snapshot(
            words=state.words,
            typed_count=state.typed_count,
            wpm=self.engine.current_wpm(state),
            elapsed_millis=state.elapsed_millis,
        )
