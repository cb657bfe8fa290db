"""Display window of timed word slots.

The window is a fixed-length tuple of slots. All operations return a new
window; a refreshed slot keeps its position so "line 3" stays line 3.
"""

from dataclasses import dataclass

from .errors import InvalidWindowSizeError
from .pool import WordPool


@dataclass(frozen=True)
class Slot:
    """One displayed word and the time (ms) it appeared."""
    word: str
    appeared_at: int


def is_expired(slot: Slot, now: int, ttl_millis: int) -> bool:
    """True once a slot has been shown for ttl_millis or longer (inclusive)."""
    return now - slot.appeared_at >= ttl_millis


@dataclass(frozen=True)
class DisplayWindow:
    """Ordered, fixed-size sequence of slots."""
    slots: tuple[Slot, ...]

    @classmethod
    def create_initial(cls, pool: WordPool, window_size: int, now: int) -> "DisplayWindow":
        """Fill a new window with independent samples, all stamped `now`."""
        if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size <= 0:
            raise InvalidWindowSizeError(window_size)
        return cls(tuple(Slot(pool.sample(), now) for _ in range(window_size)))

    @property
    def words(self) -> list[str]:
        return [slot.word for slot in self.slots]

    def expired_indices(self, now: int, ttl_millis: int) -> list[int]:
        return [i for i, slot in enumerate(self.slots) if is_expired(slot, now, ttl_millis)]

    def refresh_expired(self, pool: WordPool, now: int, ttl_millis: int) -> "DisplayWindow":
        """Replace every expired slot in place; others keep their timestamps."""
        expired = self.expired_indices(now, ttl_millis)
        if not expired:
            return self
        slots = list(self.slots)
        for i in expired:
            slots[i] = Slot(pool.sample(), now)
        return DisplayWindow(tuple(slots))

    def replace_at(self, index: int, pool: WordPool, now: int) -> "DisplayWindow":
        """Replace exactly one slot with a fresh sample."""
        if not 0 <= index < len(self.slots):
            raise IndexError(f"Slot index {index} out of range (window size {len(self.slots)})")
        slots = list(self.slots)
        slots[index] = Slot(pool.sample(), now)
        return DisplayWindow(tuple(slots))

    def __len__(self):
        return len(self.slots)

    def __iter__(self):
        return iter(self.slots)

    def __getitem__(self, index: int) -> Slot:
        return self.slots[index]
