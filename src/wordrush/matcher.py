"""Match typed text against the display window."""

from typing import Optional

from .window import DisplayWindow


def normalize(text: str) -> str:
    """Trim surrounding whitespace and fold case for comparison."""
    return text.strip().lower()


def find_match(window: DisplayWindow, raw_input: str) -> Optional[int]:
    """Return the index of the first slot whose word equals the input.

    Comparison ignores case and surrounding whitespace. Empty or blank
    input never matches. With duplicate words the lowest index wins.
    """
    typed = normalize(raw_input)
    if not typed:
        return None
    for index, slot in enumerate(window):
        if slot.word.lower() == typed:
            return index
    return None
