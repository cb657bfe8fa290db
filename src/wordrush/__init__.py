"""Word Rush - a rotating-window typing speed trainer."""

__version__ = "0.1.0"

from .errors import TrainerError, EmptyPoolError, InvalidWindowSizeError, NonMonotonicTimeError
from .pool import WordPool
from .window import Slot, DisplayWindow, is_expired
from .matcher import find_match
from .metrics import wpm
from .engine import SessionState, SubmitResult, TrainerEngine
from .config import TrainerConfig
from .wordlist import DEFAULT_WORDS, load_words
from .session import TrainerSession, Snapshot
