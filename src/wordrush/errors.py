"""Errors raised by the trainer core."""


class TrainerError(ValueError):
    """Base class for trainer errors."""


class EmptyPoolError(TrainerError):
    """No words available to sample from."""

    def __init__(self, message: str = "Word pool is empty"):
        super().__init__(message)


class InvalidWindowSizeError(TrainerError):
    """Window size must be a positive integer."""

    def __init__(self, window_size):
        self.window_size = window_size
        super().__init__(f"Window size must be positive, got {window_size!r}")


class NonMonotonicTimeError(TrainerError):
    """A timestamp went backwards relative to the session clock."""

    def __init__(self, previous: int, received: int):
        self.previous = previous
        self.received = received
        super().__init__(f"Time went backwards: {received} < {previous}")
