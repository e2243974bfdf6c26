"""Exceptions raised by the engine."""

from __future__ import annotations


class OutOfRangeError(ValueError):
    """A filter position fell outside [1, N]."""

    def __init__(self, position: int, N: int):
        self.position = position
        self.N = N
        super().__init__(f"positions must be between 1 and {N}; got {position}")


class EmptyCorpusError(ValueError):
    """Scoring was asked to normalize an empty candidate list."""

    def __init__(self, message: str = "cannot score an empty candidate list"):
        super().__init__(message)
