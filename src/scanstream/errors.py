from __future__ import annotations

from dataclasses import dataclass


class ScanError(Exception):
    """Base class for errors raised by a stream."""


@dataclass(slots=True)
class OutOfRangeError(ScanError, IndexError):
    """A move would put the stream offset outside [0, length]."""

    offset: int
    length: int
    message: str

    def __str__(self) -> str:
        return f"offset {self.offset} out of range [0, {self.length}]: {self.message}"
