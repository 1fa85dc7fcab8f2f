from __future__ import annotations

from collections.abc import Callable
from typing import Union

from .errors import OutOfRangeError
from .spans import Position, position_at


# space, tab, line feed, form feed, carriage return
WHITESPACE = frozenset(b" \t\n\x0c\r")


Source = Union[str, bytes, bytearray, memoryview]


def _as_source(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, bytes):
        return source
    if isinstance(source, (bytearray, memoryview)):
        # Snapshot mutable buffers so offsets stay valid for the stream's lifetime.
        return bytes(source)
    raise TypeError(f"source must be str or bytes-like, not {type(source).__name__}")


def _as_byte(ch: int | bytes | str) -> int:
    if isinstance(ch, bool):
        raise TypeError("expected a byte value, not bool")
    if isinstance(ch, int):
        if not 0 <= ch <= 0xFF:
            raise ValueError(f"byte value out of range: {ch}")
        return ch
    if isinstance(ch, str):
        ch = ch.encode("utf-8")
    if isinstance(ch, (bytes, bytearray)) and len(ch) == 1:
        return ch[0]
    raise ValueError(f"expected a single byte, got {ch!r}")


def _as_literal(literal: bytes | str) -> bytes:
    if isinstance(literal, str):
        return literal.encode("utf-8")
    if isinstance(literal, (bytes, bytearray, memoryview)):
        return bytes(literal)
    raise TypeError(f"literal must be str or bytes, not {type(literal).__name__}")


class MultiLineStream:
    """Quick movement over multiple lines of text.

    The stream is a byte offset into an immutable UTF-8 buffer. All offsets,
    counts and peeked values are bytes; multi-byte characters are never
    decoded, so callers are expected to move along known ASCII delimiters.

    Moves that would leave ``[0, len(source)]`` raise `OutOfRangeError` and
    leave the offset untouched. Every other operation is total and reports
    "no match" through its return value.
    """

    __slots__ = ("_source", "_position")

    def __init__(self, source: Source, position: int = 0) -> None:
        self._source = _as_source(source)
        self._position = 0
        self._move_to(position, "initial position outside source")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pos={self._position}, len={len(self._source)})"

    @property
    def source(self) -> bytes:
        return self._source

    def _move_to(self, target: int, message: str) -> None:
        if target < 0 or target > len(self._source):
            raise OutOfRangeError(offset=target, length=len(self._source), message=message)
        self._position = target

    # Position queries

    def eos(self) -> bool:
        return len(self._source) <= self._position

    def pos(self) -> int:
        return self._position

    def location(self) -> Position:
        """Line/column of the current offset, for diagnostics."""
        return position_at(self._source, self._position)

    def remaining(self) -> memoryview:
        """Read-only view of the bytes from the current offset to the end."""
        return memoryview(self._source)[self._position :]

    # Unconditional movement

    def go_back(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"go_back() count must be non-negative, got {n}")
        self._move_to(self._position - n, f"cannot go back {n} bytes from {self._position}")

    def advance(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"advance() count must be non-negative, got {n}")
        self._move_to(self._position + n, f"cannot advance {n} bytes from {self._position}")

    def go_to_end(self) -> None:
        self._position = len(self._source)

    # Lookahead

    def peek_char(self, n: int = 0) -> int | None:
        """Byte at ``pos() + n`` (n may be negative), or None outside the buffer."""
        index = self._position + n
        if index < 0 or index >= len(self._source):
            return None
        return self._source[index]

    # Conditional matching

    def advance_if_char(self, ch: int | bytes | str) -> bool:
        if self.peek_char() == _as_byte(ch):
            self._position += 1
            return True
        return False

    def advance_if_chars(self, literal: bytes | str) -> bool:
        lit = _as_literal(literal)
        if self._position + len(lit) > len(self._source):
            return False
        if not self._source.startswith(lit, self._position):
            return False
        self._position += len(lit)
        return True

    # Scan-forward searches

    def advance_until_char(self, ch: int | bytes | str) -> bool:
        """Stop on the next `ch` without consuming it; go to the end if absent."""
        index = self._source.find(_as_byte(ch), self._position)
        if index < 0:
            self.go_to_end()
            return False
        self._position = index
        return True

    def advance_until_chars(self, literal: bytes | str) -> bool:
        """Stop at the start of the next `literal`; go to the end if absent."""
        index = self._source.find(_as_literal(literal), self._position)
        if index < 0:
            self.go_to_end()
            return False
        self._position = index
        return True

    # Predicate scanning

    def skip_whitespace(self) -> bool:
        return self.advance_while_char(WHITESPACE.__contains__) > 0

    def advance_while_char(self, condition: Callable[[int], bool]) -> int:
        start = self._position
        end = len(self._source)
        i = start
        while i < end and condition(self._source[i]):
            i += 1
        self._position = i
        return i - start
