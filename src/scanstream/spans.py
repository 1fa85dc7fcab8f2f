from __future__ import annotations

from dataclasses import dataclass

from .errors import OutOfRangeError


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete position in a scanned buffer.

    Offsets are 0-based byte offsets; line/column are 1-based for user-facing
    messages. Columns count bytes, not characters.
    """

    offset: int
    line: int
    column: int

    def format(self) -> str:
        return f"{self.line}:{self.column}"


def position_at(source: bytes, offset: int) -> Position:
    """Resolve a byte offset in `source` to a line/column position."""
    if offset < 0 or offset > len(source):
        raise OutOfRangeError(offset=offset, length=len(source), message="no line/column for offset")
    line = source.count(b"\n", 0, offset) + 1
    line_start = source.rfind(b"\n", 0, offset) + 1
    return Position(offset=offset, line=line, column=offset - line_start + 1)
