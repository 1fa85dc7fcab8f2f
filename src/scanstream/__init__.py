from __future__ import annotations

from .api import open_stream
from .errors import OutOfRangeError, ScanError
from .regexp import RegexpStream, compile_pattern
from .spans import Position, position_at
from .stream import WHITESPACE, MultiLineStream

__all__ = [
    "MultiLineStream",
    "OutOfRangeError",
    "Position",
    "RegexpStream",
    "ScanError",
    "WHITESPACE",
    "compile_pattern",
    "open_stream",
    "position_at",
]
