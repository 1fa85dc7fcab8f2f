from __future__ import annotations

from typing import Literal, overload

from .regexp import RegexpStream
from .stream import MultiLineStream, Source


@overload
def open_stream(source: Source, position: int = 0, *, regexp: Literal[True]) -> RegexpStream: ...


@overload
def open_stream(source: Source, position: int = 0, *, regexp: bool = False) -> MultiLineStream: ...


def open_stream(source: Source, position: int = 0, *, regexp: bool = False) -> MultiLineStream:
    """Create a stream over `source` starting at byte `position`.

    `regexp` selects the variant: with it the stream also has
    `advance_if_regexp` / `advance_until_regexp`, without it those operations
    do not exist on the returned object.
    """
    cls = RegexpStream if regexp else MultiLineStream
    return cls(source, position)
