from __future__ import annotations

import re
from typing import Union

from .stream import MultiLineStream


PatternLike = Union[re.Pattern[bytes], re.Pattern[str], bytes, str]


def compile_pattern(pattern: PatternLike) -> re.Pattern[bytes] | re.Pattern[str]:
    """Return a compiled pattern; text and bytes patterns keep their own meaning."""
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, (str, bytes)):
        return re.compile(pattern)
    raise TypeError(f"pattern must be str, bytes or re.Pattern, not {type(pattern).__name__}")


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogateescape"))


class RegexpStream(MultiLineStream):
    """A `MultiLineStream` that can also move by regular expression.

    Searches run over the rest of the source from ``pos()``, so ``^`` and
    ``\\A`` anchor at the current offset. Neither search is anchored otherwise.

    Bytes patterns match raw bytes and search the buffer in place. Text
    patterns match characters: the rest of the buffer is decoded as UTF-8
    (undecodable bytes round-trip through ``surrogateescape``) and match
    offsets are converted back to byte offsets, so a text pattern never stops
    inside a multi-byte character. Either way the match is returned as bytes.
    """

    __slots__ = ()

    def _search(self, pattern: PatternLike) -> tuple[int, int, bytes] | None:
        """Find `pattern` after the current offset as (start, end, matched bytes).

        Offsets are relative to ``pos()``.
        """
        compiled = compile_pattern(pattern)
        if isinstance(compiled.pattern, bytes):
            m = compiled.search(memoryview(self._source)[self._position :])
            if m is None:
                return None
            return m.start(), m.end(), bytes(m.group(0))

        rest = self._source[self._position :].decode("utf-8", "surrogateescape")
        m = compiled.search(rest)
        if m is None:
            return None
        start = _byte_len(rest[: m.start()])
        matched = m.group(0).encode("utf-8", "surrogateescape")
        return start, start + len(matched), matched

    def advance_if_regexp(self, pattern: PatternLike) -> bytes | None:
        """Skip to and past the first match of `pattern` in the rest of the source.

        Any unmatched text before the match is consumed along with the match.
        Returns the matched bytes, or None (without moving) if nothing matches.
        """
        found = self._search(pattern)
        if found is None:
            return None
        _, end, matched = found
        self._position += end
        return matched

    def advance_until_regexp(self, pattern: PatternLike) -> bytes | None:
        """Move to the start of the first match, leaving it unconsumed.

        Returns the matched bytes. Without a match, moves to the end and
        returns None.
        """
        found = self._search(pattern)
        if found is None:
            self.go_to_end()
            return None
        start, _, matched = found
        self._position += start
        return matched
