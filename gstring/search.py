from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

from .grapheme import Grapheme
from .types import IndexOutOfRange, Position


def _windows(
    glyphs: Sequence[Grapheme], width: int
) -> Iterator[Tuple[Grapheme, ...]]:
    for idx in range(len(glyphs) - width + 1):
        yield tuple(glyphs[idx : idx + width])


def _first(glyphs: Sequence[Grapheme], pattern: Sequence[Grapheme]) -> Optional[int]:
    needle = tuple(pattern)
    for idx, window in enumerate(_windows(glyphs, width=len(needle))):
        if window == needle:
            return idx
    else:
        return None


def _check(glyphs: Sequence[Grapheme], start: int) -> None:
    if not 0 <= start <= len(glyphs):
        raise IndexOutOfRange((start, len(glyphs)))


def find_from(
    glyphs: Sequence[Grapheme], start: int, pattern: Sequence[Grapheme]
) -> Optional[Position]:
    _check(glyphs, start=start)
    if (idx := _first(glyphs[start:], pattern=pattern)) is None:
        return None
    else:
        return Position(idx + start)


def find_prev_from(
    glyphs: Sequence[Grapheme], start: int, pattern: Sequence[Grapheme]
) -> Optional[Position]:
    _check(glyphs, start=start)
    length = len(glyphs)
    offset = length - start
    rev_glyphs = tuple(reversed(glyphs))[offset:]
    rev_pattern = tuple(reversed(pattern))
    if (idx := _first(rev_glyphs, pattern=rev_pattern)) is None:
        return None
    else:
        return Position(length - idx - offset - len(rev_pattern))
