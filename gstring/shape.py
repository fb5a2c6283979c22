from __future__ import annotations

from typing import Iterator, MutableSequence, Sequence

from .grapheme import Grapheme


def newline_indices(glyphs: Sequence[Grapheme]) -> Sequence[int]:
    return tuple(idx for idx, glyph in enumerate(glyphs) if glyph.is_newline())


def split_lines(glyphs: Sequence[Grapheme]) -> Sequence[Sequence[Grapheme]]:
    """
    Each line keeps its newline grapheme, the trailing remainder is always present
    """

    def cont() -> Iterator[Sequence[Grapheme]]:
        line: MutableSequence[Grapheme] = []
        for glyph in glyphs:
            line.append(glyph)
            if glyph.is_newline():
                yield tuple(line)
                line.clear()
        yield tuple(line)

    return tuple(cont())


def calc_shape(glyphs: Sequence[Grapheme]) -> Sequence[int]:
    return tuple(max(len(line) - 1, 0) for line in split_lines(glyphs))
