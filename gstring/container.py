from __future__ import annotations

from typing import (
    Any,
    Iterable,
    Iterator,
    MutableSequence,
    Optional,
    Sequence,
    Tuple,
    Union,
    overload,
)

from .coordinates import to_coordinates, to_position
from .grapheme import Grapheme, graphemes, join
from .lib import encode
from .logging import log
from .render import shape_string
from .search import find_from, find_prev_from
from .segmentation import DEFAULT_SEGMENTER
from .shape import calc_shape, newline_indices, split_lines
from .types import (
    Bounds,
    Coordinates,
    IndexOutOfRange,
    Position,
    Segmenter,
    Shape,
)

Text = Union[str, "GString"]


class GString:
    """
    String indexed by extended grapheme clusters

    Positions, ranges and coordinates all count graphemes, never code points or bytes.
    The shape index is rebuilt after every structural mutation.
    """

    def __init__(
        self, text: Text = "", segmenter: Segmenter = DEFAULT_SEGMENTER
    ) -> None:
        self._segmenter = segmenter
        self._data: MutableSequence[Grapheme] = []
        self._shape: Shape = ()
        self._newlines: Sequence[int] = ()
        self._version = 0

        self._data.extend(self._segment(text))
        self._reshape()

    @classmethod
    def from_graphemes(
        cls, glyphs: Iterable[Grapheme], segmenter: Segmenter = DEFAULT_SEGMENTER
    ) -> GString:
        gstr = cls(segmenter=segmenter)
        gstr._data.extend(glyphs)
        gstr._reshape()
        return gstr

    def _segment(self, text: Text) -> Sequence[Grapheme]:
        if isinstance(text, GString):
            return tuple(text._data)
        elif isinstance(text, str):
            return graphemes(text, segmenter=self._segmenter)
        else:
            raise TypeError(text)

    def _derive(self, glyphs: Iterable[Grapheme]) -> GString:
        return GString.from_graphemes(glyphs, segmenter=self._segmenter)

    def _reshape(self) -> None:
        self._shape = calc_shape(self._data)
        self._newlines = newline_indices(self._data)
        self._version += 1

    def _bounds(self, bounds: Bounds) -> Tuple[int, int]:
        length = len(self._data)
        if isinstance(bounds, range):
            start, stop, step = bounds.start, bounds.stop, bounds.step
        elif isinstance(bounds, slice):
            start = 0 if bounds.start is None else bounds.start
            stop = length if bounds.stop is None else bounds.stop
            step = bounds.step
        else:
            raise TypeError(bounds)

        if step not in {None, 1}:
            raise ValueError(bounds)
        elif not 0 <= start <= stop <= length:
            raise IndexOutOfRange((start, stop, length))
        else:
            return start, stop

    def _index(self, index: int) -> int:
        if not 0 <= index < len(self._data):
            raise IndexOutOfRange((index, len(self._data)))
        else:
            return index

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def get(self, index: int) -> Optional[Grapheme]:
        if 0 <= index < len(self._data):
            return self._data[index]
        else:
            return None

    @overload
    def __getitem__(self, index: int) -> Grapheme:
        ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Grapheme]:
        ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[Grapheme, Sequence[Grapheme]]:
        if isinstance(index, slice):
            start, stop = self._bounds(index)
            return tuple(self._data[start:stop])
        else:
            return self._data[self._index(index)]

    def graphemes(self) -> Sequence[Grapheme]:
        return tuple(self._data)

    def into_graphemes(self) -> MutableSequence[Grapheme]:
        glyphs, self._data = self._data, []
        self._reshape()
        return glyphs

    def chars(self) -> Sequence[str]:
        return tuple(char for glyph in self._data for char in glyph.chars())

    def bytes(self) -> bytes:
        return encode(str(self))

    def copy(self) -> GString:
        return self._derive(self._data)

    def __str__(self) -> str:
        return join("", self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, GString):
            return self._data == other._data
        elif isinstance(other, str):
            return tuple(self._data) == graphemes(other, segmenter=self._segmenter)
        else:
            return NotImplemented

    __hash__ = None  # type: ignore

    def __iter__(self) -> Iterator[Grapheme]:
        return self.iter()

    def iter(self) -> Iterator[Grapheme]:
        version = self._version

        def cont() -> Iterator[Grapheme]:
            idx = 0
            while True:
                if self._version != version:
                    raise RuntimeError("GString mutated during iteration")
                elif idx >= len(self._data):
                    return
                else:
                    yield self._data[idx]
                    idx += 1

        return cont()

    def into_iter(self) -> Iterator[Grapheme]:
        return iter(self.into_graphemes())

    def lines(self) -> Sequence[GString]:
        return tuple(map(self._derive, split_lines(self._data)))

    def shape(self) -> Shape:
        return self._shape

    def newlines(self) -> Sequence[int]:
        return self._newlines

    def coordinates(self, position: int) -> Optional[Coordinates]:
        return to_coordinates(
            len(self._data), newlines=self._newlines, position=position
        )

    def position(self, coordinates: Coordinates) -> Optional[Position]:
        return to_position(
            len(self._data), newlines=self._newlines, coordinates=coordinates
        )

    def shape_string(self) -> str:
        return shape_string(self)

    def _replace(self, start: int, stop: int, text: Text) -> Sequence[Grapheme]:
        replacement = self._segment(text)
        removed = self._data[start:stop]
        self._data[start:stop] = replacement
        self._reshape()
        return removed

    def insert(self, index: int, text: Text) -> None:
        start, stop = self._bounds(range(index, index))
        self._replace(start, stop, text)
        log.debug("insert %d -> %d", index, len(self._data))

    def remove(self, index: int) -> Grapheme:
        glyph = self._data.pop(self._index(index))
        self._reshape()
        log.debug("remove %d -> %d", index, len(self._data))
        return glyph

    def push(self, text: Text) -> None:
        self._data.extend(self._segment(text))
        self._reshape()
        log.debug("push -> %d", len(self._data))

    def pop(self) -> Optional[Grapheme]:
        if not self._data:
            return None
        else:
            glyph = self._data.pop()
            self._reshape()
            log.debug("pop -> %d", len(self._data))
            return glyph

    def splice(self, bounds: Bounds, text: Text) -> GString:
        start, stop = self._bounds(bounds)
        removed = self._replace(start, stop, text)
        log.debug("splice %d:%d -> %d", start, stop, len(self._data))
        return self._derive(removed)

    def drain(self, bounds: Bounds) -> GString:
        start, stop = self._bounds(bounds)
        removed = self._data[start:stop]
        del self._data[start:stop]
        self._reshape()
        log.debug("drain %d:%d -> %d", start, stop, len(self._data))
        return self._derive(removed)

    def slice(self, bounds: Bounds) -> GString:
        start, stop = self._bounds(bounds)
        return self._derive(self._data[start:stop])

    def find(self, pattern: Text) -> Optional[Position]:
        return find_from(self._data, start=0, pattern=self._segment(pattern))

    def find_from(self, start: int, pattern: Text) -> Optional[Position]:
        return find_from(self._data, start=start, pattern=self._segment(pattern))

    def find_prev_from(self, start: int, pattern: Text) -> Optional[Position]:
        return find_prev_from(self._data, start=start, pattern=self._segment(pattern))

    def __contains__(self, pattern: Any) -> bool:
        if isinstance(pattern, Grapheme):
            return pattern in self._data
        elif isinstance(pattern, (str, GString)):
            return self.find(pattern) is not None
        else:
            return False


def gstring(text: str, segmenter: Segmenter = DEFAULT_SEGMENTER) -> GString:
    return GString(text, segmenter=segmenter)
