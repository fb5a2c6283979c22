from __future__ import annotations

from typing import Any, Iterable, Sequence, Tuple, Union

from .lib import encode
from .segmentation import DEFAULT_SEGMENTER
from .types import NEWLINES, InvalidGraphemeCount, Segmenter


def _wrap(cluster: str) -> Grapheme:
    glyph = object.__new__(Grapheme)
    object.__setattr__(glyph, "_data", cluster)
    return glyph


def graphemes(
    text: str, segmenter: Segmenter = DEFAULT_SEGMENTER
) -> Tuple[Grapheme, ...]:
    return tuple(map(_wrap, segmenter(text)))


def join(sep: Union[str, Grapheme], glyphs: Iterable[Union[str, Grapheme]]) -> str:
    return str(sep).join(map(str, glyphs))


def is_newline(glyph: Union[str, Grapheme]) -> bool:
    return str(glyph) in NEWLINES


class Grapheme:
    """
    Exactly one extended grapheme cluster
    """

    __slots__ = ("_data",)
    _data: str

    def __init__(
        self, glyph: Union[str, Grapheme], segmenter: Segmenter = DEFAULT_SEGMENTER
    ) -> None:
        if isinstance(glyph, Grapheme):
            data = glyph._data
        elif isinstance(glyph, str):
            clusters = segmenter(glyph)
            if len(clusters) != 1:
                raise InvalidGraphemeCount(glyph, count=len(clusters))
            else:
                (data,) = clusters
        else:
            raise ValueError(glyph)

        object.__setattr__(self, "_data", data)

    @classmethod
    def new(cls, text: str, segmenter: Segmenter = DEFAULT_SEGMENTER) -> Grapheme:
        return cls(text, segmenter=segmenter)

    def __setattr__(self, key: str, val: Any) -> None:
        raise AttributeError(key)

    def __reduce__(self) -> Tuple[Any, Tuple[str]]:
        return _wrap, (self._data,)

    def __eq__(self, x: Any) -> bool:
        if isinstance(x, Grapheme):
            return self._data == x._data
        elif isinstance(x, str):
            return self._data == x
        else:
            return False

    def __hash__(self) -> int:
        return hash(self._data)

    def __str__(self) -> str:
        return self._data

    def __repr__(self) -> str:
        return repr(self._data)

    def as_str(self) -> str:
        return self._data

    def chars(self) -> Sequence[str]:
        return tuple(self._data)

    def bytes(self) -> bytes:
        return encode(self._data)

    def is_newline(self) -> bool:
        return self._data in NEWLINES
