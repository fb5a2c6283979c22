from __future__ import annotations

from typing import AbstractSet, NewType, Protocol, Sequence, Tuple, Union

Position = NewType("Position", int)
Coordinates = Tuple[int, int]
Shape = Sequence[int]
Bounds = Union[slice, range]

NEWLINES: AbstractSet[str] = frozenset(("\n", "\r\n"))


class Segmenter(Protocol):
    def __call__(self, text: str) -> Sequence[str]:
        ...


class InvalidGraphemeCount(ValueError):
    def __init__(self, text: str, count: int) -> None:
        super().__init__(f"Input must contain 1 grapheme, got {count}: {text!r}")
        self.text, self.count = text, count


class IndexOutOfRange(IndexError):
    ...


class InvalidInterchange(ValueError):
    ...
