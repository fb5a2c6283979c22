from __future__ import annotations

from bisect import bisect_left
from typing import Optional, Sequence

from .types import Coordinates, Position


def to_coordinates(
    length: int, newlines: Sequence[int], position: int
) -> Optional[Coordinates]:
    if not 0 <= position <= length:
        return None
    else:
        # newlines strictly before `position`
        row = bisect_left(newlines, position)
        if row == 0:
            return row, position
        else:
            return row, position - newlines[row - 1] - 1


def to_position(
    length: int, newlines: Sequence[int], coordinates: Coordinates
) -> Optional[Position]:
    row, column = coordinates
    last_row = len(newlines)

    if (row, column) == (0, 0):
        return Position(0)
    elif not 0 <= row <= last_row or column < 0:
        return None
    else:
        begin = newlines[row - 1] + 1 if row else 0
        end = newlines[row] + 1 if row < last_row else length
        line_len = end - begin

        if column < line_len:
            return Position(begin + column)
        elif row == last_row and column == line_len:
            return Position(length)
        else:
            return None
