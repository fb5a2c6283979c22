from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Mapping

from .lib import n_digits

if TYPE_CHECKING:
    from .container import GString


_ESCAPES: Mapping[str, str] = {"\n": "\\n", "\r\n": "\\r\\n"}


def _vertical(numbers: Iterable[int], width: int) -> Iterator[str]:
    padded = tuple(f"{number:0{width}d}" for number in numbers)
    for n in range(width):
        yield " ".join(digits[n] for digits in padded)


def shape_string(gstr: GString) -> str:
    """
    Grid of every grapheme with its row, column, and position

      - a column header over the whole grid, wide enough for the longest row
      - per row: column header above, row index to the left, position below
      - the last row includes one column past the end
    """

    shape = gstr.shape()
    last_row = len(shape) - 1
    row_width = n_digits(last_row)
    row_space = " " * row_width

    def cont() -> Iterator[str]:
        max_column = max(max(shape), shape[-1] + 1)
        for digits in _vertical(range(max_column + 1), width=n_digits(max_column)):
            yield f"{row_space} {digits}"
        yield ""

        position = 0
        for row, line in enumerate(gstr.lines()):
            max_column = shape[row] + int(row == last_row)
            header = _vertical(range(max_column + 1), width=n_digits(max_column + 1))
            for digits in header:
                yield f"{row_space} {digits}"

            glyphs = " ".join(_ESCAPES.get(str(glyph), str(glyph)) for glyph in line)
            yield f"{row:0{row_width}d} {glyphs}"

            stop = position + max_column
            footer = _vertical(range(position, stop + 1), width=n_digits(stop + 1))
            for digits in footer:
                yield f"{row_space} {digits}"
            yield ""

            position += shape[row] + 1

    return "".join(f"{line}\n" for line in cont())
