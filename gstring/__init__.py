from .container import GString, gstring
from .grapheme import Grapheme, graphemes, is_newline
from .logging import log
from .segmentation import segment
from .types import (
    NEWLINES,
    Coordinates,
    IndexOutOfRange,
    InvalidGraphemeCount,
    InvalidInterchange,
    Position,
    Segmenter,
    Shape,
)

__version__ = "0.1.0"
