from typing import Sequence

from regex import compile as re_compile

from .types import Segmenter

# \X matches one extended grapheme cluster (UAX #29)
_CLUSTER = re_compile(r"\X")


def segment(text: str) -> Sequence[str]:
    if not text:
        return ()
    else:
        return tuple(_CLUSTER.findall(text))


DEFAULT_SEGMENTER: Segmenter = segment
