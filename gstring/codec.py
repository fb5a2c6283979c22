from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping

from msgpack import Packer, UnpackException, Unpacker

from .container import GString
from .grapheme import Grapheme
from .logging import log
from .segmentation import DEFAULT_SEGMENTER
from .types import InvalidInterchange, Segmenter

_UNICODE_ERRORS = "surrogateescape"
_DECODE_ERRORS = (UnpackException, ValueError, TypeError)


def to_interchange(gstr: GString) -> Mapping[str, Any]:
    return {
        "graphemes": [str(glyph) for glyph in gstr.graphemes()],
        "shape": list(gstr.shape()),
    }


def from_interchange(
    frame: Any, segmenter: Segmenter = DEFAULT_SEGMENTER
) -> GString:
    if not isinstance(frame, Mapping):
        raise InvalidInterchange(frame)
    elif not frame.keys() >= {"graphemes", "shape"}:
        raise InvalidInterchange(frame)
    else:
        raw_glyphs, raw_shape = frame["graphemes"], frame["shape"]
        if isinstance(raw_glyphs, str) or not isinstance(raw_glyphs, Iterable):
            raise InvalidInterchange(raw_glyphs)
        elif not isinstance(raw_shape, Iterable):
            raise InvalidInterchange(raw_shape)
        else:
            glyphs = tuple(Grapheme(glyph, segmenter=segmenter) for glyph in raw_glyphs)
            gstr = GString.from_graphemes(glyphs, segmenter=segmenter)
            if tuple(raw_shape) != tuple(gstr.shape()):
                raise InvalidInterchange((tuple(raw_shape), gstr.shape()))
            else:
                return gstr


def pack(gstr: GString) -> bytes:
    packer = Packer(unicode_errors=_UNICODE_ERRORS)
    return packer.pack(to_interchange(gstr))


def _unpacker() -> Unpacker:
    # non-str keys decode, then fail validation as a missing field
    return Unpacker(
        unicode_errors=_UNICODE_ERRORS, use_list=False, strict_map_key=False
    )


def unpack(data: bytes, segmenter: Segmenter = DEFAULT_SEGMENTER) -> GString:
    unpacker = _unpacker()
    unpacker.feed(data)
    try:
        frames = tuple(unpacker)
    except _DECODE_ERRORS as e:
        raise InvalidInterchange(data) from e

    if len(frames) != 1:
        raise InvalidInterchange(frames)
    else:
        (frame,) = frames
        return from_interchange(frame, segmenter=segmenter)


def unpack_stream(
    chunks: Iterable[bytes], segmenter: Segmenter = DEFAULT_SEGMENTER
) -> Iterator[GString]:
    unpacker = _unpacker()
    try:
        for chunk in chunks:
            unpacker.feed(chunk)
            for frame in unpacker:
                try:
                    gstr = from_interchange(frame, segmenter=segmenter)
                except ValueError as e:
                    log.warning("%s", e)
                else:
                    yield gstr
    except _DECODE_ERRORS as e:
        # undecodable bytes leave the unpacker without a frame boundary
        log.warning("%s", e)
