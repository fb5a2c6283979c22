import pickle

import pytest

from gstring.grapheme import Grapheme, graphemes, is_newline, join
from gstring.types import InvalidGraphemeCount

S = "a\u0310"


def test_new():
    g = Grapheme(S)
    assert g == S
    assert g == Grapheme.new(S)
    assert g != ""
    assert g != "a"


@pytest.mark.parametrize(
    "text, count", (("", 0), ("ab", 2), ("a\u0310e\u0301", 2))
)
def test_invalid_count(text, count):
    with pytest.raises(InvalidGraphemeCount) as e:
        Grapheme(text)
    assert e.value.count == count
    assert e.value.text == text


def test_invalid_count_is_value_error():
    with pytest.raises(ValueError):
        Grapheme.new("xyz")


def test_wrong_type():
    with pytest.raises(ValueError):
        Grapheme(1)  # type: ignore


def test_chars_bytes():
    g = Grapheme(S)
    assert g.chars() == ("a", "\u0310")
    assert g.bytes() == b"\x61\xcc\x90"
    assert g.as_str() == S


def test_str_repr():
    g = Grapheme(S)
    assert str(g) == S
    assert f"{g}" == S
    assert repr(g) == repr(S)


def test_hash_matches_text():
    assert hash(Grapheme(S)) == hash(S)
    assert len({Grapheme(S), Grapheme(S), Grapheme("b")}) == 2


def test_immutable():
    g = Grapheme(S)
    with pytest.raises(AttributeError):
        g._data = "b"  # type: ignore


def test_pickle():
    g = Grapheme(S)
    assert pickle.loads(pickle.dumps(g)) == g


def test_newline():
    assert Grapheme("\n").is_newline()
    assert Grapheme("\r\n").is_newline()
    assert not Grapheme("\r").is_newline()
    assert not Grapheme("a").is_newline()
    assert is_newline("\r\n")
    assert is_newline(Grapheme("\n"))
    assert not is_newline("a")


def test_graphemes_and_join():
    glyphs = graphemes("a\u0310e\u0301o\u0308\u0332")
    assert glyphs == ("a\u0310", "e\u0301", "o\u0308\u0332")
    assert all(isinstance(glyph, Grapheme) for glyph in glyphs)
    assert join("", glyphs) == "a\u0310e\u0301o\u0308\u0332"
    assert join("|", glyphs) == "a\u0310|e\u0301|o\u0308\u0332"


def test_injected_segmenter():
    def per_char(text):
        return tuple(text)

    with pytest.raises(InvalidGraphemeCount):
        Grapheme(S, segmenter=per_char)
    assert Grapheme("a", segmenter=per_char) == "a"
