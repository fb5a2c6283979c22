import pytest

from gstring import GString
from gstring.grapheme import graphemes
from gstring.shape import calc_shape, newline_indices, split_lines


@pytest.mark.parametrize(
    "text, shape",
    (
        ("", (0,)),
        ("a", (0,)),
        ("abc", (2,)),
        ("\n", (0, 0)),
        ("abc\ndef", (3, 2)),
        ("abc\n", (3, 0)),
        ("\na\nbc\nd\nefg\n", (0, 1, 2, 1, 3, 0)),
        ("a\r\nb", (1, 0)),
        ("a\u0310e\u0301\no\u0308\u0332", (2, 0)),
    ),
)
def test_shape(text, shape):
    assert calc_shape(graphemes(text)) == shape
    assert GString(text).shape() == shape


@pytest.mark.parametrize(
    "text", ("", "abc", "\n\n", "a\nb\r\nc\n", "\r\r\n\n", "x\u0301\ny\u0302\n")
)
def test_shape_cardinality(text):
    gstr = GString(text)
    assert len(gstr.shape()) == 1 + len(gstr.newlines())


@pytest.mark.parametrize(
    "text, newlines",
    (
        ("abc\ndef", (3,)),
        ("abc\ndef\n", (3, 7)),
        ("abc", ()),
        ("", ()),
        ("\n", (0,)),
        ("\n\n", (0, 1)),
        ("a\r\nb\nc", (1, 3)),
    ),
)
def test_newlines(text, newlines):
    assert newline_indices(graphemes(text)) == newlines
    assert GString(text).newlines() == newlines


def test_lone_cr_is_not_a_newline():
    assert GString("a\rb").newlines() == ()
    assert GString("a\rb").shape() == (2,)


@pytest.mark.parametrize(
    "text, lines",
    (
        ("abc\ndef", ("abc\n", "def")),
        ("abc\n", ("abc\n", "")),
        ("\ndef", ("\n", "def")),
        ("", ("",)),
        ("a\r\n\r\nb", ("a\r\n", "\r\n", "b")),
    ),
)
def test_lines(text, lines):
    split = split_lines(graphemes(text))
    assert tuple("".join(map(str, line)) for line in split) == lines
    assert GString(text).lines() == tuple(map(GString, lines))


def test_lines_have_their_own_shape():
    first, second = GString("ab\ncd").lines()
    assert first.shape() == (2, 0)
    assert second.shape() == (1,)
