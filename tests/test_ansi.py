import pytest

from inquest.ansi import (
    AnsiChar,
    AnsiEscapeSequence,
    ansi_aware_chars,
    ansi_stripped_chars,
    strip_ansi,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1\x1b[0m2", "12"),
        ("\x1b[92mHello, \x1b[91mWorld!\x1b[0m", "Hello, World!"),
        ("\x1b[7@Hi", "Hi"),
        ("\x1b]0;Set The Terminal Title To This\u009cPrint This", "Print This"),
        ("\x1b[96", ""),
    ],
)
def test_normal_ansi_escapes(text, expected):
    assert strip_ansi(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("\x1b[\x1b]String\u009cHello World", "Hello World"),
        ("\x1b[\x1b[38;5;43mAB\x1b[48;5;10mCD\x1b[0m", "ABCD"),
        ("\x1b\x19[96mCat\x1b[0m\n", "Cat\n"),
    ],
)
def test_inconsistencies(text, expected):
    assert strip_ansi(text) == expected


def test_stripped_chars_yields_single_characters():
    assert list(ansi_stripped_chars("\x1b[1mab\x1b[0m")) == ["a", "b"]


def test_ansi_aware_normal_escapes():
    chars = list(ansi_aware_chars("\x1b[92mHello, \x1b[91mWorld!\x1b[0m"))
    assert chars == [
        AnsiEscapeSequence("\x1b[92m"),
        AnsiChar("H"),
        AnsiChar("e"),
        AnsiChar("l"),
        AnsiChar("l"),
        AnsiChar("o"),
        AnsiChar(","),
        AnsiChar(" "),
        AnsiEscapeSequence("\x1b[91m"),
        AnsiChar("W"),
        AnsiChar("o"),
        AnsiChar("r"),
        AnsiChar("l"),
        AnsiChar("d"),
        AnsiChar("!"),
        AnsiEscapeSequence("\x1b[0m"),
    ]


def test_ansi_aware_osc_string():
    chars = list(ansi_aware_chars("\x1b]0;Set The Terminal Title To This\u009cPrint This"))
    assert chars == [
        AnsiEscapeSequence("\x1b]0;Set The Terminal Title To This\u009c"),
        AnsiChar("P"),
        AnsiChar("r"),
        AnsiChar("i"),
        AnsiChar("n"),
        AnsiChar("t"),
        AnsiChar(" "),
        AnsiChar("T"),
        AnsiChar("h"),
        AnsiChar("i"),
        AnsiChar("s"),
    ]


def test_plain_text_is_unchanged():
    text = "plain text ∑ ❤"
    assert strip_ansi(text) == text
    assert "".join(c.char for c in ansi_aware_chars(text)) == text


def test_aware_chars_reassemble_original():
    text = "\x1b[1;31mred\x1b[0m and \x1b]2;title\x07done"
    parts = []
    for item in ansi_aware_chars(text):
        parts.append(item.text if isinstance(item, AnsiEscapeSequence) else item.char)
    assert "".join(parts) == text