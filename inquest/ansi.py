"""Iteration over text that is aware of ANSI escape sequences.

The matcher follows a simplified DEC ANSI parser: it only tracks when the
automaton leaves and returns to the ground state. The only way out of the
ground state is the escape character.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Union

_ESC = 0x1B


class _State(Enum):
    ESCAPE = auto()
    CSI_ENTRY = auto()
    ESCAPE_INTERMEDIATE = auto()
    STRING = auto()


def _escape_final(code: int) -> bool:
    return (
        0x30 <= code <= 0x4F
        or 0x51 <= code <= 0x57
        or code in (0x59, 0x5A, 0x5C)
        or 0x60 <= code <= 0x7E
    )


def _match_escape(text: str, start: int) -> int | None:
    """Return the end index of an escape sequence starting at ``start``, if any."""
    if start >= len(text) or ord(text[start]) != _ESC:
        return None

    state = _State.ESCAPE
    pos = start + 1
    while pos < len(text):
        code = ord(text[pos])
        pos += 1
        if state is _State.ESCAPE:
            if code == 0x5B:
                state = _State.CSI_ENTRY
            elif code in (0x5D, 0x50, 0x58, 0x5E, 0x5F):
                state = _State.STRING
            elif 0x20 <= code <= 0x2F:
                state = _State.ESCAPE_INTERMEDIATE
            elif _escape_final(code):
                return pos
            # anything else keeps us in the escape state
        elif code == _ESC:
            state = _State.ESCAPE
        elif state is _State.CSI_ENTRY:
            if 0x40 <= code <= 0x7E:
                return pos
        elif state is _State.ESCAPE_INTERMEDIATE:
            if 0x30 <= code <= 0x7E:
                return pos
        elif code in (0x07, 0x9C):
            return pos
    return len(text)


@dataclass(frozen=True)
class AnsiEscapeSequence:
    """A complete ANSI escape sequence found in the text."""

    text: str


@dataclass(frozen=True)
class AnsiChar:
    """A single ordinary character."""

    char: str


AnsiAwareChar = Union[AnsiEscapeSequence, AnsiChar]


def ansi_aware_chars(text: str) -> Iterator[AnsiAwareChar]:
    """Yield escape sequences and ordinary characters of ``text`` in order."""
    pos = 0
    while pos < len(text):
        end = _match_escape(text, pos)
        if end is None:
            yield AnsiChar(text[pos])
            pos += 1
        else:
            yield AnsiEscapeSequence(text[pos:end])
            pos = end


def ansi_stripped_chars(text: str) -> Iterator[str]:
    """Yield the characters of ``text`` with escape sequences removed."""
    for item in ansi_aware_chars(text):
        if isinstance(item, AnsiChar):
            yield item.char


def strip_ansi(text: str) -> str:
    """Return ``text`` without any ANSI escape sequences."""
    return "".join(ansi_stripped_chars(text))