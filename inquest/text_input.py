"""Editable single-line text input measured in grapheme clusters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import regex

_GRAPHEME = regex.compile(r"\X")


def _graphemes(text: str) -> list[str]:
    return _GRAPHEME.findall(text)


def _is_alphanumeric(grapheme: str) -> bool:
    return any(ch.isalnum() for ch in grapheme)


class Magnitude(Enum):
    """How far a cursor movement or deletion reaches."""

    CHAR = auto()
    WORD = auto()
    LINE = auto()


class LineDirection(Enum):
    """Direction of a cursor movement or deletion."""

    LEFT = auto()
    RIGHT = auto()


class InputActionKind(Enum):
    """The kinds of action a text input understands."""

    DELETE = auto()
    MOVE_CURSOR = auto()
    WRITE = auto()


@dataclass(frozen=True)
class InputAction:
    """An action applied to a text input."""

    kind: InputActionKind
    magnitude: Magnitude | None = None
    direction: LineDirection | None = None
    char: str | None = None

    @classmethod
    def delete(cls, magnitude: Magnitude, direction: LineDirection) -> InputAction:
        """Delete a part of the input in the given direction."""
        return cls(InputActionKind.DELETE, magnitude, direction)

    @classmethod
    def move_cursor(cls, magnitude: Magnitude, direction: LineDirection) -> InputAction:
        """Move the cursor in the given direction."""
        return cls(InputActionKind.MOVE_CURSOR, magnitude, direction)

    @classmethod
    def write(cls, char: str) -> InputAction:
        """Write a character at the cursor position."""
        return cls(InputActionKind.WRITE, char=char)


class InputActionResult(Enum):
    """What an action changed in the input."""

    CONTENT_CHANGED = auto()
    POSITION_CHANGED = auto()
    CLEAN = auto()

    def needs_redraw(self) -> bool:
        """Whether the change must be shown to the user."""
        return self is not InputActionResult.CLEAN


class Input:
    """Text content with a cursor, both counted in grapheme clusters."""

    def __init__(self, content: str = "") -> None:
        self._content = content
        self._placeholder: str | None = None
        self._length = len(_graphemes(content))
        self._cursor = self._length

    def __repr__(self) -> str:
        return (
            f"Input(content={self._content!r}, cursor={self._cursor}, "
            f"placeholder={self._placeholder!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Input):
            return NotImplemented
        return (
            self._content,
            self._placeholder,
            self._cursor,
            self._length,
        ) == (other._content, other._placeholder, other._cursor, other._length)

    def with_placeholder(self, placeholder: str) -> Input:
        """Set the placeholder and return the input."""
        self._placeholder = placeholder
        return self

    def with_cursor(self, cursor: int) -> Input:
        """Set the cursor position and return the input."""
        if not 0 <= cursor <= self._length:
            raise ValueError(
                f"cursor index {cursor} should be less than or equal to "
                f"content length {self._length}"
            )
        self._cursor = cursor
        return self

    def is_empty(self) -> bool:
        """Whether the input holds no content."""
        return self._length == 0

    @property
    def placeholder(self) -> str | None:
        """The placeholder shown when the input is empty."""
        return self._placeholder

    @property
    def content(self) -> str:
        """The current text."""
        return self._content

    @property
    def length(self) -> int:
        """Number of grapheme clusters in the content."""
        return self._length

    @property
    def cursor(self) -> int:
        """Cursor position in grapheme clusters."""
        return self._cursor

    @property
    def pre_cursor(self) -> str:
        """The content to the left of the cursor."""
        if self._cursor == self._length:
            return self._content
        return "".join(_graphemes(self._content)[: self._cursor])

    def clear(self) -> None:
        """Remove all content, keeping the placeholder."""
        self._content = ""
        self._cursor = 0
        self._length = 0

    def handle(self, action: InputAction) -> InputActionResult:
        """Apply an action and report what it changed."""
        if action.kind is InputActionKind.WRITE:
            if action.char is None:
                raise ValueError("write action carries no character")
            return self._insert(action.char)
        if action.magnitude is None or action.direction is None:
            raise ValueError("action needs a magnitude and a direction")
        left = action.direction is LineDirection.LEFT
        if action.kind is InputActionKind.MOVE_CURSOR:
            return self._move_left(action.magnitude) if left else self._move_right(action.magnitude)
        if left:
            return self._backwards_delete(action.magnitude)
        return self._forwards_delete(action.magnitude)

    def _move_left(self, magnitude: Magnitude) -> InputActionResult:
        if self._cursor == 0:
            return InputActionResult.CLEAN
        if magnitude is Magnitude.CHAR:
            self._cursor -= 1
        elif magnitude is Magnitude.WORD:
            self._cursor = self._prev_word_index()
        else:
            self._cursor = 0
        return InputActionResult.POSITION_CHANGED

    def _move_right(self, magnitude: Magnitude) -> InputActionResult:
        if self._cursor == self._length:
            return InputActionResult.CLEAN
        if self._cursor > self._length:
            self._cursor = self._length
            return InputActionResult.POSITION_CHANGED
        if magnitude is Magnitude.CHAR:
            self._cursor += 1
        elif magnitude is Magnitude.WORD:
            self._cursor = self._next_word_index()
        else:
            self._cursor = self._length
        return InputActionResult.POSITION_CHANGED

    def _next_word_index(self) -> int:
        seen_word = False
        graphemes = _graphemes(self._content)
        for idx, grapheme in enumerate(graphemes[self._cursor :], start=self._cursor):
            if _is_alphanumeric(grapheme):
                seen_word = True
            elif seen_word:
                return idx
        return self._length

    def _prev_word_index(self) -> int:
        seen_word = False
        graphemes = _graphemes(self._content)[: self._cursor]
        for dist, grapheme in enumerate(reversed(graphemes), start=1):
            if _is_alphanumeric(grapheme):
                seen_word = True
            elif seen_word:
                return max(self._cursor - (dist - 1), 0)
        return 0

    def _insert(self, char: str) -> InputActionResult:
        at = self._cursor
        if at >= self._length:
            self._content += char
        else:
            graphemes = _graphemes(self._content)
            graphemes.insert(at, char)
            self._content = "".join(graphemes)
        if self._update_length():
            self._cursor += 1
        return InputActionResult.CONTENT_CHANGED

    def _backwards_delete(self, magnitude: Magnitude) -> InputActionResult:
        if self._cursor == 0:
            return InputActionResult.CLEAN
        current = self._cursor
        if magnitude is Magnitude.CHAR:
            new = current - 1
        elif magnitude is Magnitude.WORD:
            new = self._prev_word_index()
        else:
            new = 0
        if new == current:
            return InputActionResult.CLEAN
        self._cursor = new
        return self._delete_chars_at_right(current - new)

    def _forwards_delete(self, magnitude: Magnitude) -> InputActionResult:
        start = self._cursor
        if magnitude is Magnitude.CHAR:
            end = start + 1
        elif magnitude is Magnitude.WORD:
            end = self._next_word_index()
        else:
            end = self._length
        return self._delete_chars_at_right(max(end - start, 0))

    def _delete_chars_at_right(self, quantity: int) -> InputActionResult:
        start = self._cursor
        end = start + quantity
        graphemes = _graphemes(self._content)
        kept = graphemes[:start] + graphemes[end:]
        changed = len(kept) != len(graphemes)
        self._content = "".join(kept)
        self._length = len(kept)
        return InputActionResult.CONTENT_CHANGED if changed else InputActionResult.CLEAN

    def _update_length(self) -> bool:
        new_length = len(_graphemes(self._content))
        changed = new_length != self._length
        self._length = new_length
        return changed