"""Key events and the prompt actions derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Any, Callable, Optional

from inquest.text_input import InputAction, LineDirection, Magnitude


class KeyModifiers(Flag):
    """Modifier keys held while a key was pressed."""

    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()
    SUPER = auto()
    HYPER = auto()
    META = auto()


class KeyKind(Enum):
    """The physical key that produced an event."""

    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    TAB = auto()
    BACK_TAB = auto()
    DELETE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    CHAR = auto()
    ANY = auto()


@dataclass(frozen=True)
class Key:
    """A key event: the key, its character if any, and the modifiers."""

    kind: KeyKind
    modifiers: KeyModifiers = KeyModifiers.NONE
    character: Optional[str] = None

    @classmethod
    def char(cls, char: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> Key:
        """A key event that types ``char`` with the given modifiers."""
        return cls(KeyKind.CHAR, modifiers, char)

    @classmethod
    def char_keys_from_str(cls, text: str) -> list[Key]:
        """One unmodified character key for each character of ``text``."""
        return [cls.char(ch) for ch in text]

    def is_char(self, char: str, modifiers: KeyModifiers) -> bool:
        """Whether this is ``char`` typed with exactly ``modifiers``."""
        return (
            self.kind is KeyKind.CHAR
            and self.character == char
            and self.modifiers == modifiers
        )


def input_action_from_key(key: Key) -> Optional[InputAction]:
    """Derive a text input action from a key event, if the key has one."""
    control = KeyModifiers.CONTROL in key.modifiers
    kind = key.kind

    if kind is KeyKind.BACKSPACE:
        return InputAction.delete(Magnitude.CHAR, LineDirection.LEFT)
    if kind is KeyKind.CHAR:
        # Ctrl+Backspace arrives as Ctrl+H on many terminals: ignore it
        # rather than writing an "h".
        if key.character == "h" and control:
            return None
        if key.character is None:
            return None
        return InputAction.write(key.character)
    if kind is KeyKind.DELETE:
        magnitude = Magnitude.WORD if control else Magnitude.CHAR
        return InputAction.delete(magnitude, LineDirection.RIGHT)
    if kind is KeyKind.HOME:
        return InputAction.move_cursor(Magnitude.LINE, LineDirection.LEFT)
    if kind is KeyKind.END:
        return InputAction.move_cursor(Magnitude.LINE, LineDirection.RIGHT)
    if kind is KeyKind.LEFT:
        magnitude = Magnitude.WORD if control else Magnitude.CHAR
        return InputAction.move_cursor(magnitude, LineDirection.LEFT)
    if kind is KeyKind.RIGHT:
        magnitude = Magnitude.WORD if control else Magnitude.CHAR
        return InputAction.move_cursor(magnitude, LineDirection.RIGHT)
    return None


def custom_type_action_from_key(key: Key) -> Optional[InputAction]:
    """Derive the inner action of custom-type and confirm prompts.

    These prompts only act on their value text input, so the inner action
    is the text input action itself.
    """
    return input_action_from_key(key)


class ActionKind(Enum):
    """The broad directive a prompt receives."""

    SUBMIT = auto()
    CANCEL = auto()
    INTERRUPT = auto()
    INNER = auto()


@dataclass(frozen=True)
class Action:
    """A prompt directive, carrying the specialised action when inner."""

    kind: ActionKind
    inner: Any = None

    @classmethod
    def from_key(
        cls, key: Key, inner_from_key: Callable[[Key], Any]
    ) -> Optional[Action]:
        """Derive an action from a key, deferring unknown keys to ``inner_from_key``."""
        if (
            key.kind is KeyKind.ENTER
            or key.is_char("\n", KeyModifiers.NONE)
            or key.is_char("j", KeyModifiers.CONTROL)
        ):
            return cls(ActionKind.SUBMIT)
        if (
            key.kind is KeyKind.ESCAPE
            or key.is_char("g", KeyModifiers.CONTROL)
            or key.is_char("d", KeyModifiers.CONTROL)
        ):
            return cls(ActionKind.CANCEL)
        if key.is_char("c", KeyModifiers.CONTROL):
            return cls(ActionKind.INTERRUPT)

        inner = inner_from_key(key)
        if inner is None:
            return None
        return cls(ActionKind.INNER, inner)