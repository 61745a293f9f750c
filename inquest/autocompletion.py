"""Autocompletion hooks for text prompts.

An autocompleter receives the user's text input and may offer a list of
suggestions. When the completion hotkey is pressed it receives the current
input and the highlighted suggestion, if any, and returns the replacement
text, or ``None`` when no completion should be made.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional, Union

Replacement = Optional[str]
Suggester = Callable[[str], list]


class Autocomplete(ABC):
    """Source of suggestions and completions for a text input."""

    @abstractmethod
    def get_suggestions(self, input_text: str) -> list[str]:
        """Suggestions to show for the current input."""

    @abstractmethod
    def get_completion(
        self, input_text: str, highlighted_suggestion: Optional[str]
    ) -> Replacement:
        """Text that should replace the input, or ``None`` for no change."""


class NoAutoCompletion(Autocomplete):
    """Autocompleter that never suggests or completes anything."""

    def get_suggestions(self, input_text: str) -> list[str]:
        return []

    def get_completion(
        self, input_text: str, highlighted_suggestion: Optional[str]
    ) -> Replacement:
        # Only a suggestion this completer offered could be completed, and it offers none.
        suggestions = self.get_suggestions(input_text)
        if highlighted_suggestion is not None and highlighted_suggestion in suggestions:
            return highlighted_suggestion
        return None


class FunctionAutocomplete(Autocomplete):
    """Autocompleter built from a function that returns suggestions."""

    def __init__(self, suggester: Suggester) -> None:
        self.suggester = suggester

    def get_suggestions(self, input_text: str) -> list[str]:
        return list(self.suggester(input_text))

    def get_completion(
        self, input_text: str, highlighted_suggestion: Optional[str]
    ) -> Replacement:
        if highlighted_suggestion is None:
            return None
        return str(highlighted_suggestion)


def as_autocomplete(source: Union[Autocomplete, Suggester, None]) -> Autocomplete:
    """Turn an autocompleter, a suggester function or ``None`` into an autocompleter."""
    if isinstance(source, Autocomplete):
        return source
    if source is None:
        return NoAutoCompletion()
    if callable(source):
        return FunctionAutocomplete(source)
    raise TypeError(f"cannot use {type(source).__name__} as an autocompleter")