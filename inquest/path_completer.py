"""Autocompleter that suggests file system paths."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Optional

from inquest.autocompletion import Autocomplete, Replacement
from inquest.errors import CustomUserError

_LIMIT = 15


def _fallback_parent(text: str) -> str:
    path = PurePath(text)
    parent = path.parent
    if parent == path or str(parent) == "":
        return "."
    return str(parent)


def _list_dir(directory: str) -> list[str]:
    with os.scandir(directory) as entries:
        return [entry.name for entry in entries]


class FilePathCompleter(Autocomplete):
    """Suggests paths that extend the typed input, like a shell does."""

    def __init__(self) -> None:
        self._input = ""
        self._paths: list[str] = []
        self._lcp = ""

    def _update_input(self, input_text: str) -> None:
        if input_text == self._input:
            return

        self._input = input_text
        self._paths = []

        fallback = _fallback_parent(input_text)
        scan_dir = input_text if input_text.endswith("/") else fallback

        try:
            try:
                names = _list_dir(scan_dir)
                base = scan_dir
            except FileNotFoundError:
                names = _list_dir(fallback)
                base = fallback
        except OSError as exc:
            raise CustomUserError(exc) from exc

        for name in names:
            if len(self._paths) >= _LIMIT:
                break
            path = os.path.join(base, name)
            path_str = path + "/" if os.path.isdir(path) else path
            if path_str.startswith(self._input) and path_str != self._input:
                self._paths.append(path_str)

        self._lcp = self.longest_common_prefix()

    def longest_common_prefix(self) -> str:
        """Longest prefix shared by all currently suggested paths."""
        if not self._paths:
            return ""
        return os.path.commonprefix(self._paths)

    def get_suggestions(self, input_text: str) -> list[str]:
        self._update_input(input_text)
        return list(self._paths)

    def get_completion(
        self, input_text: str, highlighted_suggestion: Optional[str]
    ) -> Replacement:
        self._update_input(input_text)
        if highlighted_suggestion is not None:
            return highlighted_suggestion
        return self._lcp or None