"""Wrapper for options selected by the user in list prompts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class ListOption(Generic[T]):
    """A selected option together with its index in the full list given to the prompt."""

    index: int
    value: T

    def __str__(self) -> str:
        return str(self.value)