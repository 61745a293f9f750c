"""Parsers that turn user input into values.

A parser takes the raw input string and returns the parsed value, raising
``ValueError`` when no value can be parsed.
"""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")


def default_bool_parser(answer: str) -> bool:
    """Parse ``y``/``yes`` to True and ``n``/``no`` to False, ignoring case."""
    if len(answer.encode("utf-8")) > 3:
        raise ValueError(f"not a yes/no answer: {answer!r}")

    lowered = answer.lower()
    if lowered in ("y", "yes"):
        return True
    if lowered in ("n", "no"):
        return False
    raise ValueError(f"not a yes/no answer: {answer!r}")


def parse_type(target: Callable[[str], T]) -> Callable[[str], T]:
    """Build a parser that converts input with ``target``, e.g. ``float``."""

    def parser(text: str) -> T:
        try:
            return target(text)
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise ValueError(f"cannot parse {text!r}") from exc

    return parser