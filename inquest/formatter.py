"""Default formatters that turn a submitted value into the text shown as the answer.

A formatter receives the value a prompt produced and returns the string
displayed to the user as the final answer.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any

from inquest.date_utils import DateFromStr

_BOOL_WORDS = {True: "Yes", False: "No"}


def default_string_formatter(value: Any) -> str:
    """Echo the received input unchanged."""
    return str(value)


def default_bool_formatter(answer: bool) -> str:
    """Show ``True`` as ``"Yes"`` and ``False`` as ``"No"``."""
    return _BOOL_WORDS[bool(answer)]


def default_date_formatter(value: _dt.date) -> str:
    """Show a date as ``dd-mm-yyyy``."""
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def default_date_from_str_formatter(value: DateFromStr) -> str:
    """Show a parsed date as ``dd-mm-yyyy``."""
    return default_date_formatter(value.date)