"""Date helpers used by date prompts."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass

_DATE_PATTERN = re.compile(r"(\d{2})/(\d{2})/(\d{4})")

_FRENCH_MONTHS = (
    "Janvier",
    "Février",
    "Mars",
    "Avril",
    "Mai",
    "Juin",
    "Juillet",
    "Août",
    "Septembre",
    "Octobre",
    "Novembre",
    "Décembre",
)


def get_current_date() -> _dt.date:
    """Today's date in local time."""
    return _dt.datetime.now().astimezone().date()


def get_start_date(month: int, year: int) -> _dt.date:
    """The first day of ``month`` (1-12) in ``year``."""
    return _dt.date(year, month, 1)


def display_month_fr(month: int) -> str:
    """The French name of ``month`` (1-12)."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return _FRENCH_MONTHS[month - 1]


@dataclass(frozen=True)
class DateFromStr:
    """A date that can be parsed from text in ``dd/mm/yyyy`` form."""

    date: _dt.date

    @classmethod
    def parse(cls, text: str) -> DateFromStr:
        """Parse ``dd/mm/yyyy``, raising ``ValueError`` on bad input."""
        match = _DATE_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"not a dd/mm/yyyy date: {text!r}")
        day, month, year = (int(part) for part in match.groups())
        return cls(_dt.date(year, month, day))

    def __str__(self) -> str:
        return self.date.isoformat()