import datetime

import pytest

from inquest.date_utils import (
    DateFromStr,
    display_month_fr,
    get_current_date,
    get_start_date,
)


def test_get_current_date_is_today():
    before = datetime.date.today()
    result = get_current_date()
    after = datetime.date.today()
    assert before <= result <= after


@pytest.mark.parametrize(
    "month, year",
    [(1, 2021), (2, 2021), (3, 2021), (12, 1883), (6, 3042)],
)
def test_get_start_date(month, year):
    assert get_start_date(month, year) == datetime.date(year, month, 1)


@pytest.mark.parametrize("month", [0, 13])
def test_get_start_date_rejects_invalid_month(month):
    with pytest.raises(ValueError):
        get_start_date(month, 2021)


def test_display_month_fr():
    assert display_month_fr(1) == "Janvier"
    assert display_month_fr(2) == "Février"
    assert display_month_fr(8) == "Août"
    assert display_month_fr(12) == "Décembre"


@pytest.mark.parametrize("month", [0, 13])
def test_display_month_fr_rejects_invalid(month):
    with pytest.raises(ValueError):
        display_month_fr(month)


def test_parse_date_from_str():
    parsed = DateFromStr.parse("25/07/2021")
    assert parsed.date == datetime.date(2021, 7, 25)


def test_display_is_iso_format():
    assert str(DateFromStr(datetime.date(2021, 7, 25))) == "2021-07-25"


def test_round_trip_through_text():
    original = DateFromStr(datetime.date(1999, 1, 5))
    text = original.date.strftime("%d/%m/%Y")
    assert DateFromStr.parse(text) == original


@pytest.mark.parametrize(
    "text",
    ["", "2021-07-25", "25/7/2021", "32/01/2021", "29/02/2021", "25/13/2021", "ab/cd/efgh"],
)
def test_parse_rejects_invalid(text):
    with pytest.raises(ValueError):
        DateFromStr.parse(text)


def test_parse_accepts_leap_day():
    assert DateFromStr.parse("29/02/2024").date == datetime.date(2024, 2, 29)