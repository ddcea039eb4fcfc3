from __future__ import annotations

from datetime import date

import pytest

from app.services.calendar_utils import (
    add_days,
    days_between,
    format_date,
    iter_days,
    parse_date,
    start_of_month,
    start_of_week,
    weekday_of,
)
from app.services.capacity_errors import InvalidDateFormat


def test_parse_and_format_iso_date() -> None:
    assert parse_date("2024-03-01") == date(2024, 3, 1)
    assert format_date(date(2024, 3, 1)) == "2024-03-01"
    assert format_date(date(5, 1, 2)) == "0005-01-02"


@pytest.mark.parametrize(
    "raw",
    ["2024-3-01", "2024-03-1", "24-03-01", "2024/03/01", "2024-03-01T00:00", "", "2024-02-30"],
)
def test_parse_date_rejects_bad_shapes(raw: str) -> None:
    with pytest.raises(InvalidDateFormat):
        parse_date(raw)


def test_parse_date_rejects_non_strings_and_reports_field() -> None:
    with pytest.raises(InvalidDateFormat) as info:
        parse_date(20240301, field="from")  # type: ignore[arg-type]
    assert info.value.field == "from"
    assert isinstance(info.value, ValueError)


def test_add_days_crosses_month_and_leap_day() -> None:
    assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
    assert add_days(date(2024, 2, 29), 1) == date(2024, 3, 1)
    assert add_days(date(2024, 1, 1), -1) == date(2023, 12, 31)


def test_days_between_is_signed() -> None:
    assert days_between(date(2024, 1, 1), date(2024, 1, 8)) == 7
    assert days_between(date(2024, 1, 1), date(2023, 12, 30)) == -2
    assert days_between(date(2024, 1, 1), date(2024, 1, 1)) == 0


def test_weekday_codes_run_monday_to_sunday() -> None:
    # 2024-01-01 is a Monday
    assert [weekday_of(date(2024, 1, d)) for d in range(1, 8)] == [1, 2, 3, 4, 5, 6, 7]


def test_start_of_week_is_monday_on_or_before() -> None:
    assert start_of_week(date(2024, 1, 1)) == date(2024, 1, 1)
    assert start_of_week(date(2024, 1, 7)) == date(2024, 1, 1)
    assert start_of_week(date(2024, 3, 1)) == date(2024, 2, 26)


def test_start_of_month() -> None:
    assert start_of_month(date(2024, 2, 29)) == date(2024, 2, 1)
    assert start_of_month(date(2024, 3, 1)) == date(2024, 3, 1)


def test_iter_days_is_inclusive_and_empty_when_inverted() -> None:
    days = list(iter_days(date(2024, 1, 30), date(2024, 2, 2)))
    assert days == [date(2024, 1, 30), date(2024, 1, 31), date(2024, 2, 1), date(2024, 2, 2)]
    assert list(iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []


def test_helpers_work_on_dates_and_convert_only_at_the_edges() -> None:
    day = parse_date("2024-03-06")
    monday = start_of_week(day)
    assert isinstance(monday, date)
    assert format_date(add_days(monday, days_between(monday, day))) == "2024-03-06"
