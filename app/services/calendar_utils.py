"""Calendar helpers for capacity math.

All operations take and return ``datetime.date``; ``parse_date`` and
``format_date`` convert to and from the ``YYYY-MM-DD`` wire format.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Iterator

from app.services.capacity_errors import InvalidDateFormat


_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def parse_date(value: str, *, field: str | None = None) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date.

    Args:
        value: ISO date string with zero-padded month and day.
        field: Optional input name reported on failure.

    Raises:
        InvalidDateFormat: If the value does not have that shape or does not
            name an existing calendar day (e.g. ``2024-02-30``).
    """
    if not isinstance(value, str):
        raise InvalidDateFormat(f"Expected YYYY-MM-DD, got {value!r}", field=field)
    match = _ISO_DATE_RE.match(value)
    if match is None:
        raise InvalidDateFormat(f"Expected YYYY-MM-DD, got {value!r}", field=field)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateFormat(
            f"Not a calendar date: {value!r}", field=field
        ) from exc


def format_date(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def add_days(value: date, n: int) -> date:
    return value + timedelta(days=n)


def days_between(a: date, b: date) -> int:
    """Return the signed number of days from ``a`` to ``b``."""
    return (b - a).days


def weekday_of(value: date) -> int:
    """Return the weekday code, Monday=1 .. Sunday=7."""
    return value.isoweekday()


def start_of_week(value: date) -> date:
    """Return the Monday on or before ``value``."""
    return value - timedelta(days=value.isoweekday() - 1)


def start_of_month(value: date) -> date:
    return value.replace(day=1)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from ``start`` to ``end`` inclusive."""
    for offset in range(days_between(start, end) + 1):
        yield start + timedelta(days=offset)
