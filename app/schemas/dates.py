from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from app.services.calendar_utils import format_date, parse_date


def _coerce_iso_date(value: Any) -> date:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return parse_date(value)


# Calendar day exchanged on the wire and on disk as strict YYYY-MM-DD
IsoDate = Annotated[
    date,
    BeforeValidator(_coerce_iso_date),
    PlainSerializer(format_date, return_type=str, when_used="json"),
]
