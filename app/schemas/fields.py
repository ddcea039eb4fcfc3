from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, Strict


def _require_number(value: Any) -> Any:
    # bool is an int subclass; "true" hours are a malformed document
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Input should be a number")
    return value


# Record identifiers: JSON integers only, no "3", 3.0 or true
StrictPositiveInt = Annotated[int, Strict(), Field(gt=0)]

# ISO weekday code, Monday=1 .. Sunday=7
Weekday = Annotated[int, Strict(), Field(ge=1, le=7)]

# Non-negative hour count; integers are accepted and stored as floats
Hours = Annotated[float, BeforeValidator(_require_number), Field(ge=0)]
