from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.dates import IsoDate
from app.schemas.fields import Hours, StrictPositiveInt, Weekday

Bucket = Literal["day", "week", "month"]

DEFAULT_HOURS_PER_DAY = 8.0
DEFAULT_WORKDAYS: tuple[int, ...] = (1, 2, 3, 4, 5)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _normalise_workdays(v: list[int] | None) -> list[int] | None:
    if v is None:
        return None
    return sorted(set(v))


class StaffOverride(_CamelModel):
    """Per-staff replacement of the default hours and/or workday set."""

    staff_id: StrictPositiveInt
    hours_per_day: Hours
    workdays: list[Weekday] | None = None

    @field_validator("workdays")
    @classmethod
    def validate_workdays(cls, v: list[int] | None) -> list[int] | None:
        return _normalise_workdays(v)


class CapacityException(_CamelModel):
    """Date-specific capacity override.

    Attributes:
        date: Calendar day the exception applies to.
        hours: Available hours on that day. Omitted means 0 (full day off).
        staff_id: When set, the exception only applies to this staff member;
            otherwise it applies to everybody (e.g. a public holiday).
        reason: Free-text label such as "Christmas" or "PTO".
    """

    date: IsoDate
    hours: Hours | None = None
    staff_id: StrictPositiveInt | None = None
    reason: str | None = None

    @property
    def effective_hours(self) -> float:
        return self.hours if self.hours is not None else 0.0

    @property
    def is_global(self) -> bool:
        return self.staff_id is None


class CapacityRules(_CamelModel):
    """Process-wide capacity configuration document.

    The document is always replaced in full; there is no partial update.
    """

    default_hours_per_day: Hours = DEFAULT_HOURS_PER_DAY
    workdays: list[Weekday] = Field(default_factory=lambda: list(DEFAULT_WORKDAYS))
    staff_overrides: list[StaffOverride] = Field(default_factory=list)
    exceptions: list[CapacityException] = Field(default_factory=list)

    @field_validator("workdays")
    @classmethod
    def validate_workdays(cls, v: list[int]) -> list[int]:
        return _normalise_workdays(v) or []

    @classmethod
    def defaults(cls) -> "CapacityRules":
        return cls()


class BucketPoint(_CamelModel):
    bucket_start: IsoDate
    available: float = 0.0
    needed: float = 0.0


class CapacityForecastResponse(_CamelModel):
    """Capacity forecast over a date range.

    Attributes:
        bucket: Granularity the daily figures were folded into.
        points: One entry per bucket, ascending by ``bucket_start``. Edge
            buckets only contain the days inside the requested range.
    """

    bucket: Bucket
    points: list[BucketPoint]
