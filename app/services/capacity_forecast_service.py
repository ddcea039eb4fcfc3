from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Callable, Iterable, NamedTuple, Sequence, get_args

from app.schemas.assignment import Assignment
from app.schemas.capacity import (
    Bucket,
    BucketPoint,
    CapacityForecastResponse,
    CapacityRules,
)
from app.schemas.staff import StaffMember
from app.services.assignment_service import list_assignments
from app.services.calendar_utils import (
    format_date,
    iter_days,
    start_of_month,
    start_of_week,
)
from app.services.capacity_errors import InvalidBucket, InvalidRange
from app.services.capacity_rules import RulesResolver
from app.services.capacity_rules_service import load_rules_strict
from app.services.staff_service import list_staff
from db.store import JsonStore

_logger = logging.getLogger("uvicorn.error")


BUCKETS: tuple[str, ...] = get_args(Bucket)

_BUCKET_START: dict[str, Callable[[date], date]] = {
    "day": lambda d: d,
    "week": start_of_week,
    "month": start_of_month,
}


class DailyRow(NamedTuple):
    date: date
    available: float
    needed: float


class ForecastInputs(NamedTuple):
    staff: list[StaffMember]
    assignments: list[Assignment]
    rules: CapacityRules


def _resolver(rules: CapacityRules | RulesResolver) -> RulesResolver:
    return rules if isinstance(rules, RulesResolver) else RulesResolver(rules)


def _check_range(start: date, end: date) -> None:
    if start > end:
        raise InvalidRange(
            f"from ({format_date(start)}) must be on or before to ({format_date(end)})",
            field="from",
        )


def _check_bucket(bucket: str) -> None:
    if bucket not in _BUCKET_START:
        raise InvalidBucket(
            f"bucket must be one of {', '.join(BUCKETS)}, got {bucket!r}",
            field="bucket",
        )


def validate_forecast_query(start: date, end: date, bucket: str) -> None:
    """Reject an unknown bucket or an inverted range before any work is done.

    Raises:
        InvalidBucket: If ``bucket`` is not day, week or month.
        InvalidRange: If ``start`` is after ``end``.
    """
    _check_bucket(bucket)
    _check_range(start, end)


def needed_hours_on(
    rules: CapacityRules | RulesResolver,
    assignments: Iterable[Assignment],
    day: date,
) -> float:
    """Return the demand in hours implied by assignments active on ``day``.

    Every assignment whose inclusive span contains ``day`` contributes its
    staff member's nominal daily hours. Workday status and date exceptions
    are ignored so holidays and days off keep showing the backlog, and
    overlapping assignments for one person add up to signal overload.
    """
    resolver = _resolver(rules)
    return sum(
        (resolver.nominal_hours(a.staff_id) for a in assignments if a.covers(day)),
        0.0,
    )


def build_daily_series(
    rules: CapacityRules | RulesResolver,
    staff: Sequence[StaffMember],
    assignments: Sequence[Assignment],
    start: date,
    end: date,
) -> list[DailyRow]:
    """Compute available and needed hours for each day in ``[start, end]``.

    Raises:
        InvalidRange: If ``start`` is after ``end``.
    """
    _check_range(start, end)
    resolver = _resolver(rules)

    rows: list[DailyRow] = []
    for day in iter_days(start, end):
        available = sum(
            (resolver.available_hours(member.id, day) for member in staff), 0.0
        )
        needed = needed_hours_on(resolver, assignments, day)
        rows.append(DailyRow(day, available, needed))
    return rows


def bucketize(rows: Iterable[DailyRow], bucket: str) -> list[BucketPoint]:
    """Fold daily rows into day, week or month buckets.

    Buckets are keyed by their first calendar day (the date itself, the ISO
    week's Monday, or the 1st of the month) and returned in ascending order.
    Only days present in ``rows`` are summed; edge buckets are not padded.

    Raises:
        InvalidBucket: If ``bucket`` is not one of ``BUCKETS``.
    """
    _check_bucket(bucket)
    key_for = _BUCKET_START[bucket]

    points: dict[date, BucketPoint] = {}
    for row in rows:
        key = key_for(row.date)
        point = points.get(key)
        if point is None:
            point = points[key] = BucketPoint(bucket_start=key)
        point.available += row.available
        point.needed += row.needed

    return [points[key] for key in sorted(points)]


def forecast(
    rules: CapacityRules,
    staff: Sequence[StaffMember],
    assignments: Sequence[Assignment],
    start: date,
    end: date,
    bucket: str = "week",
) -> CapacityForecastResponse:
    """Return the bucketed capacity forecast for ``[start, end]``.

    Pure function of its inputs: no storage access, no caching.

    Raises:
        InvalidBucket: If ``bucket`` is not day, week or month.
        InvalidRange: If ``start`` is after ``end``.
    """
    validate_forecast_query(start, end, bucket)

    rows = build_daily_series(rules, staff, assignments, start, end)
    points = bucketize(rows, bucket)
    _logger.debug(
        "Capacity forecast %s..%s by %s: %d staff, %d assignments, %d points",
        format_date(start),
        format_date(end),
        bucket,
        len(staff),
        len(assignments),
        len(points),
    )
    return CapacityForecastResponse(bucket=bucket, points=points)


async def gather_forecast_inputs(store: JsonStore) -> ForecastInputs:
    """Read the staff, assignment and rules snapshots concurrently."""
    staff, assignments, rules = await asyncio.gather(
        list_staff(store),
        list_assignments(store),
        load_rules_strict(store),
    )
    return ForecastInputs(staff=staff, assignments=assignments, rules=rules)
