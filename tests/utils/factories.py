from __future__ import annotations

from datetime import date
from typing import Any

from app.schemas.assignment import Assignment
from app.schemas.capacity import CapacityException, CapacityRules, StaffOverride
from app.schemas.staff import StaffMember


def make_staff(staff_id: int = 1, name: str = "Test Staff") -> StaffMember:
    return StaffMember(id=staff_id, name=name)


def make_assignment(
    assignment_id: int = 1,
    *,
    staff_id: int = 1,
    project_id: int = 1,
    start: date | str,
    end: date | str,
    notes: str | None = None,
) -> Assignment:
    return Assignment(
        id=assignment_id,
        staff_id=staff_id,
        project_id=project_id,
        start=start,
        end=end,
        notes=notes,
    )


def make_rules(
    *,
    default_hours_per_day: float = 8,
    workdays: list[int] | None = None,
    overrides: list[dict[str, Any]] | None = None,
    exceptions: list[dict[str, Any]] | None = None,
) -> CapacityRules:
    return CapacityRules(
        default_hours_per_day=default_hours_per_day,
        workdays=workdays if workdays is not None else [1, 2, 3, 4, 5],
        staff_overrides=[StaffOverride(**o) for o in overrides or []],
        exceptions=[CapacityException(**e) for e in exceptions or []],
    )
