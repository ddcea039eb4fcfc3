from __future__ import annotations

from datetime import date
from typing import Callable, NamedTuple

from app.schemas.capacity import CapacityRules
from app.services.calendar_utils import weekday_of


# Sources consulted by ``RulesResolver.resolve_hours``; first match wins.
HOURS_PRECEDENCE: tuple[str, ...] = (
    "staff_exception",
    "global_exception",
    "staff_override",
    "default",
)


class HoursResolution(NamedTuple):
    source: str
    hours: float


class RulesResolver:
    """Answer availability questions for one snapshot of ``CapacityRules``.

    Exceptions and overrides are indexed once so a forecast over many days
    and staff members does not rescan the rules document. When the document
    holds several entries for the same key (two global exceptions on one
    date, two overrides for one staff member) the later entry wins.
    """

    def __init__(self, rules: CapacityRules) -> None:
        self.rules = rules
        self._default_workdays = frozenset(rules.workdays)
        self._overrides = {o.staff_id: o for o in rules.staff_overrides}
        self._global_exceptions: dict[date, float] = {}
        self._staff_exceptions: dict[tuple[int, date], float] = {}
        for entry in rules.exceptions:
            if entry.is_global:
                self._global_exceptions[entry.date] = entry.effective_hours
            else:
                self._staff_exceptions[(entry.staff_id, entry.date)] = entry.effective_hours

        lookups: dict[str, Callable[[int, date], float | None]] = {
            "staff_exception": self._staff_exception_hours,
            "global_exception": self._global_exception_hours,
            "staff_override": self._override_hours,
        }
        # "default" is the last tier and always answers
        self._precedence = [(name, lookups[name]) for name in HOURS_PRECEDENCE[:-1]]

    def _staff_exception_hours(self, staff_id: int, day: date) -> float | None:
        return self._staff_exceptions.get((staff_id, day))

    def _global_exception_hours(self, staff_id: int, day: date) -> float | None:
        return self._global_exceptions.get(day)

    def _override_hours(self, staff_id: int, day: date) -> float | None:
        override = self._overrides.get(staff_id)
        return override.hours_per_day if override is not None else None

    def resolve_hours(self, staff_id: int, day: date) -> HoursResolution:
        """Return the effective hours for ``staff_id`` on ``day`` and their source."""
        for name, lookup in self._precedence:
            hours = lookup(staff_id, day)
            if hours is not None:
                return HoursResolution(name, float(hours))
        return HoursResolution("default", float(self.rules.default_hours_per_day))

    def effective_hours(self, staff_id: int, day: date) -> float:
        return self.resolve_hours(staff_id, day).hours

    def nominal_hours(self, staff_id: int) -> float:
        """Daily hours ignoring date exceptions: override, else default."""
        override = self._overrides.get(staff_id)
        if override is not None:
            return float(override.hours_per_day)
        return float(self.rules.default_hours_per_day)

    def workdays_for(self, staff_id: int) -> frozenset[int]:
        override = self._overrides.get(staff_id)
        if override is not None and override.workdays is not None:
            return frozenset(override.workdays)
        return self._default_workdays

    def works_on(self, staff_id: int, day: date) -> bool:
        """Return True when ``day`` falls on one of the staff member's workdays.

        Exceptions do not change the answer; they only change the hours
        counted once the day is a workday.
        """
        return weekday_of(day) in self.workdays_for(staff_id)

    def available_hours(self, staff_id: int, day: date) -> float:
        if not self.works_on(staff_id, day):
            return 0.0
        return self.effective_hours(staff_id, day)


def effective_hours(rules: CapacityRules, staff_id: int, day: date) -> float:
    return RulesResolver(rules).effective_hours(staff_id, day)


def works_on(rules: CapacityRules, staff_id: int, day: date) -> bool:
    return RulesResolver(rules).works_on(staff_id, day)
