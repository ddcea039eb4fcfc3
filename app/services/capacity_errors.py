from __future__ import annotations

from typing import Any


class CapacityValidationError(ValueError):
    """Raised when a capacity query or rules document is not acceptable.

    Used to distinguish caller mistakes (reported as HTTP 400) from storage
    and programming errors, which propagate unchanged.

    Args:
        message: Human-readable description of the problem.
        field: Name of the offending input field, as seen on the wire.
    """

    code = "capacity_validation"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def to_detail(self, location: str = "query") -> list[dict[str, Any]]:
        """Render the error in the same shape as pydantic's ``errors()``."""
        loc: list[str] = [location]
        if self.field:
            loc.append(self.field)
        return [{"loc": loc, "msg": str(self), "type": self.code}]


class InvalidDateFormat(CapacityValidationError):
    code = "invalid_date_format"


class InvalidRange(CapacityValidationError):
    code = "invalid_range"


class InvalidBucket(CapacityValidationError):
    code = "invalid_bucket"
