from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.dates import IsoDate
from app.schemas.fields import StrictPositiveInt


class Assignment(BaseModel):
    """A staff member's commitment to a project over an inclusive span."""

    id: StrictPositiveInt
    staff_id: StrictPositiveInt
    project_id: StrictPositiveInt
    start: IsoDate
    end: IsoDate
    notes: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    @field_validator("end")
    @classmethod
    def validate_date_order(cls, v: date, info) -> date:
        if "start" in info.data and v < info.data["start"]:
            raise ValueError("end must be on or after start")
        return v

    def covers(self, day: date) -> bool:
        return self.start <= day <= self.end
