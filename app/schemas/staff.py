from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.fields import StrictPositiveInt


class StaffMember(BaseModel):
    id: StrictPositiveInt
    name: str = Field(min_length=1)

    model_config = ConfigDict(from_attributes=True)
