from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from app.deps import StoreDep
from app.schemas.capacity import Bucket, CapacityForecastResponse, CapacityRules
from app.schemas.dates import IsoDate
from app.services.capacity_errors import CapacityValidationError
from app.services.capacity_forecast_service import (
    forecast,
    gather_forecast_inputs,
    validate_forecast_query,
)
from app.services.capacity_rules_service import get_rules, replace_rules

router = APIRouter()


@router.get("/forecast", response_model=CapacityForecastResponse)
async def get_capacity_forecast(
    store: StoreDep,
    start: Annotated[IsoDate, Query(alias="from")],
    end: Annotated[IsoDate, Query(alias="to")],
    bucket: Bucket = "week",
) -> CapacityForecastResponse:
    """Forecast available versus needed hours over an inclusive date range.

    Daily figures are folded into ``day``, ``week`` (ISO, Monday start) or
    ``month`` buckets. Returns 400 when the range is inverted; the query is
    checked before any data is read.
    """
    try:
        validate_forecast_query(start, end, bucket)
        inputs = await gather_forecast_inputs(store)
        return forecast(
            inputs.rules,
            inputs.staff,
            inputs.assignments,
            start,
            end,
            bucket,
        )
    except CapacityValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_detail()
        )


@router.get(
    "/rules", response_model=CapacityRules, response_model_exclude_none=True
)
async def get_capacity_rules(store: StoreDep) -> CapacityRules:
    """Return the capacity rules, or the defaults when none are stored."""
    return await get_rules(store)


@router.put(
    "/rules", response_model=CapacityRules, response_model_exclude_none=True
)
async def put_capacity_rules(
    store: StoreDep, payload: CapacityRules
) -> CapacityRules:
    """Replace the capacity rules document in full."""
    return await replace_rules(store, payload)
