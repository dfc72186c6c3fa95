"""Delivery schedule endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from aqualedger.api.dependencies import get_delivery_schedule_use_case
from aqualedger.application.dto.requests import DeliveryScheduleRequest
from aqualedger.application.dto.responses import DeliveryScheduleResponse
from aqualedger.application.use_cases import DeliveryScheduleUseCase

router = APIRouter(prefix="/api/schedule", tags=["schedule"])


@router.get("", response_model=DeliveryScheduleResponse)
async def delivery_schedule(
    start: date | None = None,
    days: int | None = Query(default=None, ge=1, le=31),
    area: str | None = None,
    use_case: DeliveryScheduleUseCase = Depends(get_delivery_schedule_use_case),
) -> DeliveryScheduleResponse:
    """Customers due for delivery on each day from ``start``."""
    result = await use_case.execute(
        DeliveryScheduleRequest(start=start, days=days, area=area)
    )
    return use_case.to_response(result)
