"""Delivery Schedule Use Case: rolling list of due customers per day."""

from dataclasses import dataclass
from datetime import date

from aqualedger.application.dto.requests import DeliveryScheduleRequest
from aqualedger.application.dto.responses import (
    CustomerResponse,
    DeliveryScheduleResponse,
    ScheduleDayResponse,
)
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger, get_settings
from aqualedger.core.entities.customer import Customer
from aqualedger.core.services.delivery_scheduler import group_by_area, weekly_schedule

logger = get_logger(__name__)


@dataclass
class DeliveryScheduleResult:
    start: date
    schedule: dict[date, list[Customer]]


class DeliveryScheduleUseCase(LedgerUseCase):
    """Due customers for each day of the schedule window. Read-only."""

    async def execute(self, request: DeliveryScheduleRequest) -> DeliveryScheduleResult:
        start = request.start or date.today()
        days = request.days or get_settings().ledger.schedule_days

        store = await self._get_ledger_store()
        snapshot = await store.load()

        customers = snapshot.customers
        if request.area is not None:
            customers = [c for c in customers if c.area == request.area]

        schedule = weekly_schedule(start, customers, snapshot.sales, days=days)

        logger.info(
            "delivery_schedule_built",
            start=start.isoformat(),
            days=days,
            due_today=len(schedule[start]),
        )
        return DeliveryScheduleResult(start=start, schedule=schedule)

    def to_response(self, result: DeliveryScheduleResult) -> DeliveryScheduleResponse:
        return DeliveryScheduleResponse(
            start=result.start,
            days=[
                ScheduleDayResponse(
                    date=day,
                    customers=[CustomerResponse.model_validate(c) for c in due],
                    by_area={
                        area: [c.id for c in members]
                        for area, members in group_by_area(due).items()
                    },
                )
                for day, due in result.schedule.items()
            ],
        )
