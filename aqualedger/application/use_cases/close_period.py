"""Period closing use cases: month summary and one-time close."""

from dataclasses import dataclass

from aqualedger.application.dto.requests import ClosePeriodRequest
from aqualedger.application.dto.responses import ClosingRecordResponse, PeriodSummaryResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.entities.cash import ClosingRecord, PeriodSummary
from aqualedger.core.services.ledger_operations import close_period
from aqualedger.core.services.reconciliation import summarize_period

logger = get_logger(__name__)


@dataclass
class PeriodSummaryResult:
    summary: PeriodSummary
    closed: bool


class PeriodSummaryUseCase(LedgerUseCase):
    """Revenue and expenses for a month, and whether it is already closed."""

    async def execute(self, period: str) -> PeriodSummaryResult:
        store = await self._get_ledger_store()
        snapshot = await store.load()

        summary = summarize_period(period, snapshot.sales, snapshot.expenses)
        closed = any(r.period == period for r in snapshot.closing_records)
        return PeriodSummaryResult(summary=summary, closed=closed)

    def to_response(self, result: PeriodSummaryResult) -> PeriodSummaryResponse:
        return PeriodSummaryResponse.model_validate(
            {**result.summary.model_dump(), "closed": result.closed}
        )


class ClosePeriodUseCase(LedgerUseCase):
    """Freeze a month's figures. Closing the same month twice is rejected."""

    async def execute(self, request: ClosePeriodRequest) -> ClosingRecord:
        logger.info("close_period_started", period=request.period)

        store = await self._get_ledger_store()
        snapshot = await store.load()

        summary = summarize_period(request.period, snapshot.sales, snapshot.expenses)
        snapshot, record = close_period(snapshot, summary)
        await store.save(snapshot)

        logger.info(
            "period_closed",
            period=record.period,
            net_balance=record.net_balance,
        )
        return record

    def to_response(self, record: ClosingRecord) -> ClosingRecordResponse:
        return ClosingRecordResponse.model_validate(record)
