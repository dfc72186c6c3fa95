"""Cash and bank reconciliation endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Path, Query, status

from aqualedger.api.dependencies import (
    get_close_period_use_case,
    get_period_summary_use_case,
    get_reconcile_cash_use_case,
    get_record_opening_balance_use_case,
)
from aqualedger.application.dto.requests import (
    PERIOD_PATTERN,
    ClosePeriodRequest,
    OpeningBalanceRequest,
    ReconcileCashRequest,
)
from aqualedger.application.dto.responses import (
    ClosingRecordResponse,
    ErrorResponse,
    OpeningBalanceResponse,
    PeriodSummaryResponse,
    ReconciliationResponse,
)
from aqualedger.application.use_cases import (
    ClosePeriodUseCase,
    PeriodSummaryUseCase,
    ReconcileCashUseCase,
    RecordOpeningBalanceUseCase,
)

router = APIRouter(prefix="/api/cash", tags=["cash"])


@router.get("/reconciliation", response_model=ReconciliationResponse)
async def reconciliation(
    on_date: date = Query(..., alias="date"),
    counted_cash: float | None = None,
    counted_bank: float | None = None,
    use_case: ReconcileCashUseCase = Depends(get_reconcile_cash_use_case),
) -> ReconciliationResponse:
    """
    Opening, revenue by collection stream, expenses and closing for a day.

    Pass the counted register amounts to get closing minus counted.
    """
    result = await use_case.execute(
        ReconcileCashRequest(
            date=on_date,
            counted_cash=counted_cash,
            counted_bank=counted_bank,
        )
    )
    return use_case.to_response(result)


@router.put("/opening-balances", response_model=OpeningBalanceResponse)
async def record_opening_balance(
    request: OpeningBalanceRequest,
    use_case: RecordOpeningBalanceUseCase = Depends(get_record_opening_balance_use_case),
) -> OpeningBalanceResponse:
    """Set the authoritative opening cash and bank for a day."""
    balance = await use_case.execute(request)
    return use_case.to_response(balance)


@router.get("/periods/{period}", response_model=PeriodSummaryResponse)
async def period_summary(
    period: str = Path(..., pattern=PERIOD_PATTERN),
    use_case: PeriodSummaryUseCase = Depends(get_period_summary_use_case),
) -> PeriodSummaryResponse:
    result = await use_case.execute(period)
    return use_case.to_response(result)


@router.post(
    "/periods/close",
    response_model=ClosingRecordResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def close_period(
    request: ClosePeriodRequest,
    use_case: ClosePeriodUseCase = Depends(get_close_period_use_case),
) -> ClosingRecordResponse:
    """Close a month. A month can only be closed once."""
    record = await use_case.execute(request)
    return use_case.to_response(record)
