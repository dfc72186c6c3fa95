"""Sale endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from aqualedger.api.dependencies import (
    get_delete_sale_use_case,
    get_record_sale_use_case,
    get_store,
    get_update_sale_use_case,
)
from aqualedger.application.dto.requests import SaleRequest
from aqualedger.application.dto.responses import (
    ErrorResponse,
    SaleListResponse,
    SaleMutationResponse,
    SaleResponse,
)
from aqualedger.application.use_cases import (
    DeleteSaleUseCase,
    RecordSaleUseCase,
    UpdateSaleUseCase,
)
from aqualedger.core.interfaces.ledger_store import ILedgerStore

router = APIRouter(prefix="/api/sales", tags=["sales"])


@router.post(
    "",
    response_model=SaleMutationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def record_sale(
    request: SaleRequest,
    use_case: RecordSaleUseCase = Depends(get_record_sale_use_case),
) -> SaleMutationResponse:
    """Record a sale and update balance, empties and stock."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.put(
    "/{sale_id}",
    response_model=SaleMutationResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def update_sale(
    sale_id: int,
    request: SaleRequest,
    use_case: UpdateSaleUseCase = Depends(get_update_sale_use_case),
) -> SaleMutationResponse:
    """Replace a sale's values; the old sale's effects are reversed first."""
    result = await use_case.execute(sale_id, request)
    return use_case.to_response(result)


@router.delete(
    "/{sale_id}",
    response_model=SaleMutationResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_sale(
    sale_id: int,
    use_case: DeleteSaleUseCase = Depends(get_delete_sale_use_case),
) -> SaleMutationResponse:
    result = await use_case.execute(sale_id)
    return use_case.to_response(result)


@router.get("", response_model=SaleListResponse)
async def list_sales(
    on_date: date | None = Query(default=None, alias="date"),
    customer_id: int | None = None,
    store: ILedgerStore = Depends(get_store),
) -> SaleListResponse:
    """Sales for a day and/or a customer, newest first."""
    snapshot = await store.load()
    sales = snapshot.sales
    if on_date is not None:
        sales = [s for s in sales if s.date.date() == on_date]
    if customer_id is not None:
        sales = [s for s in sales if s.customer_id == customer_id]
    sales = sorted(sales, key=lambda s: s.date, reverse=True)

    return SaleListResponse(
        sales=[SaleResponse.model_validate(s) for s in sales],
        total=len(sales),
        total_amount=sum(s.amount for s in sales),
        total_received=sum(s.amount_received for s in sales),
    )
