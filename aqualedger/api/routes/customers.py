"""Customer account endpoints."""

from datetime import date
from typing import Literal

from fastapi import APIRouter, Depends, Query, status

from aqualedger.api.dependencies import (
    get_clear_balance_use_case,
    get_collect_empties_use_case,
    get_create_customer_use_case,
    get_customer_summary_use_case,
    get_record_payment_use_case,
    get_remove_customer_use_case,
    get_store,
)
from aqualedger.application.dto.requests import (
    ClearBalanceRequest,
    CollectEmptiesRequest,
    CreateCustomerRequest,
    RecordPaymentRequest,
)
from aqualedger.application.dto.responses import (
    CustomerListResponse,
    CustomerResponse,
    CustomerSummaryResponse,
    ErrorResponse,
    SaleMutationResponse,
)
from aqualedger.application.use_cases import (
    ClearBalanceUseCase,
    CollectEmptiesUseCase,
    CreateCustomerUseCase,
    CustomerSummaryUseCase,
    RecordPaymentUseCase,
    RemoveCustomerUseCase,
)
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.core.services.delivery_scheduler import due_customers
from aqualedger.core.services.ledger_operations import outstanding_customers

router = APIRouter(prefix="/api/customers", tags=["customers"])

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
async def create_customer(
    request: CreateCustomerRequest,
    use_case: CreateCustomerUseCase = Depends(get_create_customer_use_case),
) -> CustomerResponse:
    """Register a customer; an opening balance is booked as a pending sale."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get("", response_model=CustomerListResponse)
async def list_customers(
    view: Literal["all", "pending", "paid", "due"] = Query(
        default="all",
        alias="filter",
        description="pending: owes money; paid: owes nothing; due: delivery due on the date",
    ),
    on_date: date | None = Query(default=None, alias="date"),
    area: str | None = None,
    store: ILedgerStore = Depends(get_store),
) -> CustomerListResponse:
    snapshot = await store.load()
    customers = snapshot.customers
    if area is not None:
        customers = [c for c in customers if c.area == area]

    if view == "pending":
        customers = outstanding_customers(customers)
    elif view == "paid":
        customers = [c for c in customers if not c.has_outstanding_balance]
    elif view == "due":
        customers = due_customers(on_date or date.today(), customers, snapshot.sales)

    return CustomerListResponse(
        customers=[CustomerResponse.model_validate(c) for c in customers],
        total=len(customers),
        total_outstanding=sum(c.total_balance for c in customers if c.has_outstanding_balance),
    )


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
)
async def remove_customer(
    customer_id: int,
    use_case: RemoveCustomerUseCase = Depends(get_remove_customer_use_case),
) -> None:
    await use_case.execute(customer_id)


@router.post(
    "/{customer_id}/payments",
    response_model=SaleMutationResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
async def record_payment(
    customer_id: int,
    request: RecordPaymentRequest,
    use_case: RecordPaymentUseCase = Depends(get_record_payment_use_case),
) -> SaleMutationResponse:
    """Record money received against the customer's balance."""
    result = await use_case.execute(customer_id, request)
    return use_case.to_response(result)


@router.post(
    "/{customer_id}/clear-balance",
    response_model=SaleMutationResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
async def clear_balance(
    customer_id: int,
    request: ClearBalanceRequest,
    use_case: ClearBalanceUseCase = Depends(get_clear_balance_use_case),
) -> SaleMutationResponse:
    result = await use_case.execute(customer_id, request)
    return use_case.to_response(result)


@router.post(
    "/{customer_id}/empties",
    response_model=CustomerResponse,
    responses=NOT_FOUND,
)
async def collect_empties(
    customer_id: int,
    request: CollectEmptiesRequest,
    use_case: CollectEmptiesUseCase = Depends(get_collect_empties_use_case),
) -> CustomerResponse:
    """Take empty containers back outside of a sale."""
    result = await use_case.execute(customer_id, request)
    return use_case.to_response(result)


@router.get(
    "/{customer_id}/summary",
    response_model=CustomerSummaryResponse,
    responses=NOT_FOUND,
)
async def customer_summary(
    customer_id: int,
    on_date: date | None = Query(default=None, alias="date"),
    use_case: CustomerSummaryUseCase = Depends(get_customer_summary_use_case),
) -> CustomerSummaryResponse:
    """Account summary for a day (the customer's last active day by default)."""
    summary = await use_case.execute(customer_id, on_date)
    return use_case.to_response(summary)
