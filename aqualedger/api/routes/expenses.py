"""Expense endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from aqualedger.api.dependencies import (
    get_pay_salesman_use_case,
    get_record_expense_use_case,
    get_store,
)
from aqualedger.application.dto.requests import PaySalesmanRequest, RecordExpenseRequest
from aqualedger.application.dto.responses import (
    ErrorResponse,
    ExpenseResponse,
    PaySalesmanResponse,
)
from aqualedger.application.use_cases import PaySalesmanUseCase, RecordExpenseUseCase
from aqualedger.core.interfaces.ledger_store import ILedgerStore

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def record_expense(
    request: RecordExpenseRequest,
    use_case: RecordExpenseUseCase = Depends(get_record_expense_use_case),
) -> ExpenseResponse:
    expense = await use_case.execute(request)
    return use_case.to_response(expense)


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(
    on_date: date | None = Query(default=None, alias="date"),
    category: str | None = None,
    store: ILedgerStore = Depends(get_store),
) -> list[ExpenseResponse]:
    snapshot = await store.load()
    expenses = snapshot.expenses
    if on_date is not None:
        expenses = [e for e in expenses if e.date.date() == on_date]
    if category is not None:
        expenses = [e for e in expenses if e.category == category]
    return [ExpenseResponse.model_validate(e) for e in expenses]


@router.post(
    "/salesman-payments",
    response_model=PaySalesmanResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
async def pay_salesman(
    request: PaySalesmanRequest,
    use_case: PaySalesmanUseCase = Depends(get_pay_salesman_use_case),
) -> PaySalesmanResponse:
    """Pay a salesman; also books a Salaries expense."""
    result = await use_case.execute(request)
    return use_case.to_response(result)
