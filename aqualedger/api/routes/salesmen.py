"""Salesman endpoints."""

from fastapi import APIRouter, Depends, status

from aqualedger.api.dependencies import get_add_salesman_use_case, get_store
from aqualedger.application.dto.requests import AddSalesmanRequest
from aqualedger.application.dto.responses import SalesmanResponse
from aqualedger.application.use_cases import AddSalesmanUseCase
from aqualedger.core.interfaces.ledger_store import ILedgerStore

router = APIRouter(prefix="/api/salesmen", tags=["salesmen"])


@router.post("", response_model=SalesmanResponse, status_code=status.HTTP_201_CREATED)
async def add_salesman(
    request: AddSalesmanRequest,
    use_case: AddSalesmanUseCase = Depends(get_add_salesman_use_case),
) -> SalesmanResponse:
    salesman = await use_case.execute(request)
    return use_case.to_response(salesman)


@router.get("", response_model=list[SalesmanResponse])
async def list_salesmen(store: ILedgerStore = Depends(get_store)) -> list[SalesmanResponse]:
    snapshot = await store.load()
    return [SalesmanResponse.model_validate(s) for s in snapshot.salesmen]
