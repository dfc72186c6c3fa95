"""Inventory endpoints."""

from fastapi import APIRouter, Depends, status

from aqualedger.api.dependencies import (
    get_add_inventory_item_use_case,
    get_adjust_stock_use_case,
    get_store,
)
from aqualedger.application.dto.requests import AddInventoryItemRequest, AdjustStockRequest
from aqualedger.application.dto.responses import (
    AdjustStockResponse,
    ErrorResponse,
    InventoryItemResponse,
    InventoryListResponse,
)
from aqualedger.application.use_cases import AddInventoryItemUseCase, AdjustStockUseCase
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.core.services.ledger_operations import low_stock_items

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def add_item(
    request: AddInventoryItemRequest,
    use_case: AddInventoryItemUseCase = Depends(get_add_inventory_item_use_case),
) -> InventoryItemResponse:
    item = await use_case.execute(request)
    return use_case.to_response(item)


@router.get("", response_model=InventoryListResponse)
async def list_items(store: ILedgerStore = Depends(get_store)) -> InventoryListResponse:
    """Current stock for all items."""
    snapshot = await store.load()
    return InventoryListResponse(
        items=[InventoryItemResponse.model_validate(i) for i in snapshot.inventory],
        total=len(snapshot.inventory),
    )


@router.get("/low-stock", response_model=InventoryListResponse)
async def list_low_stock(store: ILedgerStore = Depends(get_store)) -> InventoryListResponse:
    """Items below their low-stock threshold, most depleted first."""
    snapshot = await store.load()
    items = low_stock_items(snapshot.inventory)
    return InventoryListResponse(
        items=[InventoryItemResponse.model_validate(i) for i in items],
        total=len(items),
    )


@router.post(
    "/{item_id}/adjust",
    response_model=AdjustStockResponse,
    responses={404: {"model": ErrorResponse}},
)
async def adjust_stock(
    item_id: int,
    request: AdjustStockRequest,
    use_case: AdjustStockUseCase = Depends(get_adjust_stock_use_case),
) -> AdjustStockResponse:
    """Correct stock by a signed amount."""
    result = await use_case.execute(item_id, request)
    return use_case.to_response(result)
