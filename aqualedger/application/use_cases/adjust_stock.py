"""Adjust Stock Use Case: manual stock correction outside of sales."""

from dataclasses import dataclass

from aqualedger.application.dto.requests import AdjustStockRequest
from aqualedger.application.dto.responses import (
    AdjustStockResponse,
    InventoryItemResponse,
    StockAdjustmentResponse,
)
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.entities.inventory import InventoryItem, StockAdjustment
from aqualedger.core.services.ledger_operations import adjust_stock

logger = get_logger(__name__)


@dataclass
class AdjustStockResult:
    """Result of a stock adjustment."""

    item: InventoryItem
    adjustment: StockAdjustment


class AdjustStockUseCase(LedgerUseCase):
    """Correct an item's stock by a signed amount and keep the audit record."""

    async def execute(self, item_id: int, request: AdjustStockRequest) -> AdjustStockResult:
        """Execute adjust stock use case."""
        logger.info(
            "adjust_stock_started",
            item_id=item_id,
            adjustment=request.adjustment,
        )

        store = await self._get_ledger_store()

        # 1. Load current ledger
        snapshot = await store.load()

        # 2. Apply adjustment (raises InventoryItemNotFoundError)
        snapshot, record = adjust_stock(
            snapshot,
            item_id,
            request.adjustment,
            reason=request.reason,
            when=request.date,
        )

        # 3. Persist
        await store.save(snapshot)

        item = snapshot.get_item(item_id)
        logger.info(
            "adjust_stock_complete",
            item_id=item_id,
            new_stock_level=record.new_stock_level,
            low_stock=item.is_low_stock,  # type: ignore[union-attr]
        )

        return AdjustStockResult(item=item, adjustment=record)  # type: ignore[arg-type]

    def to_response(self, result: AdjustStockResult) -> AdjustStockResponse:
        return AdjustStockResponse(
            item=InventoryItemResponse.model_validate(result.item),
            adjustment=StockAdjustmentResponse.model_validate(result.adjustment),
        )
