"""Add Inventory Item Use Case."""

from aqualedger.application.dto.requests import AddInventoryItemRequest
from aqualedger.application.dto.responses import InventoryItemResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.entities.inventory import InventoryItem, InventoryItemInput
from aqualedger.core.services.ledger_operations import add_inventory_item

logger = get_logger(__name__)


class AddInventoryItemUseCase(LedgerUseCase):
    """Add a product to the catalog with its opening stock."""

    async def execute(self, request: AddInventoryItemRequest) -> InventoryItem:
        store = await self._get_ledger_store()
        snapshot = await store.load()

        snapshot, item = add_inventory_item(snapshot, InventoryItemInput(**request.model_dump()))
        await store.save(snapshot)

        logger.info(
            "inventory_item_added",
            item_id=item.id,
            name=item.name,
            category=item.category,
            stock=item.stock,
        )
        return item

    def to_response(self, item: InventoryItem) -> InventoryItemResponse:
        return InventoryItemResponse.model_validate(item)
