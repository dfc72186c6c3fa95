"""Record Sale Use Case: a new sale through the transaction engine."""

from dataclasses import dataclass

from aqualedger.application.dto.requests import SaleRequest
from aqualedger.application.dto.responses import (
    CustomerResponse,
    InventoryItemResponse,
    SaleMutationResponse,
    SaleResponse,
)
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.entities.sale import Sale
from aqualedger.core.entities.snapshot import LedgerSnapshot
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.core.services.sale_engine import SaleTransactionEngine

logger = get_logger(__name__)


@dataclass
class SaleMutationResult:
    """A sale change and the snapshot it produced."""

    snapshot: LedgerSnapshot
    sale: Sale | None
    customer_id: int | None = None
    inventory_item_id: int | None = None


def sale_mutation_response(result: SaleMutationResult) -> SaleMutationResponse:
    """Sale plus the customer and item ledgers as they stand after the change."""
    customer = (
        result.snapshot.get_customer(result.customer_id)
        if result.customer_id is not None
        else None
    )
    item = (
        result.snapshot.get_item(result.inventory_item_id)
        if result.inventory_item_id is not None
        else None
    )
    return SaleMutationResponse(
        sale=SaleResponse.model_validate(result.sale) if result.sale else None,
        customer=CustomerResponse.model_validate(customer) if customer else None,
        inventory_item=InventoryItemResponse.model_validate(item) if item else None,
    )


class RecordSaleUseCase(LedgerUseCase):
    """Record a sale and update balance, empties and stock."""

    def __init__(
        self,
        ledger_store: ILedgerStore | None = None,
        engine: SaleTransactionEngine | None = None,
    ):
        super().__init__(ledger_store)
        self._engine = engine or SaleTransactionEngine()

    async def execute(self, request: SaleRequest) -> SaleMutationResult:
        """Execute record sale use case."""
        logger.info(
            "record_sale_started",
            customer_id=request.customer_id,
            inventory_item_id=request.inventory_item_id,
            quantity=request.quantity,
        )

        store = await self._get_ledger_store()

        # 1. Load current ledger
        snapshot = await store.load()

        # 2. Apply through the engine (raises before any save on bad references)
        snapshot, sale = self._engine.add_sale(snapshot, request.to_sale_input())

        # 3. Persist
        await store.save(snapshot)

        logger.info(
            "sale_recorded",
            sale_id=sale.id,
            customer_id=sale.customer_id,
            amount=sale.amount,
            amount_received=sale.amount_received,
            payment_for_category=sale.payment_for_category,
        )

        return SaleMutationResult(
            snapshot=snapshot,
            sale=sale,
            customer_id=sale.customer_id,
            inventory_item_id=sale.inventory_item_id,
        )

    def to_response(self, result: SaleMutationResult) -> SaleMutationResponse:
        return sale_mutation_response(result)
