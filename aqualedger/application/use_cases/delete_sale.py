"""Delete Sale Use Case: remove a sale and reverse its effects."""

from aqualedger.application.dto.responses import SaleMutationResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.application.use_cases.record_sale import (
    SaleMutationResult,
    sale_mutation_response,
)
from aqualedger.config import get_logger
from aqualedger.core.exceptions import SaleNotFoundError
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.core.services.sale_engine import SaleTransactionEngine

logger = get_logger(__name__)


class DeleteSaleUseCase(LedgerUseCase):
    """Delete a sale; balance, empties and stock return to their prior values."""

    def __init__(
        self,
        ledger_store: ILedgerStore | None = None,
        engine: SaleTransactionEngine | None = None,
    ):
        super().__init__(ledger_store)
        self._engine = engine or SaleTransactionEngine()

    async def execute(self, sale_id: int) -> SaleMutationResult:
        logger.info("delete_sale_started", sale_id=sale_id)

        store = await self._get_ledger_store()
        snapshot = await store.load()

        existing = snapshot.get_sale(sale_id)
        if existing is None:
            raise SaleNotFoundError(sale_id)

        snapshot = self._engine.delete_sale(snapshot, sale_id)
        await store.save(snapshot)

        logger.info("sale_deleted", sale_id=sale_id, customer_id=existing.customer_id)

        return SaleMutationResult(
            snapshot=snapshot,
            sale=None,
            customer_id=existing.customer_id,
            inventory_item_id=existing.inventory_item_id,
        )

    def to_response(self, result: SaleMutationResult) -> SaleMutationResponse:
        return sale_mutation_response(result)
