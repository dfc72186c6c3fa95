"""Update Sale Use Case: reverse the stored sale, apply the edited one."""

from aqualedger.application.dto.requests import SaleRequest
from aqualedger.application.dto.responses import SaleMutationResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.application.use_cases.record_sale import (
    SaleMutationResult,
    sale_mutation_response,
)
from aqualedger.config import get_logger
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.core.services.sale_engine import SaleTransactionEngine

logger = get_logger(__name__)


class UpdateSaleUseCase(LedgerUseCase):
    """Edit a sale; the ledgers end up as if only the edited sale existed."""

    def __init__(
        self,
        ledger_store: ILedgerStore | None = None,
        engine: SaleTransactionEngine | None = None,
    ):
        super().__init__(ledger_store)
        self._engine = engine or SaleTransactionEngine()

    async def execute(self, sale_id: int, request: SaleRequest) -> SaleMutationResult:
        logger.info("update_sale_started", sale_id=sale_id)

        store = await self._get_ledger_store()
        snapshot = await store.load()

        snapshot, sale = self._engine.update_sale(snapshot, sale_id, request.to_sale_input())
        await store.save(snapshot)

        logger.info(
            "sale_updated",
            sale_id=sale.id,
            customer_id=sale.customer_id,
            amount=sale.amount,
            amount_received=sale.amount_received,
        )

        return SaleMutationResult(
            snapshot=snapshot,
            sale=sale,
            customer_id=sale.customer_id,
            inventory_item_id=sale.inventory_item_id,
        )

    def to_response(self, result: SaleMutationResult) -> SaleMutationResponse:
        return sale_mutation_response(result)
