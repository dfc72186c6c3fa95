"""Customer Summary Use Case: read-only account summary for messaging."""

from datetime import date

from aqualedger.application.dto.responses import CustomerSummaryResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger, get_settings
from aqualedger.core.entities.summary import CustomerDailySummary
from aqualedger.core.exceptions import CustomerNotFoundError
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.core.services.customer_summary import build_customer_summary
from aqualedger.core.services.sale_engine import SaleTransactionEngine

logger = get_logger(__name__)


class CustomerSummaryUseCase(LedgerUseCase):
    """Summarize one day of a customer's account (last active day by default)."""

    def __init__(
        self,
        ledger_store: ILedgerStore | None = None,
        engine: SaleTransactionEngine | None = None,
    ):
        super().__init__(ledger_store)
        self._engine = engine or SaleTransactionEngine()

    async def execute(
        self, customer_id: int, on_date: date | None = None
    ) -> CustomerDailySummary:
        store = await self._get_ledger_store()
        snapshot = await store.load()

        customer = snapshot.get_customer(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)

        containers = {i.id for i in snapshot.inventory if self._engine.is_container_item(i)}
        summary = build_customer_summary(customer, snapshot.sales, on_date, containers)
        logger.info(
            "customer_summary_built",
            customer_id=customer_id,
            date=str(summary.date) if summary.date else None,
        )
        return summary

    def to_response(self, summary: CustomerDailySummary) -> CustomerSummaryResponse:
        return CustomerSummaryResponse.model_validate(
            {**summary.model_dump(), "currency": get_settings().ledger.currency}
        )
