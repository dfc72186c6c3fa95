"""Remove Customer Use Case."""

from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.services.ledger_operations import remove_customer

logger = get_logger(__name__)


class RemoveCustomerUseCase(LedgerUseCase):
    """Remove a customer account. Past sales stay for cash history."""

    async def execute(self, customer_id: int) -> None:
        logger.info("remove_customer_started", customer_id=customer_id)

        store = await self._get_ledger_store()
        snapshot = await store.load()

        snapshot = remove_customer(snapshot, customer_id)
        await store.save(snapshot)

        logger.info("customer_removed", customer_id=customer_id)
