"""Collect Empties Use Case."""

from dataclasses import dataclass

from aqualedger.application.dto.requests import CollectEmptiesRequest
from aqualedger.application.dto.responses import CustomerResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.entities.customer import Customer
from aqualedger.core.services.ledger_operations import collect_empties

logger = get_logger(__name__)


@dataclass
class CollectEmptiesResult:
    customer: Customer
    collected: int


class CollectEmptiesUseCase(LedgerUseCase):
    """Take empty containers back from a customer between deliveries."""

    async def execute(
        self, customer_id: int, request: CollectEmptiesRequest
    ) -> CollectEmptiesResult:
        logger.info(
            "collect_empties_started",
            customer_id=customer_id,
            bottles=request.bottles,
        )

        store = await self._get_ledger_store()
        snapshot = await store.load()

        snapshot, customer = collect_empties(
            snapshot, customer_id, request.bottles, when=request.date
        )
        await store.save(snapshot)

        logger.info(
            "empties_collected",
            customer_id=customer_id,
            remaining=customer.empty_bottles_held,
        )
        return CollectEmptiesResult(customer=customer, collected=request.bottles)

    def to_response(self, result: CollectEmptiesResult) -> CustomerResponse:
        return CustomerResponse.model_validate(result.customer)
