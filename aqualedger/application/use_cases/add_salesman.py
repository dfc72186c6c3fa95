"""Add Salesman Use Case."""

from aqualedger.application.dto.requests import AddSalesmanRequest
from aqualedger.application.dto.responses import SalesmanResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.entities.salesman import Salesman, SalesmanInput
from aqualedger.core.services.ledger_operations import add_salesman

logger = get_logger(__name__)


class AddSalesmanUseCase(LedgerUseCase):
    async def execute(self, request: AddSalesmanRequest) -> Salesman:
        store = await self._get_ledger_store()
        snapshot = await store.load()

        snapshot, salesman = add_salesman(snapshot, SalesmanInput(**request.model_dump()))
        await store.save(snapshot)

        logger.info("salesman_added", salesman_id=salesman.id, name=salesman.name)
        return salesman

    def to_response(self, salesman: Salesman) -> SalesmanResponse:
        return SalesmanResponse.model_validate(salesman)
