"""Create Customer Use Case."""

from dataclasses import dataclass

from aqualedger.application.dto.requests import CreateCustomerRequest
from aqualedger.application.dto.responses import CustomerResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.entities.customer import Customer, CustomerInput
from aqualedger.core.exceptions import SalesmanNotFoundError
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.core.services.ledger_operations import create_customer
from aqualedger.core.services.sale_engine import SaleTransactionEngine

logger = get_logger(__name__)


@dataclass
class CreateCustomerResult:
    customer: Customer


class CreateCustomerUseCase(LedgerUseCase):
    """Register a customer, booking any carried-over debt as a pending sale."""

    def __init__(
        self,
        ledger_store: ILedgerStore | None = None,
        engine: SaleTransactionEngine | None = None,
    ):
        super().__init__(ledger_store)
        self._engine = engine or SaleTransactionEngine()

    async def execute(self, request: CreateCustomerRequest) -> CreateCustomerResult:
        logger.info("create_customer_started", name=request.name, area=request.area)

        store = await self._get_ledger_store()
        snapshot = await store.load()

        if request.salesman_id is not None and snapshot.get_salesman(request.salesman_id) is None:
            raise SalesmanNotFoundError(request.salesman_id)

        snapshot, customer = create_customer(
            snapshot,
            CustomerInput(**request.model_dump()),
            engine=self._engine,
        )
        await store.save(snapshot)

        logger.info(
            "customer_created",
            customer_id=customer.id,
            opening_balance=request.opening_balance,
        )
        return CreateCustomerResult(customer=customer)

    def to_response(self, result: CreateCustomerResult) -> CustomerResponse:
        return CustomerResponse.model_validate(result.customer)
