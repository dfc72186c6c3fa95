"""Record Payment Use Cases: money received against a customer's balance."""

from aqualedger.application.dto.requests import ClearBalanceRequest, RecordPaymentRequest
from aqualedger.application.dto.responses import SaleMutationResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.application.use_cases.record_sale import (
    SaleMutationResult,
    sale_mutation_response,
)
from aqualedger.config import get_logger
from aqualedger.core.entities.sale import PaymentMethod
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.core.services.sale_engine import SaleTransactionEngine

logger = get_logger(__name__)


class RecordPaymentUseCase(LedgerUseCase):
    """Record a payment as a payment-only sale that lowers the balance."""

    def __init__(
        self,
        ledger_store: ILedgerStore | None = None,
        engine: SaleTransactionEngine | None = None,
    ):
        super().__init__(ledger_store)
        self._engine = engine or SaleTransactionEngine()

    async def execute(
        self, customer_id: int, request: RecordPaymentRequest
    ) -> SaleMutationResult:
        logger.info(
            "record_payment_started",
            customer_id=customer_id,
            amount=request.amount,
            payment_method=request.payment_method.value,
        )

        store = await self._get_ledger_store()
        snapshot = await store.load()

        snapshot, sale = self._engine.record_payment(
            snapshot,
            customer_id,
            request.amount,
            PaymentMethod(request.payment_method.value),
            when=request.date,
            payment_for_category=request.payment_for_category,
        )
        await store.save(snapshot)

        logger.info("payment_recorded", sale_id=sale.id, customer_id=customer_id)
        return SaleMutationResult(snapshot=snapshot, sale=sale, customer_id=customer_id)

    def to_response(self, result: SaleMutationResult) -> SaleMutationResponse:
        return sale_mutation_response(result)


class ClearBalanceUseCase(RecordPaymentUseCase):
    """Settle a customer's whole outstanding balance in one payment."""

    async def execute(  # type: ignore[override]
        self, customer_id: int, request: ClearBalanceRequest
    ) -> SaleMutationResult:
        logger.info("clear_balance_started", customer_id=customer_id)

        store = await self._get_ledger_store()
        snapshot = await store.load()

        snapshot, sale = self._engine.clear_balance(
            snapshot,
            customer_id,
            PaymentMethod(request.payment_method.value),
            when=request.date,
        )
        await store.save(snapshot)

        logger.info(
            "balance_cleared",
            sale_id=sale.id,
            customer_id=customer_id,
            amount=sale.amount_received,
        )
        return SaleMutationResult(snapshot=snapshot, sale=sale, customer_id=customer_id)
