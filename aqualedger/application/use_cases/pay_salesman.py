"""Pay Salesman Use Case: salesman payment plus its Salaries expense."""

from dataclasses import dataclass
from datetime import datetime

from aqualedger.application.dto.requests import PaySalesmanRequest
from aqualedger.application.dto.responses import (
    ExpenseResponse,
    PaySalesmanResponse,
    SalesmanPaymentResponse,
)
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.entities.expense import Expense
from aqualedger.core.entities.salesman import SalesmanPayment, SalesmanPaymentInput
from aqualedger.core.services.ledger_operations import pay_salesman

logger = get_logger(__name__)


@dataclass
class PaySalesmanResult:
    payment: SalesmanPayment
    expense: Expense


class PaySalesmanUseCase(LedgerUseCase):
    """Pay a salesman; the payment shows up as a Salaries expense in cash figures."""

    async def execute(self, request: PaySalesmanRequest) -> PaySalesmanResult:
        logger.info(
            "pay_salesman_started",
            salesman_id=request.salesman_id,
            amount=request.amount,
        )

        store = await self._get_ledger_store()
        snapshot = await store.load()

        values = request.model_dump(exclude={"date"})
        snapshot, payment = pay_salesman(
            snapshot,
            SalesmanPaymentInput(date=request.date or datetime.now(), **values),
        )
        await store.save(snapshot)

        # pay_salesman appends the matching expense last
        expense = snapshot.expenses[-1]

        logger.info(
            "salesman_paid",
            payment_id=payment.id,
            expense_id=expense.id,
            salesman_id=payment.salesman_id,
        )
        return PaySalesmanResult(payment=payment, expense=expense)

    def to_response(self, result: PaySalesmanResult) -> PaySalesmanResponse:
        return PaySalesmanResponse(
            payment=SalesmanPaymentResponse.model_validate(result.payment),
            expense=ExpenseResponse.model_validate(result.expense),
        )
