"""Record Expense Use Case."""

from datetime import datetime

from aqualedger.application.dto.requests import RecordExpenseRequest
from aqualedger.application.dto.responses import ExpenseResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.entities.expense import Expense, ExpenseInput
from aqualedger.core.services.ledger_operations import record_expense

logger = get_logger(__name__)


class RecordExpenseUseCase(LedgerUseCase):
    """Record money paid out of cash or bank."""

    async def execute(self, request: RecordExpenseRequest) -> Expense:
        logger.info(
            "record_expense_started",
            category=request.category,
            amount=request.amount,
        )

        store = await self._get_ledger_store()
        snapshot = await store.load()

        values = request.model_dump(exclude={"date"})
        snapshot, expense = record_expense(
            snapshot,
            ExpenseInput(date=request.date or datetime.now(), **values),
        )
        await store.save(snapshot)

        logger.info(
            "expense_recorded",
            expense_id=expense.id,
            category=expense.category,
            payment_method=expense.payment_method.value,
        )
        return expense

    def to_response(self, expense: Expense) -> ExpenseResponse:
        return ExpenseResponse.model_validate(expense)
