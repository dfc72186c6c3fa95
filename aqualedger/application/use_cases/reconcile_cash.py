"""Reconcile Cash Use Case: a day's cash/bank positions from full history."""

from dataclasses import dataclass

from aqualedger.application.dto.requests import ReconcileCashRequest
from aqualedger.application.dto.responses import ReconciliationResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger, get_settings
from aqualedger.core.entities.cash import CashBankAmount, ReconciliationBreakdown
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.core.services.reconciliation import OpeningBasis, reconcile

logger = get_logger(__name__)


@dataclass
class ReconcileCashResult:
    breakdown: ReconciliationBreakdown
    register_difference: CashBankAmount | None = None


class ReconcileCashUseCase(LedgerUseCase):
    """
    Build the daily reconciliation.

    Read-only. When counted register amounts are supplied the result also
    carries closing minus counted; a missing count is taken as zero.
    """

    def __init__(
        self,
        ledger_store: ILedgerStore | None = None,
        opening_basis: OpeningBasis | None = None,
    ):
        super().__init__(ledger_store)
        self._opening_basis = opening_basis or get_settings().ledger.opening_basis

    async def execute(self, request: ReconcileCashRequest) -> ReconcileCashResult:
        store = await self._get_ledger_store()
        snapshot = await store.load()

        breakdown = reconcile(
            request.date,
            snapshot.sales,
            snapshot.expenses,
            snapshot.inventory,
            snapshot.daily_opening_balances,
            opening_basis=self._opening_basis,
        )

        difference = None
        if request.counted_cash is not None or request.counted_bank is not None:
            difference = breakdown.register_difference(
                request.counted_cash or 0.0, request.counted_bank or 0.0
            )

        logger.info(
            "cash_reconciled",
            date=request.date.isoformat(),
            opening_recorded=breakdown.opening_recorded,
            closing_cash=breakdown.closing.cash,
            closing_bank=breakdown.closing.bank,
            register_difference=difference.total if difference else None,
        )
        return ReconcileCashResult(breakdown=breakdown, register_difference=difference)

    def to_response(self, result: ReconcileCashResult) -> ReconciliationResponse:
        values = result.breakdown.model_dump()
        if result.register_difference is not None:
            values["register_difference"] = result.register_difference.model_dump()
        return ReconciliationResponse.model_validate(values)
