"""Record Opening Balance Use Case."""

from aqualedger.application.dto.requests import OpeningBalanceRequest
from aqualedger.application.dto.responses import OpeningBalanceResponse
from aqualedger.application.use_cases.base import LedgerUseCase
from aqualedger.config import get_logger
from aqualedger.core.entities.cash import DailyOpeningBalance
from aqualedger.core.services.ledger_operations import record_opening_balance

logger = get_logger(__name__)


class RecordOpeningBalanceUseCase(LedgerUseCase):
    """Set a day's authoritative opening cash and bank, replacing any earlier entry."""

    async def execute(self, request: OpeningBalanceRequest) -> DailyOpeningBalance:
        store = await self._get_ledger_store()
        snapshot = await store.load()

        replaced = snapshot.get_opening_balance(request.date) is not None
        snapshot = record_opening_balance(snapshot, request.date, request.cash, request.bank)
        await store.save(snapshot)

        logger.info(
            "opening_balance_recorded",
            date=request.date.isoformat(),
            cash=request.cash,
            bank=request.bank,
            replaced=replaced,
        )
        return snapshot.get_opening_balance(request.date)  # type: ignore[return-value]

    def to_response(self, balance: DailyOpeningBalance) -> OpeningBalanceResponse:
        return OpeningBalanceResponse.model_validate(balance)
