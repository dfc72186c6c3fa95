"""Store resolution shared by the ledger use cases."""

from aqualedger.core.interfaces.ledger_store import ILedgerStore


class LedgerUseCase:
    """
    Base for use cases that read or rewrite the ledger.

    The store is injected in tests and resolved lazily from the SQLite
    factory otherwise.
    """

    def __init__(self, ledger_store: ILedgerStore | None = None):
        self._ledger_store = ledger_store

    async def _get_ledger_store(self) -> ILedgerStore:
        if self._ledger_store is None:
            from aqualedger.infrastructure.storage.sqlite import get_ledger_store

            self._ledger_store = await get_ledger_store()
        return self._ledger_store
