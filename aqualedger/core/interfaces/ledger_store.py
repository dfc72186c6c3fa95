"""Abstract interface for ledger storage."""

from abc import ABC, abstractmethod

from aqualedger.core.entities.snapshot import LedgerSnapshot


class ILedgerStore(ABC):
    """Interface for whole-snapshot ledger persistence."""

    @abstractmethod
    async def load(self) -> LedgerSnapshot:
        """Load the full ledger snapshot."""
        pass

    @abstractmethod
    async def save(self, snapshot: LedgerSnapshot) -> None:
        """Persist the full ledger snapshot, replacing what was stored."""
        pass
