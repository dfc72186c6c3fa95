"""Core interfaces (ports) for dependency injection."""

from aqualedger.core.interfaces.ledger_store import ILedgerStore

__all__ = [
    # Storage interfaces
    "ILedgerStore",
]
