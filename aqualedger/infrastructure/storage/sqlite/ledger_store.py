"""SQLite implementation of the ledger store."""

import aiosqlite
from pydantic import BaseModel

from aqualedger.config import get_logger
from aqualedger.core.entities.cash import ClosingRecord, DailyOpeningBalance
from aqualedger.core.entities.customer import Customer
from aqualedger.core.entities.expense import Expense
from aqualedger.core.entities.inventory import InventoryItem, StockAdjustment
from aqualedger.core.entities.sale import Sale
from aqualedger.core.entities.salesman import Salesman, SalesmanPayment
from aqualedger.core.entities.snapshot import LedgerSnapshot
from aqualedger.core.exceptions import DatabaseError
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)

COLLECTION_MODELS: dict[str, type[BaseModel]] = {
    "customers": Customer,
    "salesmen": Salesman,
    "sales": Sale,
    "expenses": Expense,
    "inventory": InventoryItem,
    "stock_adjustments": StockAdjustment,
    "salesman_payments": SalesmanPayment,
    "daily_opening_balances": DailyOpeningBalance,
    "closing_records": ClosingRecord,
}


def _record_key(record: BaseModel) -> str:
    # Opening balances are identified by their day, everything else by id
    if isinstance(record, DailyOpeningBalance):
        return record.date.isoformat()
    return str(record.id)  # type: ignore[attr-defined]


class SQLiteLedgerStore(ILedgerStore):
    """
    Ledger snapshot persisted as JSON rows in ``ledger_records``.

    ``save`` rewrites every row in one immediate transaction, so a load never
    sees half of a save.
    """

    async def load(self) -> LedgerSnapshot:
        """Load the full ledger. An empty database yields an empty snapshot."""
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT collection, payload FROM ledger_records "
                    "ORDER BY collection, position"
                )
                rows = await cursor.fetchall()
                cursor = await conn.execute("SELECT collection, last_id FROM ledger_id_counters")
                counter_rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise DatabaseError("load", str(e)) from e

        collections: dict[str, list[BaseModel]] = {name: [] for name in COLLECTION_MODELS}
        for row in rows:
            model = COLLECTION_MODELS.get(row["collection"])
            if model is None:
                logger.warning("unknown_ledger_collection", collection=row["collection"])
                continue
            collections[row["collection"]].append(model.model_validate_json(row["payload"]))

        snapshot = LedgerSnapshot(
            **collections,
            id_counters={row["collection"]: row["last_id"] for row in counter_rows},
        )
        logger.debug("ledger_loaded", records=len(rows))
        return snapshot

    async def save(self, snapshot: LedgerSnapshot) -> None:
        """Replace the stored ledger with ``snapshot``."""
        params = [
            (collection, _record_key(record), position, record.model_dump_json())
            for collection in COLLECTION_MODELS
            for position, record in enumerate(getattr(snapshot, collection))
        ]

        try:
            async with get_transaction() as conn:
                await conn.execute("DELETE FROM ledger_records")
                await conn.executemany(
                    """
                    INSERT INTO ledger_records (collection, record_key, position, payload)
                    VALUES (?, ?, ?, ?)
                    """,
                    params,
                )
                await conn.execute("DELETE FROM ledger_id_counters")
                await conn.executemany(
                    "INSERT INTO ledger_id_counters (collection, last_id) VALUES (?, ?)",
                    list(snapshot.id_counters.items()),
                )
        except aiosqlite.Error as e:
            logger.error("ledger_save_failed", error=str(e))
            raise DatabaseError("save", str(e)) from e

        logger.info("ledger_saved", records=len(params))
