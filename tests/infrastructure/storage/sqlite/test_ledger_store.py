"""Tests for SQLiteLedgerStore."""

from datetime import date, datetime
from unittest.mock import MagicMock, patch

import aiosqlite
import pytest

import aqualedger.infrastructure.storage.sqlite.connection as conn_module
from aqualedger.core.entities import (
    ClosingRecord,
    DailyOpeningBalance,
    ExpenseInput,
    LedgerSnapshot,
    PaymentMethod,
    SaleInput,
)
from aqualedger.core.exceptions import DatabaseError
from aqualedger.core.services.ledger_operations import record_expense
from aqualedger.infrastructure.storage.sqlite import get_pool
from aqualedger.infrastructure.storage.sqlite.ledger_store import SQLiteLedgerStore

WHEN = datetime(2025, 3, 10, 9, 30)


class TestSQLiteLedgerStore:
    async def test_empty_database(self, ledger_pool):
        """A fresh database loads as an empty ledger."""
        snapshot = await SQLiteLedgerStore().load()
        assert snapshot == LedgerSnapshot()

    async def test_roundtrip(self, ledger_pool, snapshot, engine):
        snapshot, _ = engine.add_sale(
            snapshot,
            SaleInput(customer_id=1, inventory_item_id=1, quantity=3, empties_collected=1,
                      amount=360, amount_received=120, date=WHEN,
                      payment_method=PaymentMethod.CASH),
        )
        snapshot, _ = record_expense(
            snapshot, ExpenseInput(category="Shop", name="Tape", amount=50, date=WHEN)
        )
        snapshot.daily_opening_balances.append(
            DailyOpeningBalance(date=date(2025, 3, 10), cash=100, bank=200)
        )
        snapshot.closing_records.append(
            ClosingRecord(id=1, period="2025-02", cash_revenue=1, bank_revenue=2,
                          cash_expenses=0, bank_expenses=0, net_balance=3)
        )
        store = SQLiteLedgerStore()

        await store.save(snapshot)
        loaded = await store.load()

        assert loaded == snapshot

    async def test_save_replaces(self, ledger_pool, snapshot):
        store = SQLiteLedgerStore()
        await store.save(snapshot)

        smaller = snapshot.working_copy()
        smaller.inventory = smaller.inventory[:1]
        await store.save(smaller)

        loaded = await store.load()
        assert [i.id for i in loaded.inventory] == [1]
        assert len(loaded.customers) == 1

    async def test_id_counters_persisted(self, ledger_pool, snapshot):
        """Ids of removed records stay allocated across a save and load."""
        working = snapshot.working_copy()
        assert working.next_id("customers") == 2
        working.customers = []
        store = SQLiteLedgerStore()

        await store.save(working)
        loaded = await store.load()

        assert loaded.customers == []
        assert loaded.id_counters == {"customers": 2}
        assert loaded.next_id("customers") == 3

    async def test_order_preserved(self, ledger_pool, snapshot):
        snapshot.inventory.reverse()
        store = SQLiteLedgerStore()

        await store.save(snapshot)
        loaded = await store.load()

        assert [i.id for i in loaded.inventory] == [3, 2, 1]

    async def test_unknown_collection_skipped(self, ledger_pool, snapshot):
        store = SQLiteLedgerStore()
        await store.save(snapshot)

        pool = await get_pool()
        async with pool.transaction() as conn:
            await conn.execute(
                "INSERT INTO ledger_records (collection, record_key, position, payload) "
                "VALUES ('retired', '1', 0, '{}')"
            )

        loaded = await store.load()
        assert loaded == snapshot

    async def test_failed_save_rolls_back(self, ledger_pool, snapshot):
        """Duplicate record keys abort the save and keep the previous ledger."""
        store = SQLiteLedgerStore()
        await store.save(snapshot)

        broken = snapshot.working_copy()
        broken.customers.append(broken.customers[0].model_copy())

        with pytest.raises(DatabaseError):
            await store.save(broken)

        loaded = await store.load()
        assert loaded == snapshot

    async def test_missing_schema(self, temp_db_path):
        """Loading before migrations surfaces a storage error."""
        conn_module._pool = None
        mock_settings = MagicMock()
        mock_settings.storage.db_path = temp_db_path
        mock_settings.storage.pool_size = 1
        mock_settings.storage.busy_timeout = 5000

        with patch.object(conn_module, "get_settings", return_value=mock_settings):
            try:
                with pytest.raises(DatabaseError):
                    await SQLiteLedgerStore().load()
            finally:
                await conn_module.close_pool()


class TestConnectionPool:
    async def test_wal_mode(self, ledger_pool):
        pool = await get_pool()
        async with pool.acquire() as conn:
            cursor = await conn.execute("PRAGMA journal_mode")
            row = await cursor.fetchone()
        assert row[0].lower() == "wal"

    async def test_transaction_rollback(self, ledger_pool):
        pool = await get_pool()

        with pytest.raises(RuntimeError):
            async with pool.transaction() as conn:
                await conn.execute(
                    "INSERT INTO ledger_records (collection, record_key, position, payload) "
                    "VALUES ('customers', '1', 0, '{}')"
                )
                raise RuntimeError("abort")

        async with aiosqlite.connect(ledger_pool) as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM ledger_records")
            row = await cursor.fetchone()
        assert row[0] == 0
