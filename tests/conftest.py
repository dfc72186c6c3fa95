"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from aqualedger.core.entities import (
    Customer,
    InventoryItem,
    LedgerSnapshot,
    Salesman,
)
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.core.services.sale_engine import SaleTransactionEngine

CONTAINER_CATEGORIES = ["Water Bottle"]

BOTTLE_19L_ID = 1
BOTTLE_6L_ID = 2
DISPENSER_ID = 3


class InMemoryLedgerStore(ILedgerStore):
    """Ledger store that keeps the last saved snapshot in memory."""

    def __init__(self, snapshot: LedgerSnapshot | None = None):
        self.snapshot = snapshot or LedgerSnapshot()
        self.save_count = 0

    async def load(self) -> LedgerSnapshot:
        return self.snapshot.working_copy()

    async def save(self, snapshot: LedgerSnapshot) -> None:
        self.snapshot = snapshot.working_copy()
        self.save_count += 1


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at a temp data dir and reset the cached instance."""
    from aqualedger.config import reset_settings

    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LEDGER_OPENING_BASIS", "amount")
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def engine() -> SaleTransactionEngine:
    return SaleTransactionEngine(container_categories=CONTAINER_CATEGORIES)


@pytest.fixture
def snapshot() -> LedgerSnapshot:
    """A small ledger: two bottle sizes, one accessory, one customer, one salesman."""
    return LedgerSnapshot(
        customers=[
            Customer(
                id=1,
                name="Ahmed Khan",
                mobile="03001234567",
                area="Gulberg",
                salesman_id=1,
                delivery_frequency_days=3,
            ),
        ],
        salesmen=[Salesman(id=1, name="Bilal", monthly_salary=30000)],
        inventory=[
            InventoryItem(
                id=BOTTLE_19L_ID,
                name="19 Ltr Bottle",
                category="Water Bottle",
                stock=100,
                low_stock_threshold=10,
                selling_price=120,
            ),
            InventoryItem(
                id=BOTTLE_6L_ID,
                name="6 Liter Bottle",
                category="Water Bottle",
                stock=50,
                low_stock_threshold=10,
                selling_price=60,
            ),
            InventoryItem(
                id=DISPENSER_ID,
                name="Dispenser",
                category="Accessories",
                stock=5,
                low_stock_threshold=2,
                selling_price=4500,
            ),
        ],
    )


@pytest.fixture
def store(snapshot) -> InMemoryLedgerStore:
    return InMemoryLedgerStore(snapshot)


@pytest.fixture
def sale_time() -> datetime:
    return datetime(2025, 3, 10, 9, 30)
