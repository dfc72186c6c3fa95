"""Ledger snapshot: the full in-memory state the core operates on."""

from datetime import date

from pydantic import BaseModel, Field

from aqualedger.core.entities.cash import ClosingRecord, DailyOpeningBalance
from aqualedger.core.entities.customer import Customer
from aqualedger.core.entities.expense import Expense
from aqualedger.core.entities.inventory import InventoryItem, StockAdjustment
from aqualedger.core.entities.sale import Sale
from aqualedger.core.entities.salesman import Salesman, SalesmanPayment

# Collections whose records carry an integer ``id``
ID_COLLECTIONS = (
    "customers",
    "salesmen",
    "sales",
    "expenses",
    "inventory",
    "stock_adjustments",
    "salesman_payments",
    "closing_records",
)


class LedgerSnapshot(BaseModel):
    """
    Everything the ledger store holds.

    Core services never mutate a snapshot they are given: they work on
    ``working_copy()`` and return it.
    """

    customers: list[Customer] = Field(default_factory=list)
    salesmen: list[Salesman] = Field(default_factory=list)
    sales: list[Sale] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)
    inventory: list[InventoryItem] = Field(default_factory=list)
    stock_adjustments: list[StockAdjustment] = Field(default_factory=list)
    salesman_payments: list[SalesmanPayment] = Field(default_factory=list)
    daily_opening_balances: list[DailyOpeningBalance] = Field(default_factory=list)
    closing_records: list[ClosingRecord] = Field(default_factory=list)
    # Highest identity ever assigned per collection, removed records included
    id_counters: dict[str, int] = Field(default_factory=dict)

    def working_copy(self) -> "LedgerSnapshot":
        """Deep copy to be mutated by a single operation."""
        return self.model_copy(deep=True)

    def next_id(self, collection: str) -> int:
        """
        Allocate the next identity in an id-bearing collection.

        The counter only moves forward, so the id of a removed record (and
        any sales still pointing at it) never passes to a new one.
        """
        if collection not in ID_COLLECTIONS:
            raise KeyError(collection)
        records = getattr(self, collection)
        highest = max((r.id for r in records), default=0)
        next_value = max(highest, self.id_counters.get(collection, 0)) + 1
        self.id_counters[collection] = next_value
        return next_value

    def retire_id(self, collection: str, record_id: int) -> None:
        """Keep a removed record's id out of future allocations."""
        if collection not in ID_COLLECTIONS:
            raise KeyError(collection)
        self.id_counters[collection] = max(self.id_counters.get(collection, 0), record_id)

    def get_customer(self, customer_id: int) -> Customer | None:
        return next((c for c in self.customers if c.id == customer_id), None)

    def get_sale(self, sale_id: int) -> Sale | None:
        return next((s for s in self.sales if s.id == sale_id), None)

    def get_item(self, item_id: int) -> InventoryItem | None:
        return next((i for i in self.inventory if i.id == item_id), None)

    def get_salesman(self, salesman_id: int) -> Salesman | None:
        return next((s for s in self.salesmen if s.id == salesman_id), None)

    def get_opening_balance(self, on_date: date) -> DailyOpeningBalance | None:
        return next((b for b in self.daily_opening_balances if b.date == on_date), None)

    def sales_for_customer(self, customer_id: int) -> list[Sale]:
        return [s for s in self.sales if s.customer_id == customer_id]
