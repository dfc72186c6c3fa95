"""Core domain entities."""

from aqualedger.core.entities.cash import (
    CashBankAmount,
    ClosingRecord,
    DailyOpeningBalance,
    PeriodSummary,
    ReconciliationBreakdown,
)
from aqualedger.core.entities.customer import Customer, CustomerInput
from aqualedger.core.entities.expense import (
    Expense,
    ExpenseInput,
    ExpenseOwnerType,
    SettlementMethod,
)
from aqualedger.core.entities.inventory import (
    InventoryItem,
    InventoryItemInput,
    StockAdjustment,
)
from aqualedger.core.entities.sale import (
    PaymentCategory,
    PaymentMethod,
    Sale,
    SaleInput,
)
from aqualedger.core.entities.salesman import (
    Salesman,
    SalesmanInput,
    SalesmanPayment,
    SalesmanPaymentInput,
)
from aqualedger.core.entities.snapshot import LedgerSnapshot
from aqualedger.core.entities.summary import CustomerDailySummary

__all__ = [
    # Customer entities
    "Customer",
    "CustomerInput",
    "CustomerDailySummary",
    # Sale entities
    "Sale",
    "SaleInput",
    "PaymentMethod",
    "PaymentCategory",
    # Inventory entities
    "InventoryItem",
    "InventoryItemInput",
    "StockAdjustment",
    # Expense entities
    "Expense",
    "ExpenseInput",
    "ExpenseOwnerType",
    "SettlementMethod",
    # Salesman entities
    "Salesman",
    "SalesmanInput",
    "SalesmanPayment",
    "SalesmanPaymentInput",
    # Cash entities
    "CashBankAmount",
    "ClosingRecord",
    "DailyOpeningBalance",
    "PeriodSummary",
    "ReconciliationBreakdown",
    # Snapshot
    "LedgerSnapshot",
]
