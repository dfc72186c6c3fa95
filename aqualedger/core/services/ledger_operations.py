"""
Ledger operations outside the sale engine.

Each operation takes a snapshot and returns a new one, like the engine.
Customer opening debt is booked as a sale through the engine so that the
balance stays derived from sales history.
"""

from collections.abc import Iterable
from datetime import date, datetime

from aqualedger.config import get_logger
from aqualedger.core.entities.cash import ClosingRecord, DailyOpeningBalance, PeriodSummary
from aqualedger.core.entities.customer import Customer, CustomerInput
from aqualedger.core.entities.expense import Expense, ExpenseInput, ExpenseOwnerType
from aqualedger.core.entities.inventory import InventoryItem, InventoryItemInput, StockAdjustment
from aqualedger.core.entities.sale import PaymentMethod, SaleInput
from aqualedger.core.entities.salesman import (
    Salesman,
    SalesmanInput,
    SalesmanPayment,
    SalesmanPaymentInput,
)
from aqualedger.core.entities.snapshot import LedgerSnapshot
from aqualedger.core.exceptions import (
    CustomerNotFoundError,
    InventoryItemNotFoundError,
    PeriodAlreadyClosedError,
    SalesmanNotFoundError,
)
from aqualedger.core.services.sale_engine import SaleTransactionEngine

logger = get_logger(__name__)

OPENING_DEBT_DESCRIPTION = "Outstanding Balance"
SALARIES_CATEGORY = "Salaries"


def create_customer(
    snapshot: LedgerSnapshot,
    customer_input: CustomerInput,
    engine: SaleTransactionEngine | None = None,
    when: datetime | None = None,
) -> tuple[LedgerSnapshot, Customer]:
    """
    Register a customer.

    A positive opening balance becomes a Pending sale with no item, so the
    customer's balance equals the sum over their sales from day one.
    """
    working = snapshot.working_copy()
    customer = Customer(
        id=working.next_id("customers"),
        **customer_input.model_dump(exclude={"opening_balance"}),
    )
    working.customers.append(customer)

    if customer_input.opening_balance > 0:
        engine = engine or SaleTransactionEngine()
        opening_debt = SaleInput(
            customer_id=customer.id,
            amount=customer_input.opening_balance,
            amount_received=0.0,
            date=when or datetime.now(),
            payment_method=PaymentMethod.PENDING,
            description=OPENING_DEBT_DESCRIPTION,
        )
        working, _ = engine.add_sale(working, opening_debt)
        customer = working.get_customer(customer.id)  # type: ignore[assignment]

    logger.debug("customer_registered", customer_id=customer.id)
    return working, customer


def remove_customer(snapshot: LedgerSnapshot, customer_id: int) -> LedgerSnapshot:
    """Remove a customer. Their sales stay in the history for cash figures."""
    if snapshot.get_customer(customer_id) is None:
        raise CustomerNotFoundError(customer_id)
    working = snapshot.working_copy()
    working.customers = [c for c in working.customers if c.id != customer_id]
    working.retire_id("customers", customer_id)
    return working


def add_inventory_item(
    snapshot: LedgerSnapshot, item_input: InventoryItemInput
) -> tuple[LedgerSnapshot, InventoryItem]:
    working = snapshot.working_copy()
    item = InventoryItem(id=working.next_id("inventory"), **item_input.model_dump())
    working.inventory.append(item)
    return working, item


def add_salesman(
    snapshot: LedgerSnapshot, salesman_input: SalesmanInput
) -> tuple[LedgerSnapshot, Salesman]:
    working = snapshot.working_copy()
    salesman = Salesman(id=working.next_id("salesmen"), **salesman_input.model_dump())
    working.salesmen.append(salesman)
    return working, salesman


def collect_empties(
    snapshot: LedgerSnapshot,
    customer_id: int,
    bottles: int,
    when: datetime | None = None,
) -> tuple[LedgerSnapshot, Customer]:
    """Take returned empty containers back from a customer outside of a sale."""
    working = snapshot.working_copy()
    customer = working.get_customer(customer_id)
    if customer is None:
        raise CustomerNotFoundError(customer_id)

    customer.empty_bottles_held -= bottles
    customer.last_empties_collection_date = when or datetime.now()
    return working, customer


def adjust_stock(
    snapshot: LedgerSnapshot,
    item_id: int,
    adjustment: int,
    reason: str = "",
    when: datetime | None = None,
) -> tuple[LedgerSnapshot, StockAdjustment]:
    """Correct an item's stock by a signed amount and keep an adjustment record."""
    working = snapshot.working_copy()
    item = working.get_item(item_id)
    if item is None:
        raise InventoryItemNotFoundError(item_id)

    item.stock += adjustment
    record = StockAdjustment(
        id=working.next_id("stock_adjustments"),
        inventory_item_id=item_id,
        date=when or datetime.now(),
        quantity=adjustment,
        reason=reason,
        new_stock_level=item.stock,
    )
    working.stock_adjustments.append(record)
    return working, record


def record_expense(
    snapshot: LedgerSnapshot, expense_input: ExpenseInput
) -> tuple[LedgerSnapshot, Expense]:
    working = snapshot.working_copy()
    expense = Expense(id=working.next_id("expenses"), **expense_input.model_dump())
    working.expenses.append(expense)
    return working, expense


def pay_salesman(
    snapshot: LedgerSnapshot, payment_input: SalesmanPaymentInput
) -> tuple[LedgerSnapshot, SalesmanPayment]:
    """Record a salesman payment and the Salaries expense it costs."""
    salesman = snapshot.get_salesman(payment_input.salesman_id)
    if salesman is None:
        raise SalesmanNotFoundError(payment_input.salesman_id)

    working = snapshot.working_copy()
    payment = SalesmanPayment(
        id=working.next_id("salesman_payments"), **payment_input.model_dump()
    )
    working.salesman_payments.append(payment)

    working, _ = record_expense(
        working,
        ExpenseInput(
            date=payment.date,
            category=SALARIES_CATEGORY,
            name=f"Salesman Payment - {salesman.name}",
            description=payment.notes,
            amount=payment.amount,
            payment_method=payment.payment_method,
            owner_id=salesman.id,
            owner_type=ExpenseOwnerType.SALESMAN,
        ),
    )
    return working, payment


def record_opening_balance(
    snapshot: LedgerSnapshot, on_date: date, cash: float, bank: float
) -> LedgerSnapshot:
    """Set the authoritative opening balance for a day, replacing any earlier one."""
    working = snapshot.working_copy()
    working.daily_opening_balances = [
        b for b in working.daily_opening_balances if b.date != on_date
    ]
    working.daily_opening_balances.append(
        DailyOpeningBalance(date=on_date, cash=cash, bank=bank)
    )
    return working


def close_period(
    snapshot: LedgerSnapshot, summary: PeriodSummary
) -> tuple[LedgerSnapshot, ClosingRecord]:
    """Freeze a period's figures. A period can only be closed once."""
    if any(r.period == summary.period for r in snapshot.closing_records):
        raise PeriodAlreadyClosedError(summary.period)

    working = snapshot.working_copy()
    record = ClosingRecord(
        id=working.next_id("closing_records"),
        period=summary.period,
        cash_revenue=summary.cash_revenue,
        bank_revenue=summary.bank_revenue,
        cash_expenses=summary.cash_expenses,
        bank_expenses=summary.bank_expenses,
        net_balance=summary.net_balance,
    )
    working.closing_records.append(record)
    return working, record


def low_stock_items(inventory: Iterable[InventoryItem]) -> list[InventoryItem]:
    """Items below their threshold, most depleted first."""
    return sorted(
        (i for i in inventory if i.is_low_stock),
        key=lambda i: i.stock - i.low_stock_threshold,
    )


def outstanding_customers(customers: Iterable[Customer]) -> list[Customer]:
    """Customers who owe money, largest balance first."""
    return sorted(
        (c for c in customers if c.has_outstanding_balance),
        key=lambda c: c.total_balance,
        reverse=True,
    )
