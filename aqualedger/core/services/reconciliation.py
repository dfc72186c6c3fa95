"""
Cash/Bank Reconciliation Aggregator.

Rebuilds a day's cash and bank positions from the full transaction history:
opening balance, revenue by collection stream, expenses and closing balance.
"""

from collections.abc import Iterable, Sequence
from datetime import date
from typing import Literal

from aqualedger.core.entities.cash import (
    CashBankAmount,
    DailyOpeningBalance,
    PeriodSummary,
    ReconciliationBreakdown,
)
from aqualedger.core.entities.expense import Expense
from aqualedger.core.entities.inventory import InventoryItem
from aqualedger.core.entities.sale import PaymentCategory, Sale
from aqualedger.core.services.payment_category import category_for_item

OpeningBasis = Literal["amount", "amount_received"]

SALARIES = "Salaries"
HOME = "Home"
SHOP = "Shop"


def _split(entries: Iterable[tuple[str, float]]) -> CashBankAmount:
    """Sum (method, value) pairs into cash and bank; other methods are ignored."""
    cash = 0.0
    bank = 0.0
    for method, value in entries:
        if method == "Cash":
            cash += value
        elif method == "Bank":
            bank += value
    return CashBankAmount(cash=cash, bank=bank)


def _sales_amount(sales: Iterable[Sale], basis: OpeningBasis = "amount_received") -> CashBankAmount:
    return _split((s.payment_method.value, getattr(s, basis)) for s in sales)


def _expense_amount(expenses: Iterable[Expense]) -> CashBankAmount:
    return _split((e.payment_method.value, e.amount) for e in expenses)


def collection_bucket(
    sale: Sale, items_by_id: dict[int, InventoryItem]
) -> PaymentCategory | None:
    """Container-size stream of a sale: by its item's name, else by its explicit tag."""
    if sale.inventory_item_id is not None:
        category = category_for_item(items_by_id.get(sale.inventory_item_id))
        if category is not None:
            return category
    return sale.payment_for_category


def is_counter_sale(sale: Sale, items_by_id: dict[int, InventoryItem]) -> bool:
    """
    Whether a sale belongs to the counter/other stream.

    Walk-in sales and sales of items outside the container streams qualify.
    Untagged payment-only entries from customers belong to no stream.
    """
    if collection_bucket(sale, items_by_id) is not None:
        return False
    return sale.customer_id is None or sale.inventory_item_id is not None


def opening_position(
    on_date: date,
    sales: Sequence[Sale],
    expenses: Sequence[Expense],
    opening_balances: Iterable[DailyOpeningBalance],
    opening_basis: OpeningBasis = "amount",
) -> tuple[CashBankAmount, bool]:
    """
    Opening cash and bank for a day and whether it came from a recorded balance.

    Without a recorded balance the opening is every earlier sale (by
    ``opening_basis``) minus every earlier expense, per payment method.
    """
    recorded = next((b for b in opening_balances if b.date == on_date), None)
    if recorded is not None:
        return CashBankAmount(cash=recorded.cash, bank=recorded.bank), True

    prior_sales = [s for s in sales if s.date.date() < on_date]
    prior_expenses = [e for e in expenses if e.date.date() < on_date]
    opening = _sales_amount(prior_sales, opening_basis) - _expense_amount(prior_expenses)
    return opening, False


def reconcile(
    on_date: date,
    sales: Sequence[Sale],
    expenses: Sequence[Expense],
    inventory: Iterable[InventoryItem],
    opening_balances: Iterable[DailyOpeningBalance],
    opening_basis: OpeningBasis = "amount",
) -> ReconciliationBreakdown:
    """
    Build the cash/bank reconciliation for one calendar day.

    Args:
        on_date: Day to reconcile.
        sales: Full sales history.
        expenses: Full expense history.
        inventory: Inventory items, used to bucket sales by container size.
        opening_balances: Recorded opening balances.
        opening_basis: Sale field summed for a computed opening balance.

    Returns:
        Breakdown with opening, revenue streams, expenses and closing.
    """
    items_by_id = {item.id: item for item in inventory}
    opening, recorded = opening_position(
        on_date, sales, expenses, opening_balances, opening_basis
    )

    day_sales = [s for s in sales if s.date.date() == on_date]
    day_expenses = [e for e in expenses if e.date.date() == on_date]

    collection_19l = _sales_amount(
        s for s in day_sales
        if collection_bucket(s, items_by_id) == PaymentCategory.NINETEEN_LTR
    )
    collection_6l = _sales_amount(
        s for s in day_sales
        if collection_bucket(s, items_by_id) == PaymentCategory.SIX_LTR
    )
    counter_sale = _sales_amount(s for s in day_sales if is_counter_sale(s, items_by_id))
    total_revenue = collection_19l + collection_6l + counter_sale

    by_category: dict[str, list[Expense]] = {}
    for expense in day_expenses:
        by_category.setdefault(expense.category, []).append(expense)
    expense_by_category = {
        category: _expense_amount(items) for category, items in by_category.items()
    }
    total_expense = _expense_amount(day_expenses)

    closing = opening + total_revenue - total_expense

    return ReconciliationBreakdown(
        date=on_date,
        opening=opening,
        opening_recorded=recorded,
        collection_19l=collection_19l,
        collection_6l=collection_6l,
        counter_sale=counter_sale,
        total_revenue=total_revenue,
        total_expense=total_expense,
        salary_expense=expense_by_category.get(SALARIES, CashBankAmount()),
        home_expense=expense_by_category.get(HOME, CashBankAmount()),
        shop_expense=expense_by_category.get(SHOP, CashBankAmount()),
        expense_by_category=expense_by_category,
        closing=closing,
    )


def summarize_period(
    period: str, sales: Iterable[Sale], expenses: Iterable[Expense]
) -> PeriodSummary:
    """Revenue collected and expenses paid in a ``YYYY-MM`` period."""
    period_sales = [s for s in sales if s.date.strftime("%Y-%m") == period]
    period_expenses = [e for e in expenses if e.date.strftime("%Y-%m") == period]

    revenue = _sales_amount(period_sales)
    spent = _expense_amount(period_expenses)

    return PeriodSummary(
        period=period,
        cash_revenue=revenue.cash,
        bank_revenue=revenue.bank,
        cash_expenses=spent.cash,
        bank_expenses=spent.bank,
    )
