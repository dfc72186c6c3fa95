"""Tests for the cash/bank reconciliation aggregator."""

from datetime import date, datetime

import pytest

from aqualedger.core.entities import (
    DailyOpeningBalance,
    Expense,
    InventoryItem,
    PaymentCategory,
    PaymentMethod,
    Sale,
    SettlementMethod,
)
from aqualedger.core.services.reconciliation import (
    collection_bucket,
    is_counter_sale,
    opening_position,
    reconcile,
    summarize_period,
)

DAY = date(2025, 3, 10)
MORNING = datetime(2025, 3, 10, 9, 0)
YESTERDAY = datetime(2025, 3, 9, 18, 0)

INVENTORY = [
    InventoryItem(id=1, name="19 Ltr Bottle", category="Water Bottle"),
    InventoryItem(id=2, name="6 Liter Bottle", category="Water Bottle"),
    InventoryItem(id=3, name="Dispenser", category="Accessories"),
]
ITEMS_BY_ID = {i.id: i for i in INVENTORY}


def sale(sale_id: int, **values) -> Sale:
    values.setdefault("date", MORNING)
    return Sale(id=sale_id, **values)


def expense(expense_id: int, category: str, amount: float, **values) -> Expense:
    values.setdefault("date", MORNING)
    return Expense(id=expense_id, category=category, name=category, amount=amount, **values)


class TestBuckets:
    def test_item_name_decides(self):
        s = sale(1, customer_id=1, inventory_item_id=2, amount_received=60)
        assert collection_bucket(s, ITEMS_BY_ID) == PaymentCategory.SIX_LTR

    def test_tag_used_without_item(self):
        s = sale(1, customer_id=1, amount_received=500,
                 payment_for_category=PaymentCategory.NINETEEN_LTR)
        assert collection_bucket(s, ITEMS_BY_ID) == PaymentCategory.NINETEEN_LTR

    def test_counter_walk_in(self):
        s = sale(1, inventory_item_id=3, amount_received=4500)
        assert is_counter_sale(s, ITEMS_BY_ID)

    def test_counter_other_item(self):
        s = sale(1, customer_id=1, inventory_item_id=3, amount_received=4500)
        assert is_counter_sale(s, ITEMS_BY_ID)

    def test_walk_in_bottle_not_counter(self):
        s = sale(1, inventory_item_id=1, amount_received=120)
        assert not is_counter_sale(s, ITEMS_BY_ID)
        assert collection_bucket(s, ITEMS_BY_ID) == PaymentCategory.NINETEEN_LTR

    def test_untagged_customer_payment_in_no_stream(self):
        s = sale(1, customer_id=1, amount_received=500)
        assert collection_bucket(s, ITEMS_BY_ID) is None
        assert not is_counter_sale(s, ITEMS_BY_ID)


class TestOpeningPosition:
    def test_recorded_balance_wins(self):
        sales = [sale(1, amount=1000, amount_received=1000, date=YESTERDAY,
                      payment_method=PaymentMethod.CASH)]
        balances = [DailyOpeningBalance(date=DAY, cash=250, bank=750)]

        opening, recorded = opening_position(DAY, sales, [], balances)

        assert recorded
        assert (opening.cash, opening.bank) == (250, 750)

    def test_computed_from_history(self):
        sales = [
            sale(1, amount=300, amount_received=300, date=YESTERDAY,
                 payment_method=PaymentMethod.CASH),
            sale(2, amount=200, amount_received=200, date=YESTERDAY,
                 payment_method=PaymentMethod.BANK),
            sale(3, amount=999, amount_received=999, payment_method=PaymentMethod.CASH),
        ]
        expenses = [
            expense(1, "Shop", 50, date=YESTERDAY),
            expense(2, "Home", 20, date=YESTERDAY, payment_method=SettlementMethod.BANK),
        ]

        opening, recorded = opening_position(DAY, sales, expenses, [])

        assert not recorded
        assert opening.cash == 250
        assert opening.bank == 180

    def test_pending_sales_ignored(self):
        sales = [sale(1, customer_id=1, amount=360, date=YESTERDAY)]
        opening, _ = opening_position(DAY, sales, [], [])
        assert opening.total == 0

    def test_amount_basis_counts_billed_amount(self):
        """Part-paid cash sales count in full on the default basis."""
        sales = [sale(1, customer_id=1, amount=360, amount_received=100, date=YESTERDAY,
                      payment_method=PaymentMethod.CASH)]
        opening, _ = opening_position(DAY, sales, [], [])
        assert opening.cash == 360

    def test_amount_received_basis(self):
        sales = [sale(1, customer_id=1, amount=360, amount_received=100, date=YESTERDAY,
                      payment_method=PaymentMethod.CASH)]
        opening, _ = opening_position(DAY, sales, [], [], opening_basis="amount_received")
        assert opening.cash == 100


class TestReconcile:
    def test_cash_sale_and_shop_expense(self):
        """One cash 19L sale of 120 and a 50 cash shop expense from a zero opening."""
        sales = [sale(1, customer_id=1, inventory_item_id=1, quantity=1, amount=120,
                      amount_received=120, payment_method=PaymentMethod.CASH)]
        expenses = [expense(1, "Shop", 50)]

        result = reconcile(DAY, sales, expenses, INVENTORY, [])

        assert result.opening.total == 0
        assert result.collection_19l.cash == 120
        assert result.shop_expense.cash == 50
        assert result.closing.cash == 70
        assert result.closing.bank == 0

    def test_streams(self):
        sales = [
            sale(1, customer_id=1, inventory_item_id=1, amount=240, amount_received=240,
                 payment_method=PaymentMethod.CASH),
            sale(2, customer_id=1, inventory_item_id=2, amount=60, amount_received=60,
                 payment_method=PaymentMethod.BANK),
            sale(3, inventory_item_id=3, amount=4500, amount_received=4500,
                 payment_method=PaymentMethod.CASH),
            sale(4, customer_id=1, amount_received=300, payment_method=PaymentMethod.BANK,
                 payment_for_category=PaymentCategory.NINETEEN_LTR),
            sale(5, customer_id=1, inventory_item_id=1, amount=120),
        ]

        result = reconcile(DAY, sales, [], INVENTORY, [])

        assert (result.collection_19l.cash, result.collection_19l.bank) == (240, 300)
        assert (result.collection_6l.cash, result.collection_6l.bank) == (0, 60)
        assert (result.counter_sale.cash, result.counter_sale.bank) == (4500, 0)
        assert result.total_revenue.total == 5100
        assert result.closing.total == 5100

    def test_day_revenue_counts_received_not_billed(self):
        sales = [sale(1, customer_id=1, inventory_item_id=1, amount=360, amount_received=100,
                      payment_method=PaymentMethod.CASH)]
        result = reconcile(DAY, sales, [], INVENTORY, [])
        assert result.collection_19l.cash == 100

    def test_expense_buckets(self):
        expenses = [
            expense(1, "Salaries", 1000, payment_method=SettlementMethod.BANK),
            expense(2, "Home", 200),
            expense(3, "Shop", 50),
            expense(4, "Fuel", 300),
        ]

        result = reconcile(DAY, [], expenses, INVENTORY, [])

        assert result.salary_expense.bank == 1000
        assert result.home_expense.cash == 200
        assert result.shop_expense.cash == 50
        assert result.expense_by_category["Fuel"].cash == 300
        assert (result.total_expense.cash, result.total_expense.bank) == (550, 1000)
        assert result.closing.cash == -550
        assert result.closing.bank == -1000

    def test_other_days_excluded(self):
        sales = [sale(1, inventory_item_id=1, amount_received=120, amount=120,
                      date=datetime(2025, 3, 11, 9), payment_method=PaymentMethod.CASH)]
        result = reconcile(DAY, sales, [], INVENTORY, [])
        assert result.total_revenue.total == 0
        assert result.opening.total == 0

    def test_recorded_opening_carried_to_closing(self):
        balances = [DailyOpeningBalance(date=DAY, cash=500, bank=1000)]
        result = reconcile(DAY, [], [expense(1, "Shop", 100)], INVENTORY, balances)

        assert result.opening_recorded
        assert result.closing.cash == 400
        assert result.closing.bank == 1000

    def test_closing_identity(self):
        sales = [
            sale(1, amount=500, amount_received=500, date=YESTERDAY,
                 payment_method=PaymentMethod.CASH),
            sale(2, inventory_item_id=2, amount=60, amount_received=60,
                 payment_method=PaymentMethod.BANK),
        ]
        expenses = [expense(1, "Home", 30)]

        result = reconcile(DAY, sales, expenses, INVENTORY, [])

        expected = result.opening + result.total_revenue - result.total_expense
        assert result.closing == expected


class TestSummarizePeriod:
    def test_month(self):
        sales = [
            sale(1, amount=100, amount_received=100, payment_method=PaymentMethod.CASH),
            sale(2, amount=200, amount_received=200, payment_method=PaymentMethod.BANK),
            sale(3, amount=999, amount_received=999, payment_method=PaymentMethod.CASH,
                 date=datetime(2025, 4, 1)),
            sale(4, amount=360, payment_method=PaymentMethod.PENDING),
        ]
        expenses = [expense(1, "Shop", 40), expense(2, "Fuel", 10, date=datetime(2025, 2, 28))]

        summary = summarize_period("2025-03", sales, expenses)

        assert summary.cash_revenue == 100
        assert summary.bank_revenue == 200
        assert summary.cash_expenses == 40
        assert summary.net_balance == pytest.approx(260)
