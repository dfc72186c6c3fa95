"""Tests for customer account summaries."""

from datetime import date, datetime

from aqualedger.core.entities import Customer, PaymentMethod, Sale
from aqualedger.core.services.customer_summary import build_customer_summary


def customer(**values) -> Customer:
    values.setdefault("total_balance", 500)
    values.setdefault("empty_bottles_held", 4)
    return Customer(id=1, name="Ahmed Khan", mobile="03001234567", **values)


class TestBuildCustomerSummary:
    def test_no_sales(self):
        summary = build_customer_summary(customer(), [])

        assert summary.date is None
        assert summary.total_sale_amount == 0
        assert summary.previous_balance == 500
        assert summary.closing_balance == 500
        assert summary.remaining_empties == 4
        assert summary.customer_mobile == "03001234567"

    def test_last_day_by_default(self):
        sales = [
            Sale(id=1, customer_id=1, quantity=2, amount=240, amount_received=240,
                 date=datetime(2025, 3, 8, 10), payment_method=PaymentMethod.CASH),
            Sale(id=2, customer_id=1, quantity=3, amount=360, amount_received=100,
                 date=datetime(2025, 3, 10, 9), payment_method=PaymentMethod.CASH),
            Sale(id=3, customer_id=1, amount=0, amount_received=50,
                 date=datetime(2025, 3, 10, 17), payment_method=PaymentMethod.CASH),
            Sale(id=4, customer_id=2, quantity=9, amount=999,
                 date=datetime(2025, 3, 11, 9)),
        ]

        summary = build_customer_summary(customer(), sales)

        assert summary.date == date(2025, 3, 10)
        assert summary.bottles_purchased == 3
        assert summary.total_sale_amount == 360
        assert summary.paid_amount == 150
        assert summary.unpaid_amount == 210
        assert summary.previous_balance == 290
        assert summary.closing_balance == 500

    def test_explicit_day(self):
        sales = [
            Sale(id=1, customer_id=1, inventory_item_id=1, quantity=2, amount=240,
                 amount_received=240, date=datetime(2025, 3, 8, 10),
                 payment_method=PaymentMethod.CASH),
            Sale(id=2, customer_id=1, inventory_item_id=1, quantity=3, amount=360,
                 date=datetime(2025, 3, 10, 9)),
        ]
        account = customer(total_balance=360, empty_bottles_held=5)

        summary = build_customer_summary(account, sales, date(2025, 3, 8), {1})

        assert summary.bottles_purchased == 2
        assert summary.unpaid_amount == 0
        assert summary.previous_balance == 0
        assert summary.closing_balance == 0
        assert summary.remaining_empties == 2

    def test_later_credit_rolled_back(self):
        sales = [
            Sale(id=1, customer_id=1, quantity=1, amount=120, date=datetime(2025, 3, 8, 10)),
            Sale(id=2, customer_id=1, quantity=3, amount=360, amount_received=60,
                 date=datetime(2025, 3, 10, 9), payment_method=PaymentMethod.CASH),
            Sale(id=3, customer_id=1, amount=0, amount_received=100,
                 date=datetime(2025, 3, 11, 9), payment_method=PaymentMethod.BANK),
        ]
        account = customer(total_balance=320, empty_bottles_held=4)

        summary = build_customer_summary(account, sales, date(2025, 3, 8))

        assert summary.previous_balance == 0
        assert summary.closing_balance == 120
        assert summary.remaining_empties == 4

    def test_day_without_activity(self):
        sales = [Sale(id=1, customer_id=1, quantity=2, amount=240,
                      date=datetime(2025, 3, 8, 10))]
        summary = build_customer_summary(customer(total_balance=240), sales, date(2025, 3, 1))
        assert summary.date == date(2025, 3, 1)
        assert summary.total_sale_amount == 0
        assert summary.previous_balance == 0
        assert summary.closing_balance == 0
