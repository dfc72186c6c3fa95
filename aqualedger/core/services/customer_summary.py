"""Customer account summaries for the outbound messaging collaborator."""

from collections.abc import Collection, Iterable
from datetime import date

from aqualedger.core.entities.customer import Customer
from aqualedger.core.entities.sale import Sale
from aqualedger.core.entities.summary import CustomerDailySummary


def build_customer_summary(
    customer: Customer,
    sales: Iterable[Sale],
    on_date: date | None = None,
    container_item_ids: Collection[int] = (),
) -> CustomerDailySummary:
    """
    Summarize a customer's activity on a day.

    Without ``on_date`` the customer's last transaction day is used. For an
    earlier day the current balance and empties are rolled back by the sales
    dated after it, so the closing figures are the account as that day ended.
    Empties only move for sales of ``container_item_ids``.
    """
    customer_sales = [s for s in sales if s.customer_id == customer.id]
    if not customer_sales:
        return CustomerDailySummary(
            customer_id=customer.id,
            customer_name=customer.name,
            customer_mobile=customer.mobile,
            previous_balance=customer.total_balance,
            closing_balance=customer.total_balance,
            remaining_empties=customer.empty_bottles_held,
        )

    if on_date is None:
        on_date = max(s.date for s in customer_sales).date()

    day_sales = [s for s in customer_sales if s.date.date() == on_date]
    later_sales = [s for s in customer_sales if s.date.date() > on_date]

    total_sale_amount = sum(s.amount for s in day_sales)
    paid_amount = sum(s.amount_received for s in day_sales)
    unpaid_amount = total_sale_amount - paid_amount

    closing_balance = customer.total_balance - sum(s.unpaid_amount for s in later_sales)
    remaining_empties = customer.empty_bottles_held - sum(
        s.quantity - s.empties_collected
        for s in later_sales
        if s.inventory_item_id in container_item_ids
    )

    return CustomerDailySummary(
        customer_id=customer.id,
        customer_name=customer.name,
        customer_mobile=customer.mobile,
        date=on_date,
        bottles_purchased=sum(s.quantity for s in day_sales),
        total_sale_amount=total_sale_amount,
        paid_amount=paid_amount,
        unpaid_amount=unpaid_amount,
        previous_balance=closing_balance - unpaid_amount,
        closing_balance=closing_balance,
        remaining_empties=remaining_empties,
    )
