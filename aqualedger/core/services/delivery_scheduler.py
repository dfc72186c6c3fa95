"""Delivery-due scheduling from delivery frequency and sale history."""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from aqualedger.core.entities.customer import Customer
from aqualedger.core.entities.sale import Sale

UNASSIGNED_AREA = "Unassigned Area"


def is_due_on(on_date: date, customer: Customer, sales: Iterable[Sale]) -> bool:
    """
    Whether a delivery to the customer is due on a calendar day.

    On-demand customers (frequency 0) are never due. A customer who has never
    been served is always due. Otherwise the customer is due once at least
    ``delivery_frequency_days`` calendar days have passed since the latest sale.
    """
    if customer.delivery_frequency_days <= 0:
        return False

    last_sale = max(
        (s.date for s in sales if s.customer_id == customer.id),
        default=None,
    )
    if last_sale is None:
        return True

    day_difference = (on_date - last_sale.date()).days
    return day_difference >= customer.delivery_frequency_days


def is_due_today(customer: Customer, sales: Iterable[Sale]) -> bool:
    return is_due_on(date.today(), customer, sales)


def due_customers(
    on_date: date, customers: Iterable[Customer], sales: Sequence[Sale]
) -> list[Customer]:
    """Customers due for a delivery on ``on_date``."""
    return [c for c in customers if is_due_on(on_date, c, sales)]


def weekly_schedule(
    start: date,
    customers: Sequence[Customer],
    sales: Sequence[Sale],
    days: int = 7,
) -> dict[date, list[Customer]]:
    """Rolling schedule: due customers for each day from ``start``."""
    schedule: dict[date, list[Customer]] = {}
    for offset in range(days):
        day = start + timedelta(days=offset)
        schedule[day] = due_customers(day, customers, sales)
    return schedule


def group_by_area(customers: Iterable[Customer]) -> dict[str, list[Customer]]:
    """Group customers by delivery area for route planning."""
    grouped: dict[str, list[Customer]] = {}
    for customer in customers:
        area = customer.area.strip() or UNASSIGNED_AREA
        grouped.setdefault(area, []).append(customer)
    return grouped
