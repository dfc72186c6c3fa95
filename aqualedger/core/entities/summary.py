"""Customer summary handed to the outbound messaging collaborator."""

from datetime import date as date_type

from pydantic import BaseModel


class CustomerDailySummary(BaseModel):
    """One customer's activity on a day and the resulting account position."""

    customer_id: int
    customer_name: str
    customer_mobile: str = ""
    date: date_type | None = None  # None when the customer has no sales yet
    bottles_purchased: int = 0
    total_sale_amount: float = 0.0
    paid_amount: float = 0.0
    unpaid_amount: float = 0.0
    previous_balance: float = 0.0
    closing_balance: float = 0.0
    remaining_empties: int = 0
