"""Sale domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class PaymentMethod(str, Enum):
    """How the collected part of a sale was settled."""

    CASH = "Cash"
    BANK = "Bank"
    PENDING = "Pending"


class PaymentCategory(str, Enum):
    """Revenue bucket a collection belongs to, by container size."""

    NINETEEN_LTR = "19Ltr Collection"
    SIX_LTR = "6Ltr Collection"


class SaleInput(BaseModel):
    """Sale values supplied by the caller on create or edit."""

    customer_id: int | None = None  # None => counter / walk-in sale
    salesman_id: int | None = None
    inventory_item_id: int | None = None  # None => payment-only or manual entry
    quantity: int = 0
    empties_collected: int = 0
    amount: float = 0.0  # total sale value
    amount_received: float = 0.0  # cash/bank actually collected now
    date: datetime = Field(default_factory=datetime.now)
    payment_method: PaymentMethod = PaymentMethod.PENDING
    description: str | None = None
    payment_for_category: PaymentCategory | None = None

    @property
    def unpaid_amount(self) -> float:
        """Amount added to the customer's balance by this sale."""
        return self.amount - self.amount_received

    @property
    def is_payment_only(self) -> bool:
        return self.inventory_item_id is None and self.quantity == 0 and self.amount == 0


class Sale(SaleInput):
    """A recorded sale."""

    id: int
