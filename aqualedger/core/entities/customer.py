"""Customer domain entities."""

from datetime import datetime

from pydantic import BaseModel, Field


class CustomerInput(BaseModel):
    """Values used to register a new customer."""

    name: str
    mobile: str = ""
    address: str = ""
    area: str = ""
    salesman_id: int | None = None
    delivery_frequency_days: int = Field(default=0, ge=0)
    opening_balance: float = 0.0  # debt carried over from before the ledger
    empty_bottles_held: int = 0


class Customer(BaseModel):
    """A customer account with its derived ledgers."""

    id: int
    name: str
    mobile: str = ""
    address: str = ""
    area: str = ""
    salesman_id: int | None = None
    total_balance: float = 0.0  # owed by the customer
    total_bottles_purchased: int = 0
    delivery_frequency_days: int = 0  # 0 = on demand
    empty_bottles_held: int = 0
    last_empties_collection_date: datetime | None = None

    @property
    def has_outstanding_balance(self) -> bool:
        return self.total_balance > 0
