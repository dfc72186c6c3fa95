"""Expense domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class SettlementMethod(str, Enum):
    """Where money left from."""

    CASH = "Cash"
    BANK = "Bank"


class ExpenseOwnerType(str, Enum):
    SALESMAN = "salesman"
    OWNER = "owner"


class ExpenseInput(BaseModel):
    """Values for a new expense."""

    date: datetime = Field(default_factory=datetime.now)
    category: str
    name: str
    description: str | None = None
    amount: float
    payment_method: SettlementMethod = SettlementMethod.CASH
    owner_id: int | None = None
    owner_type: ExpenseOwnerType | None = None


class Expense(ExpenseInput):
    """A recorded expense."""

    id: int
