"""Salesman domain entities."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from aqualedger.core.entities.expense import SettlementMethod


class SalesmanInput(BaseModel):
    name: str
    mobile: str = ""
    hire_date: date | None = None
    monthly_salary: float = 0.0


class Salesman(SalesmanInput):
    """A delivery salesman."""

    id: int


class SalesmanPaymentInput(BaseModel):
    """A payment made to a salesman (booked as a Salaries expense)."""

    salesman_id: int
    date: datetime = Field(default_factory=datetime.now)
    amount: float
    payment_method: SettlementMethod = SettlementMethod.CASH
    notes: str | None = None


class SalesmanPayment(SalesmanPaymentInput):
    id: int
