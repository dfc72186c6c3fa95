"""Cash and bank position entities."""

from datetime import date as date_type

from pydantic import BaseModel, Field, model_validator


class DailyOpeningBalance(BaseModel):
    """Authoritative opening figures for a calendar day."""

    date: date_type
    cash: float = 0.0
    bank: float = 0.0


class CashBankAmount(BaseModel):
    """A figure split by where the money sits."""

    cash: float = 0.0
    bank: float = 0.0
    total: float = 0.0

    @model_validator(mode="after")
    def compute_total(self) -> "CashBankAmount":
        """Compute total = cash + bank."""
        self.total = self.cash + self.bank
        return self

    def __add__(self, other: "CashBankAmount") -> "CashBankAmount":
        return CashBankAmount(cash=self.cash + other.cash, bank=self.bank + other.bank)

    def __sub__(self, other: "CashBankAmount") -> "CashBankAmount":
        return CashBankAmount(cash=self.cash - other.cash, bank=self.bank - other.bank)


class ReconciliationBreakdown(BaseModel):
    """Opening, revenue, expense and closing positions for one day."""

    date: date_type
    opening: CashBankAmount
    opening_recorded: bool = False  # True when taken from a DailyOpeningBalance
    collection_19l: CashBankAmount
    collection_6l: CashBankAmount
    counter_sale: CashBankAmount
    total_revenue: CashBankAmount
    total_expense: CashBankAmount
    salary_expense: CashBankAmount
    home_expense: CashBankAmount
    shop_expense: CashBankAmount
    expense_by_category: dict[str, CashBankAmount] = Field(default_factory=dict)
    closing: CashBankAmount

    def register_difference(self, cash: float, bank: float) -> CashBankAmount:
        """Closing position minus what was physically counted."""
        return self.closing - CashBankAmount(cash=cash, bank=bank)


class PeriodSummary(BaseModel):
    """Revenue and expenses for a closing period (YYYY-MM)."""

    period: str
    cash_revenue: float = 0.0
    bank_revenue: float = 0.0
    total_revenue: float = 0.0
    cash_expenses: float = 0.0
    bank_expenses: float = 0.0
    total_expenses: float = 0.0
    net_balance: float = 0.0

    @model_validator(mode="after")
    def compute_totals(self) -> "PeriodSummary":
        """Compute totals and net balance from the cash/bank figures."""
        self.total_revenue = self.cash_revenue + self.bank_revenue
        self.total_expenses = self.cash_expenses + self.bank_expenses
        self.net_balance = self.total_revenue - self.total_expenses
        return self


class ClosingRecord(BaseModel):
    """A period that has been closed; periods are closed at most once."""

    id: int
    period: str
    cash_revenue: float
    bank_revenue: float
    cash_expenses: float
    bank_expenses: float
    net_balance: float
