"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
The transaction engine trusts its inputs, so caller-side checks
(non-negative amounts, positive quantities) live here.
"""

from datetime import date as date_type
from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from aqualedger.core.entities.expense import ExpenseOwnerType, SettlementMethod
from aqualedger.core.entities.sale import PaymentCategory, PaymentMethod, SaleInput

PERIOD_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


# --- Catalog ---


class CreateCustomerRequest(BaseModel):
    """Request to register a customer."""

    name: str = Field(..., min_length=1, description="Customer name")
    mobile: str = Field(default="", description="Mobile number for account messages")
    address: str = Field(default="", description="Delivery address")
    area: str = Field(default="", description="Delivery area used for route grouping")
    salesman_id: int | None = Field(default=None, description="Assigned salesman")
    delivery_frequency_days: int = Field(
        default=0,
        ge=0,
        description="Days between deliveries; 0 means on demand",
        examples=[0, 2, 7],
    )
    opening_balance: float = Field(
        default=0.0,
        ge=0,
        description="Debt carried over from before the ledger",
    )
    empty_bottles_held: int = Field(
        default=0,
        ge=0,
        description="Empty containers already at the customer",
    )


class AddSalesmanRequest(BaseModel):
    """Request to register a salesman."""

    name: str = Field(..., min_length=1, description="Salesman name")
    mobile: str = Field(default="", description="Mobile number")
    hire_date: date_type | None = Field(default=None, description="Hire date")
    monthly_salary: float = Field(default=0.0, ge=0, description="Monthly salary")


class AddInventoryItemRequest(BaseModel):
    """Request to add a product to the catalog."""

    name: str = Field(
        ...,
        min_length=1,
        description="Item name; 19/6 litre sizes in the name drive collection buckets",
        examples=["19 Ltr Bottle", "6 Liter Bottle", "Dispenser"],
    )
    category: str = Field(
        default="",
        description="Item category; container categories track returnable empties",
        examples=["Water Bottle", "Accessories"],
    )
    stock: int = Field(default=0, description="Opening stock")
    unit: str = Field(default="pcs", description="Unit of measure")
    low_stock_threshold: int = Field(default=0, ge=0, description="Low-stock alert level")
    selling_price: float = Field(default=0.0, ge=0, description="Default selling price")


# --- Sales ---


class SaleRequest(BaseModel):
    """Request to record or edit a sale.

    A sale with an item needs a positive quantity. A sale without an item
    is a manual entry or a payment against the customer's balance.
    """

    customer_id: int | None = Field(
        default=None,
        description="Customer ID; omit for a counter (walk-in) sale",
    )
    salesman_id: int | None = Field(default=None, description="Delivering salesman")
    inventory_item_id: int | None = Field(default=None, description="Item sold")
    quantity: int = Field(default=0, ge=0, description="Units sold")
    empties_collected: int = Field(default=0, ge=0, description="Empty containers taken back")
    amount: float = Field(default=0.0, ge=0, description="Total sale value")
    amount_received: float = Field(default=0.0, ge=0, description="Amount collected now")
    date: datetime | None = Field(default=None, description="Sale time (defaults to now)")
    payment_method: PaymentMethod = Field(
        default=PaymentMethod.PENDING,
        description="How the collected amount was settled",
    )
    description: str | None = Field(default=None, description="Free-text note")
    payment_for_category: PaymentCategory | None = Field(
        default=None,
        description="Collection bucket for payments without an item",
    )

    @model_validator(mode="after")
    def check_item_quantity(self) -> "SaleRequest":
        if self.inventory_item_id is not None and self.quantity <= 0:
            raise ValueError("quantity must be positive when an item is sold")
        return self

    def to_sale_input(self) -> SaleInput:
        values = self.model_dump(exclude={"date"})
        return SaleInput(date=self.date or datetime.now(), **values)


# --- Customer account ---


class RecordPaymentRequest(BaseModel):
    """Request to record money received against a customer's balance."""

    amount: float = Field(..., gt=0, description="Amount received")
    payment_method: SettlementMethod = Field(
        default=SettlementMethod.CASH,
        description="Cash or Bank",
    )
    date: datetime | None = Field(default=None, description="Payment time (defaults to now)")
    payment_for_category: PaymentCategory | None = Field(
        default=None,
        description="Collection bucket this payment belongs to",
    )


class ClearBalanceRequest(BaseModel):
    """Request to settle a customer's whole outstanding balance."""

    payment_method: SettlementMethod = Field(default=SettlementMethod.CASH)
    date: datetime | None = Field(default=None)


class CollectEmptiesRequest(BaseModel):
    """Request to take empty containers back outside of a sale."""

    bottles: int = Field(..., gt=0, description="Empty containers collected")
    date: datetime | None = Field(default=None, description="Collection time")


# --- Inventory ---


class AdjustStockRequest(BaseModel):
    """Request to correct an item's stock."""

    adjustment: int = Field(..., description="Signed stock change", examples=[10, -3])
    reason: str = Field(default="", description="Why the stock was corrected")
    date: datetime | None = Field(default=None)

    @model_validator(mode="after")
    def check_nonzero(self) -> "AdjustStockRequest":
        if self.adjustment == 0:
            raise ValueError("adjustment must not be zero")
        return self


# --- Expenses ---


class RecordExpenseRequest(BaseModel):
    """Request to record an expense."""

    category: str = Field(
        ...,
        min_length=1,
        description="Expense category",
        examples=["Salaries", "Home", "Shop", "Fuel"],
    )
    name: str = Field(..., min_length=1, description="Short expense title")
    description: str | None = Field(default=None)
    amount: float = Field(..., gt=0, description="Amount paid")
    payment_method: SettlementMethod = Field(default=SettlementMethod.CASH)
    date: datetime | None = Field(default=None, description="Expense time (defaults to now)")
    owner_id: int | None = Field(default=None, description="Salesman or owner ID")
    owner_type: ExpenseOwnerType | None = Field(default=None)


class PaySalesmanRequest(BaseModel):
    """Request to pay a salesman."""

    salesman_id: int = Field(..., description="Salesman ID")
    amount: float = Field(..., gt=0, description="Amount paid")
    payment_method: SettlementMethod = Field(default=SettlementMethod.CASH)
    date: datetime | None = Field(default=None)
    notes: str | None = Field(default=None)


# --- Cash ---


class OpeningBalanceRequest(BaseModel):
    """Request to set a day's opening cash and bank."""

    date: date_type = Field(..., description="Day the balance opens")
    cash: float = Field(default=0.0, description="Opening cash in hand")
    bank: float = Field(default=0.0, description="Opening bank balance")


class ReconcileCashRequest(BaseModel):
    """Request for a day's cash/bank reconciliation."""

    date: date_type = Field(..., description="Day to reconcile")
    counted_cash: float | None = Field(
        default=None,
        description="Cash counted in the register; enables the difference figure",
    )
    counted_bank: float | None = Field(default=None, description="Bank balance observed")


class ClosePeriodRequest(BaseModel):
    """Request to close a month."""

    period: str = Field(
        ...,
        pattern=PERIOD_PATTERN,
        description="Month to close",
        examples=["2025-01"],
    )


# --- Schedule ---


class DeliveryScheduleRequest(BaseModel):
    """Request for the rolling delivery schedule."""

    start: date_type | None = Field(default=None, description="First day (defaults to today)")
    days: int | None = Field(
        default=None,
        ge=1,
        le=31,
        description="Days to schedule (defaults to the configured window)",
    )
    area: str | None = Field(default=None, description="Only customers in this area")
