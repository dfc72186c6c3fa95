"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization. Entity-backed responses
are built with ``model_validate(entity)``.
"""

from datetime import date as date_type
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from aqualedger.core.entities.expense import ExpenseOwnerType, SettlementMethod
from aqualedger.core.entities.sale import PaymentCategory, PaymentMethod


# --- Catalog ---


class CustomerResponse(BaseModel):
    """A customer account with its derived ledgers."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    mobile: str
    address: str
    area: str
    salesman_id: int | None = None
    total_balance: float = Field(..., description="Amount the customer owes")
    total_bottles_purchased: int
    delivery_frequency_days: int = Field(..., description="0 means on demand")
    empty_bottles_held: int = Field(..., description="Empty containers at the customer")
    last_empties_collection_date: datetime | None = None


class CustomerListResponse(BaseModel):
    customers: list[CustomerResponse]
    total: int
    total_outstanding: float = Field(..., description="Sum of positive balances")


class SalesmanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    mobile: str
    hire_date: date_type | None = None
    monthly_salary: float


class InventoryItemResponse(BaseModel):
    """A stocked product."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    stock: int = Field(..., description="Units on hand; may be negative")
    unit: str
    low_stock_threshold: int
    selling_price: float
    is_low_stock: bool = False


class InventoryListResponse(BaseModel):
    items: list[InventoryItemResponse]
    total: int


class StockAdjustmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    inventory_item_id: int
    date: datetime
    quantity: int
    reason: str
    new_stock_level: int


class AdjustStockResponse(BaseModel):
    item: InventoryItemResponse
    adjustment: StockAdjustmentResponse


# --- Sales ---


class SaleResponse(BaseModel):
    """A recorded sale."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_id: int | None = None
    salesman_id: int | None = None
    inventory_item_id: int | None = None
    quantity: int
    empties_collected: int
    amount: float
    amount_received: float
    unpaid_amount: float
    date: datetime
    payment_method: PaymentMethod
    description: str | None = None
    payment_for_category: PaymentCategory | None = Field(
        default=None,
        description="Collection bucket assigned to the received amount",
    )


class SaleMutationResponse(BaseModel):
    """A sale change with the ledgers it touched, as they stand afterwards."""

    sale: SaleResponse | None = Field(default=None, description="None after a delete")
    customer: CustomerResponse | None = None
    inventory_item: InventoryItemResponse | None = None


class SaleListResponse(BaseModel):
    sales: list[SaleResponse]
    total: int
    total_amount: float
    total_received: float


# --- Expenses ---


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: datetime
    category: str
    name: str
    description: str | None = None
    amount: float
    payment_method: SettlementMethod
    owner_id: int | None = None
    owner_type: ExpenseOwnerType | None = None


class SalesmanPaymentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    salesman_id: int
    date: datetime
    amount: float
    payment_method: SettlementMethod
    notes: str | None = None


class PaySalesmanResponse(BaseModel):
    payment: SalesmanPaymentResponse
    expense: ExpenseResponse = Field(..., description="Salaries expense booked for the payment")


# --- Cash ---


class CashBankResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    cash: float
    bank: float
    total: float


class ReconciliationResponse(BaseModel):
    """Cash and bank positions for one day."""

    model_config = ConfigDict(from_attributes=True)

    date: date_type
    opening: CashBankResponse
    opening_recorded: bool = Field(
        ...,
        description="True when the opening came from a recorded balance",
    )
    collection_19l: CashBankResponse
    collection_6l: CashBankResponse
    counter_sale: CashBankResponse
    total_revenue: CashBankResponse
    total_expense: CashBankResponse
    salary_expense: CashBankResponse
    home_expense: CashBankResponse
    shop_expense: CashBankResponse
    expense_by_category: dict[str, CashBankResponse] = Field(default_factory=dict)
    closing: CashBankResponse
    register_difference: CashBankResponse | None = Field(
        default=None,
        description="Closing minus counted amounts, when counts were given",
    )


class OpeningBalanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: date_type
    cash: float
    bank: float


class PeriodSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    period: str
    cash_revenue: float
    bank_revenue: float
    total_revenue: float
    cash_expenses: float
    bank_expenses: float
    total_expenses: float
    net_balance: float
    closed: bool = False


class ClosingRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    period: str
    cash_revenue: float
    bank_revenue: float
    cash_expenses: float
    bank_expenses: float
    net_balance: float


# --- Schedule and summaries ---


class ScheduleDayResponse(BaseModel):
    date: date_type
    customers: list[CustomerResponse]
    by_area: dict[str, list[int]] = Field(
        default_factory=dict,
        description="Customer IDs grouped by delivery area",
    )


class DeliveryScheduleResponse(BaseModel):
    start: date_type
    days: list[ScheduleDayResponse]


class CustomerSummaryResponse(BaseModel):
    """Account summary handed to the outbound messaging collaborator."""

    model_config = ConfigDict(from_attributes=True)

    customer_id: int
    customer_name: str
    customer_mobile: str
    date: date_type | None = None
    bottles_purchased: int
    total_sale_amount: float
    paid_amount: float
    unpaid_amount: float
    previous_balance: float
    closing_balance: float
    remaining_empties: int
    currency: str = "PKR"


# --- System ---


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. CUSTOMER_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
