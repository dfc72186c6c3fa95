"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.
"""

from aqualedger.application.dto.requests import (
    AddInventoryItemRequest,
    AddSalesmanRequest,
    AdjustStockRequest,
    ClearBalanceRequest,
    ClosePeriodRequest,
    CollectEmptiesRequest,
    CreateCustomerRequest,
    DeliveryScheduleRequest,
    OpeningBalanceRequest,
    PaySalesmanRequest,
    ReconcileCashRequest,
    RecordExpenseRequest,
    RecordPaymentRequest,
    SaleRequest,
)
from aqualedger.application.dto.responses import (
    AdjustStockResponse,
    CashBankResponse,
    ClosingRecordResponse,
    CustomerListResponse,
    CustomerResponse,
    CustomerSummaryResponse,
    DeliveryScheduleResponse,
    ErrorResponse,
    ExpenseResponse,
    HealthResponse,
    InventoryItemResponse,
    InventoryListResponse,
    OpeningBalanceResponse,
    PaySalesmanResponse,
    PeriodSummaryResponse,
    ReconciliationResponse,
    SaleListResponse,
    SaleMutationResponse,
    SaleResponse,
    SalesmanPaymentResponse,
    SalesmanResponse,
    ScheduleDayResponse,
    StockAdjustmentResponse,
)

__all__ = [
    # Requests
    "AddInventoryItemRequest",
    "AddSalesmanRequest",
    "AdjustStockRequest",
    "ClearBalanceRequest",
    "ClosePeriodRequest",
    "CollectEmptiesRequest",
    "CreateCustomerRequest",
    "DeliveryScheduleRequest",
    "OpeningBalanceRequest",
    "PaySalesmanRequest",
    "ReconcileCashRequest",
    "RecordExpenseRequest",
    "RecordPaymentRequest",
    "SaleRequest",
    # Responses
    "AdjustStockResponse",
    "CashBankResponse",
    "ClosingRecordResponse",
    "CustomerListResponse",
    "CustomerResponse",
    "CustomerSummaryResponse",
    "DeliveryScheduleResponse",
    "ErrorResponse",
    "ExpenseResponse",
    "HealthResponse",
    "InventoryItemResponse",
    "InventoryListResponse",
    "OpeningBalanceResponse",
    "PaySalesmanResponse",
    "PeriodSummaryResponse",
    "ReconciliationResponse",
    "SaleListResponse",
    "SaleMutationResponse",
    "SaleResponse",
    "SalesmanPaymentResponse",
    "SalesmanResponse",
    "ScheduleDayResponse",
    "StockAdjustmentResponse",
]
