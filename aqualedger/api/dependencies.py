"""
Dependency injection container for FastAPI.

Provides the ledger store and use case instances to route handlers.
Tests swap these out through ``app.dependency_overrides``.
"""

from functools import lru_cache

from aqualedger.application.use_cases import (
    AddInventoryItemUseCase,
    AddSalesmanUseCase,
    AdjustStockUseCase,
    ClearBalanceUseCase,
    ClosePeriodUseCase,
    CollectEmptiesUseCase,
    CreateCustomerUseCase,
    CustomerSummaryUseCase,
    DeleteSaleUseCase,
    DeliveryScheduleUseCase,
    PaySalesmanUseCase,
    PeriodSummaryUseCase,
    ReconcileCashUseCase,
    RecordExpenseUseCase,
    RecordOpeningBalanceUseCase,
    RecordPaymentUseCase,
    RecordSaleUseCase,
    RemoveCustomerUseCase,
    UpdateSaleUseCase,
)
from aqualedger.config import Settings, get_settings
from aqualedger.core.interfaces.ledger_store import ILedgerStore
from aqualedger.infrastructure.storage.sqlite import get_ledger_store


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Store dependencies
async def get_store() -> ILedgerStore:
    """Get the ledger store for read-only listings."""
    return await get_ledger_store()


# Sales
def get_record_sale_use_case() -> RecordSaleUseCase:
    return RecordSaleUseCase()


def get_update_sale_use_case() -> UpdateSaleUseCase:
    return UpdateSaleUseCase()


def get_delete_sale_use_case() -> DeleteSaleUseCase:
    return DeleteSaleUseCase()


# Customers
def get_create_customer_use_case() -> CreateCustomerUseCase:
    return CreateCustomerUseCase()


def get_remove_customer_use_case() -> RemoveCustomerUseCase:
    return RemoveCustomerUseCase()


def get_record_payment_use_case() -> RecordPaymentUseCase:
    return RecordPaymentUseCase()


def get_clear_balance_use_case() -> ClearBalanceUseCase:
    return ClearBalanceUseCase()


def get_collect_empties_use_case() -> CollectEmptiesUseCase:
    return CollectEmptiesUseCase()


def get_customer_summary_use_case() -> CustomerSummaryUseCase:
    return CustomerSummaryUseCase()


# Catalog
def get_add_inventory_item_use_case() -> AddInventoryItemUseCase:
    return AddInventoryItemUseCase()


def get_add_salesman_use_case() -> AddSalesmanUseCase:
    return AddSalesmanUseCase()


def get_adjust_stock_use_case() -> AdjustStockUseCase:
    return AdjustStockUseCase()


# Expenses
def get_record_expense_use_case() -> RecordExpenseUseCase:
    return RecordExpenseUseCase()


def get_pay_salesman_use_case() -> PaySalesmanUseCase:
    return PaySalesmanUseCase()


# Cash
def get_record_opening_balance_use_case() -> RecordOpeningBalanceUseCase:
    return RecordOpeningBalanceUseCase()


def get_reconcile_cash_use_case() -> ReconcileCashUseCase:
    return ReconcileCashUseCase()


def get_period_summary_use_case() -> PeriodSummaryUseCase:
    return PeriodSummaryUseCase()


def get_close_period_use_case() -> ClosePeriodUseCase:
    return ClosePeriodUseCase()


# Schedule
def get_delivery_schedule_use_case() -> DeliveryScheduleUseCase:
    return DeliveryScheduleUseCase()
