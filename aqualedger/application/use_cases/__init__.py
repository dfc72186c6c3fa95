"""Application use cases."""

from aqualedger.application.use_cases.add_inventory_item import AddInventoryItemUseCase
from aqualedger.application.use_cases.add_salesman import AddSalesmanUseCase
from aqualedger.application.use_cases.adjust_stock import AdjustStockResult, AdjustStockUseCase
from aqualedger.application.use_cases.close_period import (
    ClosePeriodUseCase,
    PeriodSummaryResult,
    PeriodSummaryUseCase,
)
from aqualedger.application.use_cases.collect_empties import CollectEmptiesUseCase
from aqualedger.application.use_cases.create_customer import CreateCustomerUseCase
from aqualedger.application.use_cases.customer_summary import CustomerSummaryUseCase
from aqualedger.application.use_cases.delete_sale import DeleteSaleUseCase
from aqualedger.application.use_cases.delivery_schedule import DeliveryScheduleUseCase
from aqualedger.application.use_cases.pay_salesman import PaySalesmanResult, PaySalesmanUseCase
from aqualedger.application.use_cases.reconcile_cash import (
    ReconcileCashResult,
    ReconcileCashUseCase,
)
from aqualedger.application.use_cases.record_expense import RecordExpenseUseCase
from aqualedger.application.use_cases.record_opening_balance import RecordOpeningBalanceUseCase
from aqualedger.application.use_cases.record_payment import (
    ClearBalanceUseCase,
    RecordPaymentUseCase,
)
from aqualedger.application.use_cases.record_sale import RecordSaleUseCase, SaleMutationResult
from aqualedger.application.use_cases.remove_customer import RemoveCustomerUseCase
from aqualedger.application.use_cases.update_sale import UpdateSaleUseCase

__all__ = [
    # Sales
    "RecordSaleUseCase",
    "UpdateSaleUseCase",
    "DeleteSaleUseCase",
    "SaleMutationResult",
    # Customers
    "CreateCustomerUseCase",
    "RemoveCustomerUseCase",
    "RecordPaymentUseCase",
    "ClearBalanceUseCase",
    "CollectEmptiesUseCase",
    "CustomerSummaryUseCase",
    # Catalog
    "AddInventoryItemUseCase",
    "AddSalesmanUseCase",
    "AdjustStockUseCase",
    "AdjustStockResult",
    # Expenses
    "RecordExpenseUseCase",
    "PaySalesmanUseCase",
    "PaySalesmanResult",
    # Cash
    "RecordOpeningBalanceUseCase",
    "ReconcileCashUseCase",
    "ReconcileCashResult",
    "PeriodSummaryUseCase",
    "PeriodSummaryResult",
    "ClosePeriodUseCase",
    # Schedule
    "DeliveryScheduleUseCase",
]
