"""Fixtures for API tests: the app wired to an in-memory ledger."""

import pytest
from httpx import ASGITransport, AsyncClient

from aqualedger.api import dependencies as deps
from aqualedger.api.main import app
from aqualedger.application import use_cases as uc

USE_CASE_FACTORIES = {
    deps.get_record_sale_use_case: uc.RecordSaleUseCase,
    deps.get_update_sale_use_case: uc.UpdateSaleUseCase,
    deps.get_delete_sale_use_case: uc.DeleteSaleUseCase,
    deps.get_create_customer_use_case: uc.CreateCustomerUseCase,
    deps.get_remove_customer_use_case: uc.RemoveCustomerUseCase,
    deps.get_record_payment_use_case: uc.RecordPaymentUseCase,
    deps.get_clear_balance_use_case: uc.ClearBalanceUseCase,
    deps.get_collect_empties_use_case: uc.CollectEmptiesUseCase,
    deps.get_customer_summary_use_case: uc.CustomerSummaryUseCase,
    deps.get_add_inventory_item_use_case: uc.AddInventoryItemUseCase,
    deps.get_add_salesman_use_case: uc.AddSalesmanUseCase,
    deps.get_adjust_stock_use_case: uc.AdjustStockUseCase,
    deps.get_record_expense_use_case: uc.RecordExpenseUseCase,
    deps.get_pay_salesman_use_case: uc.PaySalesmanUseCase,
    deps.get_record_opening_balance_use_case: uc.RecordOpeningBalanceUseCase,
    deps.get_reconcile_cash_use_case: uc.ReconcileCashUseCase,
    deps.get_period_summary_use_case: uc.PeriodSummaryUseCase,
    deps.get_close_period_use_case: uc.ClosePeriodUseCase,
    deps.get_delivery_schedule_use_case: uc.DeliveryScheduleUseCase,
}


def _provider(use_case_cls, store):
    def provide():
        return use_case_cls(ledger_store=store)

    return provide


@pytest.fixture
async def client(store):
    """HTTP client whose use cases all share the in-memory ``store``."""
    app.dependency_overrides[deps.get_store] = lambda: store
    for factory, use_case_cls in USE_CASE_FACTORIES.items():
        app.dependency_overrides[factory] = _provider(use_case_cls, store)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.pop(deps.get_store, None)
    for factory in USE_CASE_FACTORIES:
        app.dependency_overrides.pop(factory, None)
