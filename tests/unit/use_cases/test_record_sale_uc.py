"""Tests for the sale use cases (record, update, delete)."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from aqualedger.application.dto.requests import SaleRequest
from aqualedger.application.use_cases.delete_sale import DeleteSaleUseCase
from aqualedger.application.use_cases.record_sale import RecordSaleUseCase
from aqualedger.application.use_cases.update_sale import UpdateSaleUseCase
from aqualedger.core.entities import PaymentCategory, PaymentMethod
from aqualedger.core.exceptions import (
    CustomerNotFoundError,
    InventoryItemNotFoundError,
    SaleNotFoundError,
)

WHEN = datetime(2025, 3, 10, 9, 30)


@pytest.fixture
def mock_ledger_store(snapshot):
    store = AsyncMock()
    store.load.return_value = snapshot
    return store


def credit_sale(**overrides) -> SaleRequest:
    values = {
        "customer_id": 1,
        "inventory_item_id": 1,
        "quantity": 3,
        "empties_collected": 1,
        "amount": 360,
        "date": WHEN,
    }
    values.update(overrides)
    return SaleRequest(**values)


class TestRecordSaleUseCase:
    async def test_records_and_saves(self, mock_ledger_store, engine):
        """Sale is applied and the new snapshot persisted."""
        use_case = RecordSaleUseCase(ledger_store=mock_ledger_store, engine=engine)

        result = await use_case.execute(credit_sale())

        mock_ledger_store.save.assert_awaited_once()
        saved = mock_ledger_store.save.call_args[0][0]
        assert saved is result.snapshot
        assert saved.get_customer(1).total_balance == 360
        assert saved.get_customer(1).empty_bottles_held == 2
        assert saved.get_item(1).stock == 97
        assert result.sale.id == 1

    async def test_response_carries_ledgers(self, mock_ledger_store, engine):
        use_case = RecordSaleUseCase(ledger_store=mock_ledger_store, engine=engine)

        result = await use_case.execute(
            credit_sale(amount_received=360, payment_method=PaymentMethod.CASH)
        )
        response = use_case.to_response(result)

        assert response.sale.payment_for_category == PaymentCategory.NINETEEN_LTR
        assert response.sale.unpaid_amount == 0
        assert response.customer.empty_bottles_held == 2
        assert response.inventory_item.stock == 97

    async def test_walk_in_response_has_no_customer(self, mock_ledger_store, engine):
        use_case = RecordSaleUseCase(ledger_store=mock_ledger_store, engine=engine)

        result = await use_case.execute(credit_sale(customer_id=None, empties_collected=0))
        response = use_case.to_response(result)

        assert response.customer is None
        assert response.inventory_item.id == 1

    async def test_unknown_customer_not_saved(self, mock_ledger_store, engine):
        use_case = RecordSaleUseCase(ledger_store=mock_ledger_store, engine=engine)

        with pytest.raises(CustomerNotFoundError):
            await use_case.execute(credit_sale(customer_id=99))

        mock_ledger_store.save.assert_not_awaited()

    async def test_unknown_item_not_saved(self, mock_ledger_store, engine):
        use_case = RecordSaleUseCase(ledger_store=mock_ledger_store, engine=engine)

        with pytest.raises(InventoryItemNotFoundError):
            await use_case.execute(credit_sale(inventory_item_id=99))

        mock_ledger_store.save.assert_not_awaited()


class TestSaleRequest:
    def test_item_requires_quantity(self):
        with pytest.raises(ValueError):
            SaleRequest(customer_id=1, inventory_item_id=1, quantity=0)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            SaleRequest(customer_id=1, amount=-5)

    def test_date_defaults_to_now(self):
        sale_input = SaleRequest(customer_id=1, amount=100).to_sale_input()
        assert isinstance(sale_input.date, datetime)


class TestUpdateSaleUseCase:
    async def test_update_reapplies(self, snapshot, engine):
        recorded, sale = engine.add_sale(snapshot, credit_sale().to_sale_input())
        store = AsyncMock()
        store.load.return_value = recorded
        use_case = UpdateSaleUseCase(ledger_store=store, engine=engine)

        result = await use_case.execute(sale.id, credit_sale(quantity=5, empties_collected=5, amount=600))

        saved = store.save.call_args[0][0]
        assert saved.get_customer(1).total_balance == 600
        assert saved.get_customer(1).empty_bottles_held == 0
        assert saved.get_item(1).stock == 95
        assert result.sale.id == sale.id

    async def test_update_unknown_sale(self, mock_ledger_store, engine):
        use_case = UpdateSaleUseCase(ledger_store=mock_ledger_store, engine=engine)

        with pytest.raises(SaleNotFoundError):
            await use_case.execute(42, credit_sale())

        mock_ledger_store.save.assert_not_awaited()


class TestDeleteSaleUseCase:
    async def test_delete_restores(self, snapshot, engine):
        recorded, sale = engine.add_sale(snapshot, credit_sale().to_sale_input())
        store = AsyncMock()
        store.load.return_value = recorded
        use_case = DeleteSaleUseCase(ledger_store=store, engine=engine)

        result = await use_case.execute(sale.id)
        response = use_case.to_response(result)

        saved = store.save.call_args[0][0]
        assert saved.sales == []
        assert response.sale is None
        assert response.customer.total_balance == 0
        assert response.customer.empty_bottles_held == 0
        assert response.inventory_item.stock == 100

    async def test_delete_unknown_sale(self, mock_ledger_store, engine):
        use_case = DeleteSaleUseCase(ledger_store=mock_ledger_store, engine=engine)

        with pytest.raises(SaleNotFoundError):
            await use_case.execute(42)

        mock_ledger_store.save.assert_not_awaited()
