"""Tests for catalog, stock and schedule use cases."""

from datetime import date, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from aqualedger.application.dto.requests import (
    AddInventoryItemRequest,
    AddSalesmanRequest,
    AdjustStockRequest,
    DeliveryScheduleRequest,
)
from aqualedger.application.use_cases.add_inventory_item import AddInventoryItemUseCase
from aqualedger.application.use_cases.add_salesman import AddSalesmanUseCase
from aqualedger.application.use_cases.adjust_stock import AdjustStockUseCase
from aqualedger.application.use_cases.delivery_schedule import DeliveryScheduleUseCase
from aqualedger.core.entities import Customer, Sale
from aqualedger.core.exceptions import InventoryItemNotFoundError


@pytest.fixture
def mock_ledger_store(snapshot):
    store = AsyncMock()
    store.load.return_value = snapshot
    return store


class TestAddInventoryItemUseCase:
    async def test_add(self, mock_ledger_store):
        use_case = AddInventoryItemUseCase(ledger_store=mock_ledger_store)

        item = await use_case.execute(
            AddInventoryItemRequest(name="1.5 L Pack", category="Packs", stock=3,
                                    low_stock_threshold=5)
        )
        response = use_case.to_response(item)

        assert item.id == 4
        assert response.is_low_stock is True
        mock_ledger_store.save.assert_awaited_once()


class TestAddSalesmanUseCase:
    async def test_add(self, mock_ledger_store):
        use_case = AddSalesmanUseCase(ledger_store=mock_ledger_store)

        salesman = await use_case.execute(AddSalesmanRequest(name="Usman", monthly_salary=25000))

        assert salesman.id == 2
        assert use_case.to_response(salesman).monthly_salary == 25000


class TestAdjustStockUseCase:
    async def test_adjust(self, mock_ledger_store):
        use_case = AdjustStockUseCase(ledger_store=mock_ledger_store)

        result = await use_case.execute(3, AdjustStockRequest(adjustment=-4, reason="Broken"))
        response = use_case.to_response(result)

        assert response.item.stock == 1
        assert response.item.is_low_stock is True
        assert response.adjustment.new_stock_level == 1
        assert response.adjustment.reason == "Broken"

    async def test_unknown_item(self, mock_ledger_store):
        with pytest.raises(InventoryItemNotFoundError):
            await AdjustStockUseCase(ledger_store=mock_ledger_store).execute(
                99, AdjustStockRequest(adjustment=1)
            )
        mock_ledger_store.save.assert_not_awaited()

    def test_zero_adjustment_rejected(self):
        with pytest.raises(ValueError):
            AdjustStockRequest(adjustment=0)


class TestDeliveryScheduleUseCase:
    @pytest.fixture
    def route_store(self, snapshot):
        start = date(2025, 3, 10)
        snapshot.customers.append(
            Customer(id=2, name="Sara", area="DHA", delivery_frequency_days=7)
        )
        snapshot.sales.append(
            Sale(id=1, customer_id=1, date=datetime(2025, 3, 9, 10))
        )
        store = AsyncMock()
        store.load.return_value = snapshot
        return store, start

    async def test_schedule(self, route_store):
        store, start = route_store
        use_case = DeliveryScheduleUseCase(ledger_store=store)

        result = await use_case.execute(DeliveryScheduleRequest(start=start, days=3))
        response = use_case.to_response(result)

        assert [d.date for d in response.days] == [start + timedelta(days=i) for i in range(3)]
        assert [c.id for c in response.days[0].customers] == [2]
        assert [c.id for c in response.days[2].customers] == [1, 2]
        assert response.days[2].by_area == {"Gulberg": [1], "DHA": [2]}
        store.save.assert_not_awaited()

    async def test_default_window(self, route_store):
        store, start = route_store
        result = await DeliveryScheduleUseCase(ledger_store=store).execute(
            DeliveryScheduleRequest(start=start)
        )
        assert len(result.schedule) == 7

    async def test_area_filter(self, route_store):
        store, start = route_store
        result = await DeliveryScheduleUseCase(ledger_store=store).execute(
            DeliveryScheduleRequest(start=start, days=3, area="Gulberg")
        )
        assert all(c.area == "Gulberg" for due in result.schedule.values() for c in due)
