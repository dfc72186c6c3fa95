"""Tests for domain exceptions."""

import pytest

from aqualedger.core.exceptions import (
    AquaLedgerError,
    ConfigurationError,
    CustomerNotFoundError,
    DatabaseError,
    InventoryItemNotFoundError,
    PeriodAlreadyClosedError,
    RecordNotFoundError,
    SaleNotFoundError,
    SalesmanNotFoundError,
    StorageError,
    ValidationError,
)


class TestAquaLedgerError:
    def test_basic(self):
        err = AquaLedgerError("something broke")
        assert str(err) == "something broke"
        assert err.message == "something broke"
        assert err.code == "AquaLedgerError"
        assert err.details == {}

    def test_to_dict(self):
        err = AquaLedgerError("msg", code="X", details={"k": "v"})
        assert err.to_dict() == {"error": "X", "message": "msg", "details": {"k": "v"}}


class TestNotFoundErrors:
    @pytest.mark.parametrize(
        ("exc", "code", "record_type"),
        [
            (CustomerNotFoundError(5), "CUSTOMER_NOT_FOUND", "Customer"),
            (SaleNotFoundError(5), "SALE_NOT_FOUND", "Sale"),
            (InventoryItemNotFoundError(5), "INVENTORY_ITEM_NOT_FOUND", "Inventory item"),
            (SalesmanNotFoundError(5), "SALESMAN_NOT_FOUND", "Salesman"),
        ],
    )
    def test_codes(self, exc, code, record_type):
        assert isinstance(exc, RecordNotFoundError)
        assert exc.code == code
        assert exc.details == {"record_type": record_type, "record_id": 5}
        assert exc.message == f"{record_type} not found: 5"


class TestOtherErrors:
    def test_period_already_closed(self):
        err = PeriodAlreadyClosedError("2025-03")
        assert err.code == "PERIOD_ALREADY_CLOSED"
        assert "2025-03" in err.message

    def test_database_error(self):
        err = DatabaseError("save", "disk full")
        assert isinstance(err, StorageError)
        assert err.code == "DATABASE_ERROR"
        assert err.details["operation"] == "save"

    def test_validation_error_truncates_value(self):
        err = ValidationError("amount", "must be positive", "x" * 500)
        assert err.code == "VALIDATION_ERROR"
        assert len(err.details["value"]) == 100

    def test_configuration_error(self):
        err = ConfigurationError("LEDGER_OPENING_BASIS", "unknown basis")
        assert err.code == "CONFIGURATION_ERROR"
        assert isinstance(err, AquaLedgerError)
