"""
Domain exceptions for the AquaLedger application.

The transaction engine only ever raises the not-found family; everything
else belongs to the callers (validation, storage, period closing).
"""

from typing import Any


class AquaLedgerError(Exception):
    """Base exception for all AquaLedger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Referential errors
class RecordNotFoundError(AquaLedgerError):
    """A referenced ledger record does not exist in the snapshot."""

    def __init__(self, record_type: str, record_id: Any, code: str = "RECORD_NOT_FOUND"):
        super().__init__(
            f"{record_type} not found: {record_id}",
            code=code,
            details={"record_type": record_type, "record_id": record_id},
        )


class CustomerNotFoundError(RecordNotFoundError):
    """Customer not found."""

    def __init__(self, customer_id: int):
        super().__init__("Customer", customer_id, code="CUSTOMER_NOT_FOUND")


class SaleNotFoundError(RecordNotFoundError):
    """Sale not found."""

    def __init__(self, sale_id: int):
        super().__init__("Sale", sale_id, code="SALE_NOT_FOUND")


class InventoryItemNotFoundError(RecordNotFoundError):
    """Inventory item not found."""

    def __init__(self, item_id: int):
        super().__init__("Inventory item", item_id, code="INVENTORY_ITEM_NOT_FOUND")


class SalesmanNotFoundError(RecordNotFoundError):
    """Salesman not found."""

    def __init__(self, salesman_id: int):
        super().__init__("Salesman", salesman_id, code="SALESMAN_NOT_FOUND")


# Cash closing
class PeriodAlreadyClosedError(AquaLedgerError):
    """A closing record already exists for the period."""

    def __init__(self, period: str):
        super().__init__(
            f"Period {period} has already been closed",
            code="PERIOD_ALREADY_CLOSED",
            details={"period": period},
        )


# Storage Exceptions
class StorageError(AquaLedgerError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Validation Exceptions
class ValidationError(AquaLedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class ConfigurationError(AquaLedgerError):
    """Invalid or missing configuration."""

    def __init__(self, setting: str, reason: str):
        super().__init__(
            f"Invalid configuration for '{setting}': {reason}",
            code="CONFIGURATION_ERROR",
            details={"setting": setting, "reason": reason},
        )
