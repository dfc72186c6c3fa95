"""Inventory domain entities."""

from datetime import datetime

from pydantic import BaseModel, Field


class InventoryItemInput(BaseModel):
    """Values for a new catalog item."""

    name: str
    category: str = ""
    stock: int = 0
    unit: str = "pcs"
    low_stock_threshold: int = 0
    selling_price: float = 0.0


class InventoryItem(BaseModel):
    """A stocked product. Stock may go negative; that is reported, not rejected."""

    id: int
    name: str
    category: str = ""
    stock: int = 0
    unit: str = "pcs"
    low_stock_threshold: int = 0
    selling_price: float = 0.0

    @property
    def is_low_stock(self) -> bool:
        return self.stock < self.low_stock_threshold

    @property
    def is_negative_stock(self) -> bool:
        return self.stock < 0


class StockAdjustment(BaseModel):
    """Manual stock correction, independent of sales."""

    id: int
    inventory_item_id: int
    date: datetime = Field(default_factory=datetime.now)
    quantity: int  # positive or negative
    reason: str = ""
    new_stock_level: int
