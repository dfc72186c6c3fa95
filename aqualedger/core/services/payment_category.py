"""
Payment category classification.

Single place where a sale is bucketed into a container-size revenue stream.
Used when a sale is recorded and when cash is reconciled.
"""

import re
from collections.abc import Iterable

from aqualedger.core.entities.inventory import InventoryItem
from aqualedger.core.entities.sale import PaymentCategory

NINETEEN_LTR_PATTERN = re.compile(r"19\s*(ltr|liter|litre)", re.IGNORECASE)
SIX_LTR_PATTERN = re.compile(r"6\s*(ltr|liter|litre)", re.IGNORECASE)


def is_19l_item_name(name: str | None) -> bool:
    return bool(name) and NINETEEN_LTR_PATTERN.search(name) is not None


def is_6l_item_name(name: str | None) -> bool:
    return bool(name) and SIX_LTR_PATTERN.search(name) is not None


def category_for_item(item: InventoryItem | None) -> PaymentCategory | None:
    """Container-size bucket of an inventory item, if its name names one."""
    if item is None:
        return None
    if is_19l_item_name(item.name):
        return PaymentCategory.NINETEEN_LTR
    if is_6l_item_name(item.name):
        return PaymentCategory.SIX_LTR
    return None


def classify_payment_category(
    inventory: Iterable[InventoryItem],
    inventory_item_id: int | None,
    amount_received: float | None,
    existing_category: PaymentCategory | None = None,
) -> PaymentCategory | None:
    """
    Infer the collection category of a sale from its inventory item.

    An explicit category is never overwritten, and nothing is inferred for
    sales without an item or without money received.

    Args:
        inventory: Inventory items to look the sale's item up in.
        inventory_item_id: Item sold, if any.
        amount_received: Money collected on the sale.
        existing_category: Category already attached to the sale.

    Returns:
        The inferred category, or ``existing_category`` unchanged.
    """
    if existing_category or not inventory_item_id or not amount_received or amount_received <= 0:
        return existing_category

    item = next((i for i in inventory if i.id == inventory_item_id), None)
    return category_for_item(item) or existing_category
