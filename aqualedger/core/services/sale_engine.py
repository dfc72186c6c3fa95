"""
Sale Transaction Engine.

Keeps the three ledgers derived from sales consistent on every sale
create, edit and delete:

- customer outstanding balance
- customer held empty containers
- inventory stock

Every ledger change goes through ``apply_effects`` / ``reverse_effects``.
Update is reverse(old) followed by apply(new) on the same working copy and
delete is reverse(old) alone, so ``delete(add(s))`` always restores the
ledgers. Operations return a new snapshot; the input is never mutated, so a
raised error leaves the caller's snapshot as it was.
"""

from datetime import datetime

from aqualedger.config import get_logger, get_settings
from aqualedger.core.entities.customer import Customer
from aqualedger.core.entities.inventory import InventoryItem
from aqualedger.core.entities.sale import PaymentCategory, PaymentMethod, Sale, SaleInput
from aqualedger.core.entities.snapshot import LedgerSnapshot
from aqualedger.core.exceptions import (
    CustomerNotFoundError,
    InventoryItemNotFoundError,
    SaleNotFoundError,
)
from aqualedger.core.services.payment_category import classify_payment_category

logger = get_logger(__name__)


class SaleTransactionEngine:
    """
    Applies sale mutations to a ledger snapshot.

    The engine trusts the amounts it is given: negative stock and negative
    balances are valid states. The only failure it raises is a reference to
    a customer, item or sale that is not in the snapshot.
    """

    def __init__(self, container_categories: list[str] | None = None) -> None:
        if container_categories is None:
            container_categories = get_settings().ledger.container_categories
        self._container_categories = frozenset(container_categories)

    def is_container_item(self, item: InventoryItem | None) -> bool:
        """Whether selling this item hands out returnable containers."""
        return item is not None and item.category in self._container_categories

    # ------------------------------------------------------------------
    # Effect primitives (mutate a working copy in place)
    # ------------------------------------------------------------------

    def apply_effects(self, snapshot: LedgerSnapshot, sale: Sale) -> None:
        """Add the sale's effect to customer and inventory ledgers."""
        self._shift(snapshot, sale, 1)

    def reverse_effects(self, snapshot: LedgerSnapshot, sale: Sale) -> None:
        """Remove the sale's effect from customer and inventory ledgers."""
        self._shift(snapshot, sale, -1)

    def _resolve(
        self, snapshot: LedgerSnapshot, sale: Sale
    ) -> tuple[Customer | None, InventoryItem | None]:
        customer = None
        if sale.customer_id is not None:
            customer = snapshot.get_customer(sale.customer_id)
            if customer is None:
                raise CustomerNotFoundError(sale.customer_id)

        item = None
        if sale.inventory_item_id is not None:
            item = snapshot.get_item(sale.inventory_item_id)
            if item is None:
                raise InventoryItemNotFoundError(sale.inventory_item_id)

        return customer, item

    def _shift(self, snapshot: LedgerSnapshot, sale: Sale, sign: int) -> None:
        # Resolve both references before touching anything
        customer, item = self._resolve(snapshot, sale)

        if customer is not None:
            customer.total_balance += sign * sale.unpaid_amount
            if self.is_container_item(item):
                customer.empty_bottles_held += sign * (sale.quantity - sale.empties_collected)
                customer.total_bottles_purchased += sign * sale.quantity
            if sign > 0 and sale.empties_collected > 0:
                customer.last_empties_collection_date = sale.date

        if item is not None:
            item.stock -= sign * sale.quantity

    # ------------------------------------------------------------------
    # Operations (snapshot -> new snapshot)
    # ------------------------------------------------------------------

    def _build_sale(
        self, snapshot: LedgerSnapshot, sale_id: int, sale_input: SaleInput
    ) -> Sale:
        category = classify_payment_category(
            snapshot.inventory,
            sale_input.inventory_item_id,
            sale_input.amount_received,
            sale_input.payment_for_category,
        )
        values = sale_input.model_dump(exclude={"id", "payment_for_category"})
        return Sale(id=sale_id, payment_for_category=category, **values)

    def add_sale(
        self, snapshot: LedgerSnapshot, sale_input: SaleInput
    ) -> tuple[LedgerSnapshot, Sale]:
        """
        Record a new sale.

        Returns:
            The new snapshot and the stored sale (with id and category).

        Raises:
            CustomerNotFoundError: The sale names a customer not in the snapshot.
            InventoryItemNotFoundError: The sale names an item not in the snapshot.
        """
        working = snapshot.working_copy()
        sale = self._build_sale(working, working.next_id("sales"), sale_input)

        self.apply_effects(working, sale)
        working.sales.append(sale)

        logger.debug(
            "sale_applied",
            sale_id=sale.id,
            customer_id=sale.customer_id,
            inventory_item_id=sale.inventory_item_id,
            quantity=sale.quantity,
        )
        return working, sale

    def update_sale(
        self, snapshot: LedgerSnapshot, sale_id: int, sale_input: SaleInput
    ) -> tuple[LedgerSnapshot, Sale]:
        """
        Replace a sale's values.

        The old sale is reversed against the entities it referenced, then the
        new values are applied against the entities they reference; the two
        may be different customers or items.

        Raises:
            SaleNotFoundError: No sale with ``sale_id``.
            RecordNotFoundError: A customer or item on either side is missing.
        """
        working = snapshot.working_copy()
        old = working.get_sale(sale_id)
        if old is None:
            raise SaleNotFoundError(sale_id)

        self.reverse_effects(working, old)
        new = self._build_sale(working, sale_id, sale_input)
        self.apply_effects(working, new)

        index = next(i for i, s in enumerate(working.sales) if s.id == sale_id)
        working.sales[index] = new

        logger.debug("sale_reapplied", sale_id=sale_id)
        return working, new

    def delete_sale(self, snapshot: LedgerSnapshot, sale_id: int) -> LedgerSnapshot:
        """
        Remove a sale as if it had never been recorded.

        Raises:
            SaleNotFoundError: No sale with ``sale_id``.
            RecordNotFoundError: The sale's customer or item is missing.
        """
        working = snapshot.working_copy()
        old = working.get_sale(sale_id)
        if old is None:
            raise SaleNotFoundError(sale_id)

        self.reverse_effects(working, old)
        working.sales = [s for s in working.sales if s.id != sale_id]
        working.retire_id("sales", sale_id)

        logger.debug("sale_reversed", sale_id=sale_id)
        return working

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def record_payment(
        self,
        snapshot: LedgerSnapshot,
        customer_id: int,
        amount: float,
        payment_method: PaymentMethod,
        when: datetime | None = None,
        payment_for_category: PaymentCategory | None = None,
        description: str = "Payment Received",
    ) -> tuple[LedgerSnapshot, Sale]:
        """Record money received against a customer's balance as a payment-only sale."""
        payment = SaleInput(
            customer_id=customer_id,
            amount=0.0,
            amount_received=amount,
            date=when or datetime.now(),
            payment_method=payment_method,
            description=description,
            payment_for_category=payment_for_category,
        )
        return self.add_sale(snapshot, payment)

    def clear_balance(
        self,
        snapshot: LedgerSnapshot,
        customer_id: int,
        payment_method: PaymentMethod,
        when: datetime | None = None,
    ) -> tuple[LedgerSnapshot, Sale]:
        """Record a payment for the customer's whole outstanding balance."""
        customer = snapshot.get_customer(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return self.record_payment(
            snapshot,
            customer_id,
            customer.total_balance,
            payment_method,
            when,
            description="Outstanding Balance Cleared",
        )


def derive_customer_totals(
    snapshot: LedgerSnapshot,
    customer_id: int,
    container_categories: list[str] | None = None,
) -> tuple[float, int]:
    """
    Recompute a customer's balance and empties from sales history alone.

    Explicit empties collections are not sales, so the empties figure equals
    ``empty_bottles_held`` only for customers without such collections.
    """
    if container_categories is None:
        container_categories = get_settings().ledger.container_categories
    containers = set(container_categories)

    balance = 0.0
    empties = 0
    for sale in snapshot.sales_for_customer(customer_id):
        balance += sale.unpaid_amount
        item = snapshot.get_item(sale.inventory_item_id) if sale.inventory_item_id else None
        if item is not None and item.category in containers:
            empties += sale.quantity - sale.empties_collected
    return balance, empties
