"""
Core business logic services.

Layer-pure services that depend only on:
- aqualedger/core/entities/*
- aqualedger/core/exceptions.py
- aqualedger/config (settings and logging)

NO infrastructure imports. Every mutating service returns a new snapshot.
"""

from aqualedger.core.services.customer_summary import build_customer_summary
from aqualedger.core.services.delivery_scheduler import (
    due_customers,
    group_by_area,
    is_due_on,
    is_due_today,
    weekly_schedule,
)
from aqualedger.core.services.ledger_operations import (
    add_inventory_item,
    add_salesman,
    adjust_stock,
    close_period,
    collect_empties,
    create_customer,
    low_stock_items,
    outstanding_customers,
    pay_salesman,
    record_expense,
    record_opening_balance,
    remove_customer,
)
from aqualedger.core.services.payment_category import (
    category_for_item,
    classify_payment_category,
    is_6l_item_name,
    is_19l_item_name,
)
from aqualedger.core.services.reconciliation import reconcile, summarize_period
from aqualedger.core.services.sale_engine import (
    SaleTransactionEngine,
    derive_customer_totals,
)

__all__ = [
    # Payment Category Classifier
    "classify_payment_category",
    "category_for_item",
    "is_19l_item_name",
    "is_6l_item_name",
    # Sale Transaction Engine
    "SaleTransactionEngine",
    "derive_customer_totals",
    # Delivery Scheduler
    "is_due_on",
    "is_due_today",
    "due_customers",
    "weekly_schedule",
    "group_by_area",
    # Reconciliation
    "reconcile",
    "summarize_period",
    # Ledger operations
    "add_inventory_item",
    "add_salesman",
    "create_customer",
    "remove_customer",
    "collect_empties",
    "adjust_stock",
    "record_expense",
    "pay_salesman",
    "record_opening_balance",
    "close_period",
    "low_stock_items",
    "outstanding_customers",
    # Summaries
    "build_customer_summary",
]
