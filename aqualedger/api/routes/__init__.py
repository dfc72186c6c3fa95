"""API route modules."""

from aqualedger.api.routes.cash import router as cash_router
from aqualedger.api.routes.customers import router as customers_router
from aqualedger.api.routes.expenses import router as expenses_router
from aqualedger.api.routes.health import router as health_router
from aqualedger.api.routes.inventory import router as inventory_router
from aqualedger.api.routes.sales import router as sales_router
from aqualedger.api.routes.salesmen import router as salesmen_router
from aqualedger.api.routes.schedule import router as schedule_router

__all__ = [
    "health_router",
    "salesmen_router",
    "customers_router",
    "sales_router",
    "inventory_router",
    "expenses_router",
    "cash_router",
    "schedule_router",
]
