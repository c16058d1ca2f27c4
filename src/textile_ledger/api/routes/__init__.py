"""API route modules."""

from textile_ledger.api.routes.health import router as health_router
from textile_ledger.api.routes.invoices import router as invoices_router
from textile_ledger.api.routes.orders import router as orders_router
from textile_ledger.api.routes.stock import router as stock_router

__all__ = [
    "health_router",
    "orders_router",
    "invoices_router",
    "stock_router",
]
