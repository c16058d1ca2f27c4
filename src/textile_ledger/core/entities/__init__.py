"""Core domain entities."""

from textile_ledger.core.entities.invoice import (
    BreakdownRow,
    BreakdownRowKind,
    DirectTaxType,
    Invoice,
    InvoiceBreakdown,
    InvoiceDisplayStatus,
    InvoiceStatus,
    InvoiceStatusView,
    InvoiceTaxType,
    InvoiceType,
)
from textile_ledger.core.entities.order import (
    DiscountType,
    Order,
    OrderDisplayStatus,
    OrderFinancials,
    OrderLine,
    OrderStatus,
    OrderStatusView,
    OrderType,
)
from textile_ledger.core.entities.stock import (
    MeasuringUnit,
    MovementKind,
    StockStatus,
    UnitQuantity,
)

__all__ = [
    # Order entities
    "Order",
    "OrderLine",
    "OrderType",
    "OrderStatus",
    "OrderDisplayStatus",
    "OrderFinancials",
    "OrderStatusView",
    "DiscountType",
    # Invoice entities
    "Invoice",
    "InvoiceType",
    "InvoiceStatus",
    "InvoiceDisplayStatus",
    "InvoiceTaxType",
    "DirectTaxType",
    "InvoiceBreakdown",
    "BreakdownRow",
    "BreakdownRowKind",
    "InvoiceStatusView",
    # Stock entities
    "StockStatus",
    "MeasuringUnit",
    "MovementKind",
    "UnitQuantity",
]
