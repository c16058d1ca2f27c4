"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation. Amounts are accepted as
given and clamped by the engine, so there are no range constraints here.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from textile_ledger.core.entities import (
    DiscountType,
    Invoice,
    InvoiceStatus,
    Order,
    OrderLine,
    OrderStatus,
)


class OrderFinancialsRequest(BaseModel):
    """Preview order totals from an item total or from line totals."""

    item_total: Decimal | None = Field(
        default=None,
        description="Sum of line totals before discount; derived from lines when omitted",
        examples=["1000"],
    )
    lines: list[OrderLine] = Field(
        default_factory=list,
        description="Order lines whose line_total values are summed when item_total is omitted",
    )
    discount_type: DiscountType = Field(default=DiscountType.NONE)
    discount_value: Decimal = Field(
        default=Decimal("0"),
        description="Percentage (0-100) or flat currency amount",
    )
    gst_rate: Decimal | None = Field(
        default=None,
        description="GST percentage; the configured default applies when omitted",
        examples=["18"],
    )


class OrderSummaryRequest(BaseModel):
    """Evaluate an order snapshot."""

    order: Order
    as_of: date | None = Field(
        default=None,
        description="Evaluation date; defaults to today",
    )


class OrderDisplayStatusRequest(BaseModel):
    """Resolve an order display status."""

    status: OrderStatus
    due_date: date | None = Field(default=None, description="Expected delivery date")
    as_of: date | None = None


class InvoiceSummaryRequest(BaseModel):
    """Evaluate an invoice snapshot."""

    invoice: Invoice
    as_of: date | None = None


class InvoiceDisplayStatusRequest(BaseModel):
    """Resolve an invoice display status."""

    status: InvoiceStatus
    due_date: date | None = None
    outstanding_amount: Decimal | None = Field(
        default=None,
        description="When given and zero, the due date is ignored",
    )
    as_of: date | None = None


class StockStatusRequest(BaseModel):
    """Classify stock on hand."""

    in_stock_quantity: Decimal = Field(..., description="Quantity on hand")
    min_stock_threshold: Decimal | None = Field(
        default=None,
        description="Low-stock threshold; no low-stock state when omitted",
    )
