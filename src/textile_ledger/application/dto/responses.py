"""Response DTOs for API endpoints.

Amounts are rounded for presentation here and nowhere earlier.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field


class OrderFinancialsResponse(BaseModel):
    """Order totals rounded to 2 decimal places."""

    item_total: float = Field(..., description="Sum of line totals before discount")
    discount_amount: float = Field(..., description="Discount applied")
    after_discount: float = Field(..., description="Item total less discount")
    gst_amount: float = Field(..., description="GST on the discounted amount")
    total_amount: float = Field(..., description="Discounted amount plus GST")
    formatted_total: str = Field(..., description="Total with Indian digit grouping")


class DisplayStatusResponse(BaseModel):
    """Display status with its label."""

    status: str = Field(..., description="Display status value")
    text: str = Field(..., description="Human-readable label")
    is_overdue: bool = False


class OrderSummaryResponse(BaseModel):
    """Derived view of an order."""

    order_id: str | None = None
    order_number: str | None = None
    order_type: str
    as_of: date
    financials: OrderFinancialsResponse
    display_status: DisplayStatusResponse
    completion_percentage: int = Field(..., ge=0, le=100)
    total_required: float
    total_dispatched: float
    pending_quantity: float


class BreakdownRowResponse(BaseModel):
    """Single row of an invoice totals block."""

    kind: str
    label: str
    amount: float
    formatted_amount: str


class InvoiceSummaryResponse(BaseModel):
    """Derived view of an invoice."""

    invoice_id: str | None = None
    invoice_number: str | None = None
    as_of: date
    rows: list[BreakdownRowResponse] = Field(default_factory=list)
    total_amount: float
    outstanding_amount: float
    paid_amount: float
    payment_progress_percent: int = Field(..., ge=0, le=100)
    display_status: DisplayStatusResponse
    info: str = Field(default="", description="Due date and outstanding summary")
    amount_in_words: str


class StockStatusResponse(BaseModel):
    """Stock availability."""

    status: str
    in_stock_quantity: float


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INVALID_STATUS)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
