"""Request and response DTOs."""

from textile_ledger.application.dto.requests import (
    InvoiceDisplayStatusRequest,
    InvoiceSummaryRequest,
    OrderDisplayStatusRequest,
    OrderFinancialsRequest,
    OrderSummaryRequest,
    StockStatusRequest,
)
from textile_ledger.application.dto.responses import (
    BreakdownRowResponse,
    DisplayStatusResponse,
    ErrorResponse,
    HealthResponse,
    InvoiceSummaryResponse,
    OrderFinancialsResponse,
    OrderSummaryResponse,
    StockStatusResponse,
)

__all__ = [
    # Requests
    "OrderFinancialsRequest",
    "OrderSummaryRequest",
    "OrderDisplayStatusRequest",
    "InvoiceSummaryRequest",
    "InvoiceDisplayStatusRequest",
    "StockStatusRequest",
    # Responses
    "OrderFinancialsResponse",
    "OrderSummaryResponse",
    "DisplayStatusResponse",
    "InvoiceSummaryResponse",
    "BreakdownRowResponse",
    "StockStatusResponse",
    "HealthResponse",
    "ErrorResponse",
]
