"""
Application layer - Use cases and DTOs.

This layer orchestrates the derivation engine by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Rounding engine results at the presentation boundary

Use cases are the only entry point for API handlers.
"""

from textile_ledger.application.dto import (
    BreakdownRowResponse,
    DisplayStatusResponse,
    ErrorResponse,
    HealthResponse,
    InvoiceDisplayStatusRequest,
    InvoiceSummaryRequest,
    InvoiceSummaryResponse,
    OrderDisplayStatusRequest,
    OrderFinancialsRequest,
    OrderFinancialsResponse,
    OrderSummaryRequest,
    OrderSummaryResponse,
    StockStatusRequest,
    StockStatusResponse,
)
from textile_ledger.application.use_cases import (
    CheckStockStatusUseCase,
    EvaluateInvoiceUseCase,
    EvaluateOrderUseCase,
    PreviewOrderFinancialsUseCase,
    ResolveDisplayStatusUseCase,
)

__all__ = [
    # Request DTOs
    "OrderFinancialsRequest",
    "OrderSummaryRequest",
    "OrderDisplayStatusRequest",
    "InvoiceSummaryRequest",
    "InvoiceDisplayStatusRequest",
    "StockStatusRequest",
    # Response DTOs
    "OrderFinancialsResponse",
    "OrderSummaryResponse",
    "DisplayStatusResponse",
    "InvoiceSummaryResponse",
    "BreakdownRowResponse",
    "StockStatusResponse",
    "HealthResponse",
    "ErrorResponse",
    # Use Cases
    "PreviewOrderFinancialsUseCase",
    "EvaluateOrderUseCase",
    "EvaluateInvoiceUseCase",
    "ResolveDisplayStatusUseCase",
    "CheckStockStatusUseCase",
]
