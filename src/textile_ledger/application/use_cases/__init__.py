"""Application use cases."""

from textile_ledger.application.use_cases.check_stock_status import (
    CheckStockStatusUseCase,
    StockStatusResult,
)
from textile_ledger.application.use_cases.evaluate_invoice import (
    EvaluateInvoiceUseCase,
    InvoiceEvaluationResult,
)
from textile_ledger.application.use_cases.evaluate_order import (
    EvaluateOrderUseCase,
    OrderEvaluationResult,
)
from textile_ledger.application.use_cases.preview_order_financials import (
    OrderFinancialsResult,
    PreviewOrderFinancialsUseCase,
)
from textile_ledger.application.use_cases.resolve_display_status import (
    DisplayStatusResult,
    ResolveDisplayStatusUseCase,
)

__all__ = [
    "PreviewOrderFinancialsUseCase",
    "OrderFinancialsResult",
    "EvaluateOrderUseCase",
    "OrderEvaluationResult",
    "EvaluateInvoiceUseCase",
    "InvoiceEvaluationResult",
    "ResolveDisplayStatusUseCase",
    "DisplayStatusResult",
    "CheckStockStatusUseCase",
    "StockStatusResult",
]
