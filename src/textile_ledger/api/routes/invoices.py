"""Sales and purchase invoice endpoints."""

from datetime import date

from fastapi import APIRouter, Depends

from textile_ledger.api.dependencies import (
    get_evaluate_invoice_use_case,
    get_resolve_display_status_use_case,
    get_today,
)
from textile_ledger.application.dto.requests import (
    InvoiceDisplayStatusRequest,
    InvoiceSummaryRequest,
)
from textile_ledger.application.dto.responses import (
    DisplayStatusResponse,
    ErrorResponse,
    InvoiceSummaryResponse,
)
from textile_ledger.application.use_cases import (
    EvaluateInvoiceUseCase,
    ResolveDisplayStatusUseCase,
)

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.post(
    "/summary",
    response_model=InvoiceSummaryResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def invoice_summary(
    request: InvoiceSummaryRequest,
    today: date = Depends(get_today),
    use_case: EvaluateInvoiceUseCase = Depends(get_evaluate_invoice_use_case),
) -> InvoiceSummaryResponse:
    """Totals block, payment progress and display status of an invoice."""
    result = use_case.execute(request, today)
    return use_case.to_response(result)


@router.post(
    "/display-status",
    response_model=DisplayStatusResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def invoice_display_status(
    request: InvoiceDisplayStatusRequest,
    today: date = Depends(get_today),
    use_case: ResolveDisplayStatusUseCase = Depends(get_resolve_display_status_use_case),
) -> DisplayStatusResponse:
    """Display status of an invoice from its persisted status and due date."""
    result = use_case.for_invoice(request, today)
    return use_case.to_response(result)
