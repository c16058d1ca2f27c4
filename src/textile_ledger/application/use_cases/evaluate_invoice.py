"""
Evaluate Invoice Use Case.

Builds the totals block, payment progress and display status of an
invoice from its persisted amounts. Nothing is recomputed except the paid
amount and progress.
"""

from dataclasses import dataclass
from datetime import date

from textile_ledger.application.dto.requests import InvoiceSummaryRequest
from textile_ledger.application.dto.responses import (
    BreakdownRowResponse,
    InvoiceSummaryResponse,
)
from textile_ledger.application.use_cases.resolve_display_status import (
    display_status_response,
)
from textile_ledger.config import EngineSettings, get_logger, get_settings
from textile_ledger.core.entities import Invoice, InvoiceBreakdown, InvoiceStatusView
from textile_ledger.core.services import (
    amount_in_words,
    build_invoice_breakdown,
    format_currency,
    invoice_display_status,
    invoice_info,
    round_currency,
    round_percent,
)

logger = get_logger(__name__)


@dataclass
class InvoiceEvaluationResult:
    """Everything derived from one invoice snapshot."""

    invoice: Invoice
    as_of: date
    breakdown: InvoiceBreakdown
    display_status: InvoiceStatusView
    info: str


class EvaluateInvoiceUseCase:
    """Derive the read model of a sales or purchase invoice."""

    def __init__(self, engine_settings: EngineSettings | None = None):
        self._settings = engine_settings or get_settings().engine

    def execute(self, request: InvoiceSummaryRequest, today: date) -> InvoiceEvaluationResult:
        """Execute invoice evaluation."""
        invoice = request.invoice
        as_of = request.as_of or today
        window = self._settings.due_soon_days

        logger.info(
            "evaluate_invoice_started",
            invoice_number=invoice.invoice_number,
            status=invoice.status,
        )

        breakdown = build_invoice_breakdown(invoice)
        view = invoice_display_status(invoice, as_of, window)
        info = invoice_info(invoice, as_of, window)

        logger.info(
            "evaluate_invoice_complete",
            invoice_number=invoice.invoice_number,
            display_status=view.status,
            payment_progress=round_percent(breakdown.payment_progress_percent),
        )

        return InvoiceEvaluationResult(
            invoice=invoice,
            as_of=as_of,
            breakdown=breakdown,
            display_status=view,
            info=info,
        )

    def to_response(self, result: InvoiceEvaluationResult) -> InvoiceSummaryResponse:
        """Convert result to API response."""
        breakdown = result.breakdown
        return InvoiceSummaryResponse(
            invoice_id=result.invoice.id,
            invoice_number=result.invoice.invoice_number,
            as_of=result.as_of,
            rows=[
                BreakdownRowResponse(
                    kind=row.kind.value,
                    label=row.label,
                    amount=float(round_currency(row.amount)),
                    formatted_amount=format_currency(row.amount),
                )
                for row in breakdown.rows
            ],
            total_amount=float(round_currency(breakdown.total_amount)),
            outstanding_amount=float(round_currency(breakdown.outstanding_amount)),
            paid_amount=float(round_currency(breakdown.paid_amount)),
            payment_progress_percent=round_percent(breakdown.payment_progress_percent),
            display_status=display_status_response(result.display_status),
            info=result.info,
            amount_in_words=amount_in_words(breakdown.total_amount),
        )
