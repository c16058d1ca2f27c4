"""
Resolve Display Status Use Case.

Overlays a due date onto a bare persisted status, for callers that hold
only the status and due date rather than a full snapshot.
"""

from dataclasses import dataclass
from datetime import date

from textile_ledger.application.dto.requests import (
    InvoiceDisplayStatusRequest,
    OrderDisplayStatusRequest,
)
from textile_ledger.application.dto.responses import DisplayStatusResponse
from textile_ledger.config import EngineSettings, get_logger, get_settings
from textile_ledger.core.entities import InvoiceStatusView, OrderStatusView
from textile_ledger.core.services import (
    get_invoice_display_status,
    get_order_display_status,
)

logger = get_logger(__name__)


def display_status_response(view: OrderStatusView | InvoiceStatusView) -> DisplayStatusResponse:
    return DisplayStatusResponse(
        status=view.status.value,
        text=view.text,
        is_overdue=view.is_overdue,
    )


@dataclass
class DisplayStatusResult:
    """Resolved display status and the date it was evaluated on."""

    view: OrderStatusView | InvoiceStatusView
    as_of: date


class ResolveDisplayStatusUseCase:
    """Resolve order and invoice display statuses."""

    def __init__(self, engine_settings: EngineSettings | None = None):
        self._settings = engine_settings or get_settings().engine

    def for_order(self, request: OrderDisplayStatusRequest, today: date) -> DisplayStatusResult:
        as_of = request.as_of or today
        view = get_order_display_status(
            request.status,
            request.due_date,
            now=as_of,
            window_days=self._settings.due_soon_days,
        )
        logger.debug(
            "order_display_status_resolved",
            status=request.status,
            display_status=view.status,
            as_of=as_of,
        )
        return DisplayStatusResult(view=view, as_of=as_of)

    def for_invoice(
        self, request: InvoiceDisplayStatusRequest, today: date
    ) -> DisplayStatusResult:
        as_of = request.as_of or today
        view = get_invoice_display_status(
            request.status,
            request.due_date,
            now=as_of,
            outstanding_amount=request.outstanding_amount,
            window_days=self._settings.due_soon_days,
        )
        logger.debug(
            "invoice_display_status_resolved",
            status=request.status,
            display_status=view.status,
            as_of=as_of,
        )
        return DisplayStatusResult(view=view, as_of=as_of)

    def to_response(self, result: DisplayStatusResult) -> DisplayStatusResponse:
        """Convert result to API response."""
        return display_status_response(result.view)
