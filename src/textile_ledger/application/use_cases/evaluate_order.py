"""Evaluate Order Use Case: financials, display status and completion."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from textile_ledger.application.dto.requests import OrderSummaryRequest
from textile_ledger.application.dto.responses import OrderSummaryResponse
from textile_ledger.application.use_cases.preview_order_financials import financials_response
from textile_ledger.application.use_cases.resolve_display_status import (
    display_status_response,
)
from textile_ledger.config import EngineSettings, get_logger, get_settings
from textile_ledger.core.entities import Order, OrderFinancials, OrderStatusView
from textile_ledger.core.services import (
    calculate_completion_percentage,
    completion_totals,
    order_display_status,
    order_financials,
    pending_quantity,
    round_currency,
)

logger = get_logger(__name__)


@dataclass
class OrderEvaluationResult:
    """Everything derived from one order snapshot."""

    order: Order
    as_of: date
    financials: OrderFinancials
    display_status: OrderStatusView
    completion_percentage: int
    total_required: Decimal
    total_dispatched: Decimal
    pending_quantity: Decimal


class EvaluateOrderUseCase:
    """
    Derive the read model of a sales or purchase order.

    The snapshot is not modified; the display status never replaces the
    persisted status.
    """

    def __init__(self, engine_settings: EngineSettings | None = None):
        self._settings = engine_settings or get_settings().engine

    def execute(self, request: OrderSummaryRequest, today: date) -> OrderEvaluationResult:
        """
        Evaluate an order.

        Args:
            request: Order snapshot and optional evaluation date.
            today: Evaluation date used when the request carries none.
        """
        order = request.order
        as_of = request.as_of or today

        logger.info(
            "evaluate_order_started",
            order_number=order.order_number,
            order_type=order.order_type,
            lines=order.lines_count,
        )

        financials = order_financials(order, self._settings.default_gst_rate)
        view = order_display_status(order, as_of, self._settings.due_soon_days)
        total_required, total_dispatched = completion_totals(order.lines)
        completion = calculate_completion_percentage(order.lines)

        logger.info(
            "evaluate_order_complete",
            order_number=order.order_number,
            display_status=view.status,
            completion=completion,
        )

        return OrderEvaluationResult(
            order=order,
            as_of=as_of,
            financials=financials,
            display_status=view,
            completion_percentage=completion,
            total_required=total_required,
            total_dispatched=total_dispatched,
            pending_quantity=pending_quantity(order.lines),
        )

    def to_response(self, result: OrderEvaluationResult) -> OrderSummaryResponse:
        """Convert result to API response."""
        order = result.order
        return OrderSummaryResponse(
            order_id=order.id,
            order_number=order.order_number,
            order_type=order.order_type.value,
            as_of=result.as_of,
            financials=financials_response(result.financials),
            display_status=display_status_response(result.display_status),
            completion_percentage=result.completion_percentage,
            total_required=float(round_currency(result.total_required)),
            total_dispatched=float(round_currency(result.total_dispatched)),
            pending_quantity=float(round_currency(result.pending_quantity)),
        )
