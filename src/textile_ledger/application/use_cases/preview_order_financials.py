"""Preview Order Financials Use Case: totals for an order being edited."""

from dataclasses import dataclass

from textile_ledger.application.dto.requests import OrderFinancialsRequest
from textile_ledger.application.dto.responses import OrderFinancialsResponse
from textile_ledger.config import EngineSettings, get_logger, get_settings
from textile_ledger.core.entities import OrderFinancials
from textile_ledger.core.numbers import ZERO
from textile_ledger.core.services import (
    calculate_order_financials,
    format_currency,
    round_currency,
)

logger = get_logger(__name__)


def financials_response(financials: OrderFinancials) -> OrderFinancialsResponse:
    """Round engine financials for presentation."""
    return OrderFinancialsResponse(
        item_total=float(round_currency(financials.item_total)),
        discount_amount=float(round_currency(financials.discount_amount)),
        after_discount=float(round_currency(financials.after_discount)),
        gst_amount=float(round_currency(financials.gst_amount)),
        total_amount=float(round_currency(financials.total_amount)),
        formatted_total=format_currency(financials.total_amount),
    )


@dataclass
class OrderFinancialsResult:
    """Result of an order financials preview."""

    financials: OrderFinancials


class PreviewOrderFinancialsUseCase:
    """Compute order totals from an item total or a set of line totals."""

    def __init__(self, engine_settings: EngineSettings | None = None):
        self._settings = engine_settings or get_settings().engine

    def execute(self, request: OrderFinancialsRequest) -> OrderFinancialsResult:
        """Execute order financials preview."""
        if request.item_total is not None:
            item_total = request.item_total
        else:
            item_total = sum((line.line_total for line in request.lines), ZERO)

        gst_rate = (
            request.gst_rate if request.gst_rate is not None else self._settings.default_gst_rate
        )

        financials = calculate_order_financials(
            item_total,
            request.discount_type,
            request.discount_value,
            gst_rate,
        )

        logger.info(
            "order_financials_previewed",
            lines=len(request.lines),
            discount_type=request.discount_type,
            gst_rate=gst_rate,
            total=round_currency(financials.total_amount),
        )

        return OrderFinancialsResult(financials=financials)

    def to_response(self, result: OrderFinancialsResult) -> OrderFinancialsResponse:
        """Convert result to API response."""
        return financials_response(result.financials)
