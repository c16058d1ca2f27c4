"""Check Stock Status Use Case."""

from dataclasses import dataclass
from decimal import Decimal

from textile_ledger.application.dto.requests import StockStatusRequest
from textile_ledger.application.dto.responses import StockStatusResponse
from textile_ledger.core.entities import StockStatus
from textile_ledger.core.services import calculate_stock_status, round_currency


@dataclass
class StockStatusResult:
    status: StockStatus
    in_stock_quantity: Decimal


class CheckStockStatusUseCase:
    """Classify a quantity on hand against its low-stock threshold."""

    def execute(self, request: StockStatusRequest) -> StockStatusResult:
        status = calculate_stock_status(
            request.in_stock_quantity, request.min_stock_threshold
        )
        return StockStatusResult(status=status, in_stock_quantity=request.in_stock_quantity)

    def to_response(self, result: StockStatusResult) -> StockStatusResponse:
        return StockStatusResponse(
            status=result.status.value,
            in_stock_quantity=float(round_currency(result.in_stock_quantity)),
        )
