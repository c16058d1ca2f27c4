"""Stock endpoints."""

from fastapi import APIRouter, Depends

from textile_ledger.api.dependencies import get_check_stock_status_use_case
from textile_ledger.application.dto.requests import StockStatusRequest
from textile_ledger.application.dto.responses import ErrorResponse, StockStatusResponse
from textile_ledger.application.use_cases import CheckStockStatusUseCase

router = APIRouter(prefix="/api/stock", tags=["stock"])


@router.post(
    "/status",
    response_model=StockStatusResponse,
    responses={422: {"model": ErrorResponse}},
)
async def stock_status(
    request: StockStatusRequest,
    use_case: CheckStockStatusUseCase = Depends(get_check_stock_status_use_case),
) -> StockStatusResponse:
    """In stock, low stock or out of stock."""
    result = use_case.execute(request)
    return use_case.to_response(result)
