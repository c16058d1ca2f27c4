"""Sales and purchase order endpoints."""

from datetime import date

from fastapi import APIRouter, Depends

from textile_ledger.api.dependencies import (
    get_evaluate_order_use_case,
    get_preview_order_financials_use_case,
    get_resolve_display_status_use_case,
    get_today,
)
from textile_ledger.application.dto.requests import (
    OrderDisplayStatusRequest,
    OrderFinancialsRequest,
    OrderSummaryRequest,
)
from textile_ledger.application.dto.responses import (
    DisplayStatusResponse,
    ErrorResponse,
    OrderFinancialsResponse,
    OrderSummaryResponse,
)
from textile_ledger.application.use_cases import (
    EvaluateOrderUseCase,
    PreviewOrderFinancialsUseCase,
    ResolveDisplayStatusUseCase,
)

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post(
    "/financials",
    response_model=OrderFinancialsResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def preview_order_financials(
    request: OrderFinancialsRequest,
    use_case: PreviewOrderFinancialsUseCase = Depends(get_preview_order_financials_use_case),
) -> OrderFinancialsResponse:
    """Item total, discount, GST and grand total for an order being edited."""
    result = use_case.execute(request)
    return use_case.to_response(result)


@router.post(
    "/summary",
    response_model=OrderSummaryResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def order_summary(
    request: OrderSummaryRequest,
    today: date = Depends(get_today),
    use_case: EvaluateOrderUseCase = Depends(get_evaluate_order_use_case),
) -> OrderSummaryResponse:
    """
    Derived view of an order.

    Financials, display status and completion percentage, evaluated as of
    ``as_of`` or today.
    """
    result = use_case.execute(request, today)
    return use_case.to_response(result)


@router.post(
    "/display-status",
    response_model=DisplayStatusResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def order_display_status(
    request: OrderDisplayStatusRequest,
    today: date = Depends(get_today),
    use_case: ResolveDisplayStatusUseCase = Depends(get_resolve_display_status_use_case),
) -> DisplayStatusResponse:
    """Display status of an order from its persisted status and due date."""
    result = use_case.for_order(request, today)
    return use_case.to_response(result)
