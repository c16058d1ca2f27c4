"""
Dependency injection container for FastAPI.

Provides settings, the clock and use case instances to route handlers.
Tests replace any of these through ``app.dependency_overrides``.
"""

from datetime import date
from functools import lru_cache

from fastapi import Depends

from textile_ledger.application.use_cases import (
    CheckStockStatusUseCase,
    EvaluateInvoiceUseCase,
    EvaluateOrderUseCase,
    PreviewOrderFinancialsUseCase,
    ResolveDisplayStatusUseCase,
)
from textile_ledger.config import Settings, get_settings


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


def get_today() -> date:
    """Evaluation date for requests that do not supply one."""
    return date.today()


# Use case dependencies
def get_preview_order_financials_use_case(
    settings: Settings = Depends(get_app_settings),
) -> PreviewOrderFinancialsUseCase:
    """Get order financials preview use case."""
    return PreviewOrderFinancialsUseCase(settings.engine)


def get_evaluate_order_use_case(
    settings: Settings = Depends(get_app_settings),
) -> EvaluateOrderUseCase:
    """Get evaluate order use case."""
    return EvaluateOrderUseCase(settings.engine)


def get_evaluate_invoice_use_case(
    settings: Settings = Depends(get_app_settings),
) -> EvaluateInvoiceUseCase:
    """Get evaluate invoice use case."""
    return EvaluateInvoiceUseCase(settings.engine)


def get_resolve_display_status_use_case(
    settings: Settings = Depends(get_app_settings),
) -> ResolveDisplayStatusUseCase:
    """Get display status use case."""
    return ResolveDisplayStatusUseCase(settings.engine)


def get_check_stock_status_use_case() -> CheckStockStatusUseCase:
    """Get stock status use case."""
    return CheckStockStatusUseCase()
