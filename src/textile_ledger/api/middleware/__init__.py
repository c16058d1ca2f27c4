"""API middleware."""

from textile_ledger.api.middleware.error_handler import ErrorHandlerMiddleware
from textile_ledger.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
