"""
Domain exceptions for the Textile Ledger application.

The derivation engine clamps bad numbers instead of raising; these types
cover the remaining contract violations and the service surface.
"""

from typing import Any


class LedgerError(Exception):
    """Base exception for all Textile Ledger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(LedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidStatusError(ValidationError):
    """A status string is not a member of its status domain."""

    def __init__(self, domain: str, value: Any, allowed: list[str]):
        super().__init__(
            field="status",
            message=f"Unknown {domain} status '{value}'. Allowed: {', '.join(allowed)}",
            value=value,
        )
        self.code = "INVALID_STATUS"
        self.details.update({"domain": domain, "allowed": allowed})


class ConfigurationError(LedgerError):
    """Configuration error."""

    pass
