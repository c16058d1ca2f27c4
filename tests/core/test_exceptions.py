"""Tests for domain exceptions."""

from textile_ledger.core.exceptions import (
    ConfigurationError,
    InvalidStatusError,
    LedgerError,
    ValidationError,
)


class TestLedgerError:
    def test_defaults_code_to_class_name(self):
        err = LedgerError("boom")
        assert err.message == "boom"
        assert err.code == "LedgerError"
        assert err.details == {}
        assert str(err) == "boom"

    def test_to_dict(self):
        err = LedgerError("boom", code="X", details={"a": 1})
        assert err.to_dict() == {"error": "X", "message": "boom", "details": {"a": 1}}


class TestValidationError:
    def test_fields(self):
        err = ValidationError("discount_type", "must be one of: none", "bogus")
        assert err.code == "VALIDATION_ERROR"
        assert "discount_type" in err.message
        assert err.details["field"] == "discount_type"
        assert err.details["value"] == "bogus"

    def test_long_value_is_truncated(self):
        err = ValidationError("x", "bad", "v" * 500)
        assert len(err.details["value"]) == 100

    def test_none_value(self):
        assert ValidationError("x", "bad").details["value"] is None


class TestInvalidStatusError:
    def test_is_validation_error(self):
        err = InvalidStatusError("order", "shipped", ["in_progress", "completed"])
        assert isinstance(err, ValidationError)
        assert isinstance(err, LedgerError)

    def test_code_and_details(self):
        err = InvalidStatusError("invoice", "void", ["open", "paid"])
        assert err.code == "INVALID_STATUS"
        assert err.details["domain"] == "invoice"
        assert err.details["allowed"] == ["open", "paid"]
        assert "void" in err.message


class TestConfigurationError:
    def test_inherits_base(self):
        err = ConfigurationError("missing")
        assert isinstance(err, LedgerError)
        assert err.code == "ConfigurationError"
