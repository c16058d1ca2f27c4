"""Tests for invoice entities."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from textile_ledger.core.entities import (
    BreakdownRow,
    BreakdownRowKind,
    DirectTaxType,
    DiscountType,
    Invoice,
    InvoiceBreakdown,
    InvoiceStatus,
    InvoiceTaxType,
)


class TestInvoiceStatus:
    def test_settled_alias(self):
        assert InvoiceStatus("settled") is InvoiceStatus.PAID

    def test_settled_case_insensitive(self):
        assert InvoiceStatus("Settled") is InvoiceStatus.PAID


class TestInvoice:
    """Tests for Invoice entity."""

    def test_defaults(self):
        invoice = Invoice()
        assert invoice.status == InvoiceStatus.OPEN
        assert invoice.tax_type == InvoiceTaxType.NO_TAX
        assert invoice.total_amount == Decimal("0")
        assert invoice.outstanding_amount is None

    def test_numeric_none_coercion(self):
        """Test that None numeric fields are coerced to 0."""
        invoice = Invoice(total_amount=None, outstanding_amount=None, round_off_amount="")
        assert invoice.total_amount == Decimal("0")
        assert invoice.outstanding_amount is None
        assert invoice.round_off_amount == Decimal("0")

    def test_outstanding_amount_kept_when_given(self):
        assert Invoice(outstanding_amount="0").outstanding_amount == Decimal("0")
        assert Invoice(outstanding_amount="1,250.50").outstanding_amount == Decimal("1250.50")

    def test_amount_strings(self):
        invoice = Invoice(total_amount="1,20,000.50")
        assert invoice.total_amount == Decimal("120000.50")

    def test_settled_status(self):
        assert Invoice(status="settled").status == InvoiceStatus.PAID

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Invoice(status="void")

    def test_null_enums_fall_back_to_defaults(self):
        invoice = Invoice(tax_type=None, discount_type=None, direct_tax_type="")
        assert invoice.tax_type == InvoiceTaxType.NO_TAX
        assert invoice.discount_type == DiscountType.NONE
        assert invoice.direct_tax_type == DirectTaxType.NONE

    def test_total_tax_amount(self, sample_invoice_data):
        invoice = Invoice.model_validate(sample_invoice_data)
        assert invoice.total_tax_amount == Decimal("45.00")


class TestInvoiceBreakdown:
    def test_row_lookup(self):
        breakdown = InvoiceBreakdown(
            rows=[
                BreakdownRow(kind=BreakdownRowKind.SUBTOTAL, label="Subtotal", amount=Decimal("1")),
            ]
        )
        assert breakdown.row(BreakdownRowKind.SUBTOTAL).label == "Subtotal"
        assert breakdown.row(BreakdownRowKind.IGST) is None
