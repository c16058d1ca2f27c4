"""
Invoice domain entities with Pydantic v2 validation.

Invoice totals are computed and persisted upstream. Every numeric field is
coerced to Decimal and defaults to 0, except the outstanding balance, which
stays None when a snapshot omits it.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from textile_ledger.core.entities.order import DiscountType
from textile_ledger.core.numbers import ZERO, to_date, to_decimal


class InvoiceType(str, Enum):
    """Invoice direction."""

    SALES = "sales"
    PURCHASE = "purchase"


class InvoiceStatus(str, Enum):
    """Persisted invoice state, independent of the date."""

    OPEN = "open"
    PARTIALLY_PAID = "partially_paid"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"

    @classmethod
    def _missing_(cls, value: object) -> "InvoiceStatus | None":
        # Older rows call a fully paid invoice "settled"
        if isinstance(value, str) and value.strip().lower() == "settled":
            return cls.PAID
        return None


class InvoiceDisplayStatus(str, Enum):
    """Invoice status as shown to users."""

    OPEN = "open"
    PARTIALLY_PAID = "partially_paid"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class InvoiceTaxType(str, Enum):
    """Indirect tax regime of an invoice."""

    NO_TAX = "no_tax"
    GST = "gst"  # intra-state: CGST + SGST
    IGST = "igst"  # inter-state


class DirectTaxType(str, Enum):
    """Tax withheld (TDS) or collected (TCS) at source."""

    NONE = "none"
    TDS = "tds"
    TCS = "tcs"


class Invoice(BaseModel):
    """
    Persisted invoice snapshot.

    Amount fields are read through as given; only paid amount and payment
    progress are derived from them.
    """

    id: str | None = None
    invoice_number: str | None = None
    invoice_type: InvoiceType = InvoiceType.SALES
    status: InvoiceStatus = InvoiceStatus.OPEN
    invoice_date: date | None = None
    due_date: date | None = None

    tax_type: InvoiceTaxType = InvoiceTaxType.NO_TAX
    discount_type: DiscountType = DiscountType.NONE
    discount_value: Decimal = ZERO
    direct_tax_type: DirectTaxType = DirectTaxType.NONE
    direct_tax_rate: Decimal = ZERO

    # Persisted totals - NEVER None
    subtotal_amount: Decimal = ZERO
    discount_amount: Decimal = ZERO
    taxable_amount: Decimal = ZERO
    total_cgst_amount: Decimal = ZERO
    total_sgst_amount: Decimal = ZERO
    total_igst_amount: Decimal = ZERO
    direct_tax_amount: Decimal = ZERO
    round_off_amount: Decimal = ZERO
    total_amount: Decimal = ZERO
    # None when the snapshot carries no balance
    outstanding_amount: Decimal | None = None

    @field_validator("invoice_date", "due_date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> date | None:
        return to_date(v)

    @field_validator(
        "discount_value",
        "direct_tax_rate",
        "subtotal_amount",
        "discount_amount",
        "taxable_amount",
        "total_cgst_amount",
        "total_sgst_amount",
        "total_igst_amount",
        "direct_tax_amount",
        "round_off_amount",
        "total_amount",
        mode="before",
    )
    @classmethod
    def coerce_numeric(cls, v: Any) -> Decimal:
        """Convert None/empty/invalid to 0."""
        return to_decimal(v)

    @field_validator("outstanding_amount", mode="before")
    @classmethod
    def coerce_outstanding(cls, v: Any) -> Decimal | None:
        if v is None or v == "":
            return None
        return to_decimal(v)

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, v: Any) -> Any:
        """Resolve through InvoiceStatus so legacy aliases apply."""
        return InvoiceStatus(v) if isinstance(v, str) else v

    @field_validator("discount_type", "direct_tax_type", "tax_type", mode="before")
    @classmethod
    def default_null_enum(cls, v: Any, info: ValidationInfo) -> Any:
        """NULL enum columns fall back to the field default."""
        if v in (None, ""):
            return cls.model_fields[info.field_name].default
        return v

    @property
    def total_tax_amount(self) -> Decimal:
        """CGST + SGST + IGST."""
        return self.total_cgst_amount + self.total_sgst_amount + self.total_igst_amount


class BreakdownRowKind(str, Enum):
    """Row types in an invoice totals block."""

    SUBTOTAL = "subtotal"
    DISCOUNT = "discount"
    TAXABLE = "taxable"
    CGST = "cgst"
    SGST = "sgst"
    IGST = "igst"
    DIRECT_TAX = "direct_tax"
    ROUND_OFF = "round_off"
    GRAND_TOTAL = "grand_total"


class BreakdownRow(BaseModel):
    """Single labelled amount; deductions carry a negative amount."""

    kind: BreakdownRowKind
    label: str
    amount: Decimal


class InvoiceBreakdown(BaseModel):
    """Consistent totals view of an invoice plus payment progress."""

    subtotal_amount: Decimal = ZERO
    discount_amount: Decimal = ZERO
    taxable_amount: Decimal = ZERO
    total_cgst_amount: Decimal = ZERO
    total_sgst_amount: Decimal = ZERO
    total_igst_amount: Decimal = ZERO
    direct_tax_amount: Decimal = ZERO
    round_off_amount: Decimal = ZERO
    total_amount: Decimal = ZERO
    outstanding_amount: Decimal = ZERO
    paid_amount: Decimal = ZERO
    payment_progress_percent: Decimal = ZERO
    rows: list[BreakdownRow] = Field(default_factory=list)

    def row(self, kind: BreakdownRowKind) -> BreakdownRow | None:
        """First row of the given kind, if shown."""
        return next((r for r in self.rows if r.kind == kind), None)


class InvoiceStatusView(BaseModel):
    """Display status plus its label."""

    status: InvoiceDisplayStatus
    text: str

    @property
    def is_overdue(self) -> bool:
        return self.status == InvoiceDisplayStatus.OVERDUE
