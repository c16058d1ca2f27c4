"""
Sales and purchase order entities.

Numeric fields are Decimal and never None; snapshots come from the
persistence layer and are only read here.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from textile_ledger.core.numbers import ZERO, to_date, to_decimal


class OrderType(str, Enum):
    """Direction of an order."""

    SALES = "sales"
    PURCHASE = "purchase"


class OrderStatus(str, Enum):
    """Persisted order state."""

    APPROVAL_PENDING = "approval_pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderDisplayStatus(str, Enum):
    """Order status as shown to users; OVERDUE is never persisted."""

    APPROVAL_PENDING = "approval_pending"
    IN_PROGRESS = "in_progress"
    OVERDUE = "overdue"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class DiscountType(str, Enum):
    """Discount policy applied to an order or invoice subtotal."""

    NONE = "none"
    PERCENTAGE = "percentage"
    FLAT_AMOUNT = "flat_amount"


class OrderLine(BaseModel):
    """
    A product row within an order.

    Purchase orders report progress as ``received_quantity``; it is read
    into ``dispatched_quantity`` so both order types share one shape.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    product_name: str | None = None
    required_quantity: Decimal = ZERO
    dispatched_quantity: Decimal = Field(
        default=ZERO,
        validation_alias=AliasChoices("dispatched_quantity", "received_quantity"),
    )
    unit_rate: Decimal = Field(
        default=ZERO,
        validation_alias=AliasChoices("unit_rate", "rate"),
    )
    line_total: Decimal = ZERO  # persisted quantity * rate, not recomputed

    @field_validator(
        "required_quantity",
        "dispatched_quantity",
        "unit_rate",
        "line_total",
        mode="before",
    )
    @classmethod
    def coerce_numeric(cls, v: Any) -> Decimal:
        """Convert None/empty/invalid to 0."""
        return to_decimal(v)

    @property
    def pending_quantity(self) -> Decimal:
        """Quantity still to be dispatched (or received), never negative."""
        return max(self.required_quantity - self.dispatched_quantity, ZERO)


class Order(BaseModel):
    """Sales or purchase order snapshot."""

    id: str | None = None
    order_number: str | None = None
    order_type: OrderType = OrderType.SALES
    status: OrderStatus = OrderStatus.APPROVAL_PENDING
    order_date: date | None = None
    expected_delivery_date: date | None = None

    discount_type: DiscountType = DiscountType.NONE
    discount_value: Decimal = ZERO
    gst_rate: Decimal | None = None  # engine default when unset

    lines: list[OrderLine] = Field(default_factory=list)

    @field_validator("order_date", "expected_delivery_date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> date | None:
        return to_date(v)

    @field_validator("discount_value", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> Decimal:
        return to_decimal(v)

    @field_validator("gst_rate", mode="before")
    @classmethod
    def coerce_gst_rate(cls, v: Any) -> Decimal | None:
        return None if v is None or v == "" else to_decimal(v)

    @field_validator("discount_type", mode="before")
    @classmethod
    def default_discount_type(cls, v: Any) -> Any:
        """Rows without a discount store NULL."""
        return DiscountType.NONE if v in (None, "") else v

    @property
    def item_total(self) -> Decimal:
        """Sum of persisted line totals, before discount."""
        return sum((line.line_total for line in self.lines), ZERO)

    @property
    def lines_count(self) -> int:
        return len(self.lines)


class OrderFinancials(BaseModel):
    """Order-level totals at full precision."""

    item_total: Decimal = ZERO
    discount_amount: Decimal = ZERO
    after_discount: Decimal = ZERO
    gst_amount: Decimal = ZERO
    total_amount: Decimal = ZERO


class OrderStatusView(BaseModel):
    """Display status plus its label."""

    status: OrderDisplayStatus
    text: str

    @property
    def is_overdue(self) -> bool:
        return self.status == OrderDisplayStatus.OVERDUE
