"""Stock domain entities."""

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator

from textile_ledger.core.numbers import ZERO, to_decimal


class StockStatus(str, Enum):
    """Availability of a product in a warehouse."""

    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


class MeasuringUnit(str, Enum):
    """Units textile stock is measured in."""

    METRE = "metre"
    YARD = "yard"
    KILOGRAM = "kilogram"
    UNIT = "unit"


class MovementKind(str, Enum):
    """Goods movement direction."""

    INWARD = "inward"
    OUTWARD = "outward"


class UnitQuantity(BaseModel):
    """A quantity tagged with its (abbreviated) unit."""

    unit: str
    quantity: Decimal = ZERO

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> Decimal:
        return to_decimal(v)
