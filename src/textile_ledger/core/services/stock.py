"""
Stock helpers: availability status, unit labels and movement numbers.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from textile_ledger.core.entities.stock import (
    MeasuringUnit,
    MovementKind,
    StockStatus,
    UnitQuantity,
)
from textile_ledger.core.numbers import ZERO, to_decimal

MEASURING_UNIT_ABBREVIATIONS: dict[MeasuringUnit, str] = {
    MeasuringUnit.METRE: "mtr",
    MeasuringUnit.YARD: "yd",
    MeasuringUnit.KILOGRAM: "kg",
    MeasuringUnit.UNIT: "unit",
}

# Only countable abbreviations take a plural
_PLURALS = {"pc": "pcs", "unit": "units"}

MOVEMENT_PREFIXES: dict[MovementKind, str] = {
    MovementKind.INWARD: "GI",
    MovementKind.OUTWARD: "GO",
}


def calculate_stock_status(
    in_stock_quantity: Any,
    min_stock_threshold: Any = None,
) -> StockStatus:
    """
    Availability for a quantity on hand.

    Out of stock at or below zero; low stock at or below the threshold when
    one is set; in stock otherwise.
    """
    quantity = to_decimal(in_stock_quantity)
    if quantity <= ZERO:
        return StockStatus.OUT_OF_STOCK
    if min_stock_threshold is not None:
        threshold = to_decimal(min_stock_threshold)
        if threshold > ZERO and quantity <= threshold:
            return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def measuring_unit_abbreviation(unit: MeasuringUnit | str | None) -> str:
    """Short label for a unit; stock without a unit is counted in pieces."""
    if not unit:
        return "pc"
    try:
        return MEASURING_UNIT_ABBREVIATIONS[MeasuringUnit(unit)]
    except ValueError:
        return str(unit)


def pluralize_unit_abbreviation(quantity: Any, abbreviation: str) -> str:
    if to_decimal(quantity) == 1:
        return abbreviation
    return _PLURALS.get(abbreviation, abbreviation)


def aggregate_quantities_by_unit(items: Iterable[UnitQuantity]) -> dict[str, Decimal]:
    """Total quantity per unit, in first-seen order."""
    totals: dict[str, Decimal] = {}
    for item in items:
        totals[item.unit] = totals.get(item.unit, ZERO) + item.quantity
    return totals


def format_quantities_by_unit(totals: dict[str, Decimal], hide_zeros: bool = True) -> str:
    """
    Join per-unit totals with " + ".

    Example: {"mtr": 100, "kg": 50} -> "100.00 mtr + 50.00 kg"
    """
    entries = [
        f"{to_decimal(qty):.2f} {unit}"
        for unit, qty in totals.items()
        if not hide_zeros or to_decimal(qty) > ZERO
    ]
    return " + ".join(entries) if entries else "0"


def movement_number(kind: MovementKind | str, sequence_number: int) -> str:
    """GI-123 for goods inward, GO-456 for goods outward."""
    return f"{MOVEMENT_PREFIXES[MovementKind(kind)]}-{sequence_number}"
