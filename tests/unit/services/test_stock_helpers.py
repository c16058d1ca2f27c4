"""Tests for stock helpers."""

from decimal import Decimal

import pytest

from textile_ledger.core.entities import MeasuringUnit, MovementKind, StockStatus, UnitQuantity
from textile_ledger.core.services import (
    aggregate_quantities_by_unit,
    calculate_stock_status,
    format_quantities_by_unit,
    measuring_unit_abbreviation,
    movement_number,
    pluralize_unit_abbreviation,
)


class TestCalculateStockStatus:
    @pytest.mark.parametrize(
        "quantity,threshold,expected",
        [
            (0, None, StockStatus.OUT_OF_STOCK),
            (-3, 10, StockStatus.OUT_OF_STOCK),
            (5, 10, StockStatus.LOW_STOCK),
            (10, 10, StockStatus.LOW_STOCK),
            (11, 10, StockStatus.IN_STOCK),
            (5, None, StockStatus.IN_STOCK),
            (5, 0, StockStatus.IN_STOCK),
        ],
    )
    def test_status(self, quantity, threshold, expected):
        assert calculate_stock_status(quantity, threshold) == expected


class TestUnits:
    def test_abbreviations(self):
        assert measuring_unit_abbreviation(MeasuringUnit.METRE) == "mtr"
        assert measuring_unit_abbreviation("yard") == "yd"
        assert measuring_unit_abbreviation("kilogram") == "kg"
        assert measuring_unit_abbreviation(None) == "pc"

    def test_unknown_unit_passes_through(self):
        assert measuring_unit_abbreviation("roll") == "roll"

    def test_pluralize(self):
        assert pluralize_unit_abbreviation(1, "pc") == "pc"
        assert pluralize_unit_abbreviation(2, "pc") == "pcs"
        assert pluralize_unit_abbreviation(0, "unit") == "units"
        assert pluralize_unit_abbreviation(2, "mtr") == "mtr"


class TestQuantitiesByUnit:
    def test_aggregate_and_format(self):
        totals = aggregate_quantities_by_unit(
            [
                UnitQuantity(unit="mtr", quantity=60),
                UnitQuantity(unit="kg", quantity=50),
                UnitQuantity(unit="mtr", quantity=40),
            ]
        )
        assert totals == {"mtr": Decimal("100"), "kg": Decimal("50")}
        assert format_quantities_by_unit(totals) == "100.00 mtr + 50.00 kg"

    def test_zeros_hidden(self):
        assert format_quantities_by_unit({"mtr": Decimal("0"), "kg": Decimal("2")}) == "2.00 kg"

    def test_zeros_shown(self):
        text = format_quantities_by_unit({"mtr": Decimal("0")}, hide_zeros=False)
        assert text == "0.00 mtr"

    def test_empty(self):
        assert format_quantities_by_unit({}) == "0"


class TestMovementNumber:
    def test_prefixes(self):
        assert movement_number(MovementKind.INWARD, 123) == "GI-123"
        assert movement_number("outward", 456) == "GO-456"
