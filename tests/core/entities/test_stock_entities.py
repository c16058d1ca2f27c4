"""Tests for stock entities."""

from decimal import Decimal

from textile_ledger.core.entities import MeasuringUnit, StockStatus, UnitQuantity


class TestUnitQuantity:
    def test_quantity_coerced(self):
        assert UnitQuantity(unit="mtr", quantity="1,250.5").quantity == Decimal("1250.5")

    def test_none_quantity(self):
        assert UnitQuantity(unit="kg", quantity=None).quantity == Decimal("0")


class TestEnums:
    def test_stock_status_values(self):
        assert {s.value for s in StockStatus} == {"in_stock", "low_stock", "out_of_stock"}

    def test_measuring_unit_values(self):
        assert MeasuringUnit("metre") is MeasuringUnit.METRE
