"""Tests for Decimal and date coercion helpers."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from textile_ledger.core.numbers import HUNDRED, ZERO, clamp, to_date, to_decimal


class TestToDecimal:
    @pytest.mark.parametrize("value", [None, "", "  ", "null", "NaN", "abc", object()])
    def test_empty_and_invalid_become_zero(self, value):
        assert to_decimal(value) == ZERO

    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_int(self):
        assert to_decimal(42) == Decimal(42)

    def test_thousands_separators(self):
        assert to_decimal("12,34,567.50") == Decimal("1234567.50")

    def test_decimal_passthrough(self):
        value = Decimal("1.005")
        assert to_decimal(value) is value

    def test_non_finite_become_zero(self):
        assert to_decimal(Decimal("Infinity")) == ZERO
        assert to_decimal(float("inf")) == ZERO

    def test_negative_kept(self):
        assert to_decimal("-5") == Decimal("-5")


class TestClamp:
    def test_below_low(self):
        assert clamp(Decimal("-1")) == ZERO

    def test_above_high(self):
        assert clamp(Decimal("150"), ZERO, HUNDRED) == HUNDRED

    def test_open_top(self):
        assert clamp(Decimal("1e9")) == Decimal("1e9")


class TestToDate:
    def test_none(self):
        assert to_date(None) is None

    def test_date_passthrough(self):
        d = date(2026, 10, 19)
        assert to_date(d) is d

    def test_datetime_drops_time(self):
        assert to_date(datetime(2026, 10, 19, 23, 59)) == date(2026, 10, 19)

    def test_iso_string(self):
        assert to_date("2026-10-19") == date(2026, 10, 19)

    def test_iso_timestamp(self):
        assert to_date("2026-10-19T18:30:00+00:00") == date(2026, 10, 19)

    def test_day_first(self):
        assert to_date("19/10/2026") == date(2026, 10, 19)

    def test_unparseable(self):
        assert to_date("next week") is None
        assert to_date("") is None
