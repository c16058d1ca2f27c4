"""Tests for presentation formatting."""

from datetime import date
from decimal import Decimal

import pytest

from textile_ledger.core.services import (
    amount_in_words,
    due_date_for_display,
    due_time_text,
    format_currency,
    round_currency,
    round_percent,
)

TODAY = date(2026, 10, 19)


class TestRounding:
    def test_round_currency_half_up(self):
        assert round_currency(Decimal("2.675")) == Decimal("2.68")
        assert round_currency(Decimal("2.665")) == Decimal("2.67")

    def test_round_currency_negative(self):
        assert round_currency(Decimal("-1.005")) == Decimal("-1.01")

    def test_round_currency_none(self):
        assert round_currency(None) == Decimal("0.00")

    def test_round_percent(self):
        assert round_percent(Decimal("12.5")) == 13
        assert round_percent(Decimal("47.09")) == 47


class TestFormatCurrency:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (Decimal("0"), "0"),
            (Decimal("999"), "999"),
            (Decimal("1000"), "1,000"),
            (Decimal("100000"), "1,00,000"),
            (Decimal("1234567.5"), "12,34,567.5"),
            (Decimal("123456789.05"), "12,34,56,789.05"),
            (Decimal("-42.125"), "-42.13"),
        ],
    )
    def test_indian_grouping(self, value, expected):
        assert format_currency(value) == expected


class TestAmountInWords:
    def test_rupees_and_paise(self):
        assert amount_in_words(Decimal("25.50")) == "twenty five rupees and fifty paise only"

    def test_single_rupee(self):
        assert amount_in_words(1) == "one rupee only"

    def test_lakh(self):
        words = amount_in_words(Decimal("100000"))
        assert words.startswith("one lakh")
        assert words.endswith("rupees only")

    def test_no_punctuation(self):
        words = amount_in_words(Decimal("1234567.89"))
        assert "," not in words
        assert "-" not in words


class TestDueTimeText:
    def test_today(self):
        assert due_time_text(TODAY, TODAY) == "Due today"

    def test_window_edge(self):
        assert due_time_text(date(2026, 11, 2), TODAY) == "Due in 14 days"
        assert due_time_text(date(2026, 11, 3), TODAY) is None

    def test_overdue_always_shown(self):
        assert due_time_text(date(2025, 10, 19), TODAY) == "Overdue by 365 days"

    def test_display_beyond_window(self):
        assert due_date_for_display(date(2026, 11, 5), TODAY) == "Due on 5 Nov 2026"
