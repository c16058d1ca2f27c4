"""
Presentation formatting.

The only place currency and percentages are rounded. Engine results stay
at full precision until they pass through here.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from num2words import num2words

from textile_ledger.core.numbers import to_decimal

CENT = Decimal("0.01")


def round_currency(value: Any) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def round_percent(value: Any) -> int:
    """Round a percentage to a whole number, half away from zero."""
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _group_indian(digits: str) -> str:
    """Group an integer digit string as 12,34,56,789."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(value: Any) -> str:
    """
    Format an amount with Indian digit grouping and 0-2 fraction digits.

    Examples:
        1234567.5 -> "12,34,567.5"
        1000 -> "1,000"
        -42.125 -> "-42.13"
    """
    amount = round_currency(value)
    sign = "-" if amount < 0 else ""
    integer_part, _, fraction = f"{abs(amount):.2f}".partition(".")
    fraction = fraction.rstrip("0")
    text = _group_indian(integer_part)
    if fraction:
        text = f"{text}.{fraction}"
    return f"{sign}{text}"


def _words(n: int) -> str:
    return num2words(n, lang="en_IN").replace("-", " ").replace(",", "")


def amount_in_words(value: Any) -> str:
    """
    Spell an amount in the Indian numbering system.

    >>> amount_in_words(Decimal("25.50"))
    'twenty five rupees and fifty paise only'
    """
    amount = abs(round_currency(value))
    rupees = int(amount)
    paise = int((amount - rupees) * 100)

    words = f"{_words(rupees)} {'rupee' if rupees == 1 else 'rupees'}"
    if paise:
        words += f" and {_words(paise)} paise"
    return f"{words} only"


def due_time_text(due_date: date, today: date, window_days: int = 14) -> str | None:
    """
    Relative due phrase, or None when the due date is beyond the window.

    Past due dates always produce a phrase.
    """
    days = (due_date - today).days
    if days < 0:
        late = -days
        return f"Overdue by {late} {'day' if late == 1 else 'days'}"
    if days == 0:
        return "Due today"
    if days == 1:
        return "Due tomorrow"
    if days <= window_days:
        return f"Due in {days} days"
    return None


def due_date_for_display(due_date: date, today: date, window_days: int = 14) -> str:
    """Relative phrase inside the window, absolute date beyond it."""
    text = due_time_text(due_date, today, window_days)
    if text is not None:
        return text
    return f"Due on {due_date.day} {due_date:%b %Y}"
