"""
Decimal coercion and clamping shared by entities and services.

Currency arithmetic stays in full-precision Decimal; rounding happens only
in textile_ledger.core.services.formatting.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")
HUNDRED = Decimal("100")

_NULL_STRINGS = {"none", "nan", "null", ""}
_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%m/%d/%Y", "%d-%m-%Y")


def to_decimal(value: Any) -> Decimal:
    """Convert None/empty/invalid to Decimal 0; floats go through str()."""
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, int):
        return Decimal(value)
    try:
        s = str(value).strip().replace(",", "")
        if s.lower() in _NULL_STRINGS:
            return ZERO
        result = Decimal(s)
    except (InvalidOperation, ValueError, TypeError):
        return ZERO
    return result if result.is_finite() else ZERO


def clamp(value: Decimal, low: Decimal = ZERO, high: Decimal | None = None) -> Decimal:
    """Clamp value into [low, high]; high=None leaves the top open."""
    if value < low:
        return low
    if high is not None and value > high:
        return high
    return value


def to_date(value: Any) -> date | None:
    """Convert string/datetime to date, accepting ISO or common formats."""
    if value is None:
        return None
    # datetime is a date subclass, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        v = value.strip()
        if v.lower() in _NULL_STRINGS:
            return None
        # ISO timestamps from the database ("2026-10-19T00:00:00+00:00")
        if len(v) > 10 and v[10] in "T ":
            v = v[:10]
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(v, fmt).date()
            except ValueError:
                continue
    return None
