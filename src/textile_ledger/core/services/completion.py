"""Order completion progress from required vs dispatched quantities."""

from collections.abc import Iterable
from decimal import Decimal

from textile_ledger.core.entities.order import Order, OrderLine
from textile_ledger.core.numbers import HUNDRED, ZERO, clamp
from textile_ledger.core.services.formatting import round_percent


def completion_totals(lines: Iterable[OrderLine]) -> tuple[Decimal, Decimal]:
    """Total required and total dispatched; negative quantities count as 0."""
    total_required = ZERO
    total_dispatched = ZERO
    for line in lines:
        total_required += max(line.required_quantity, ZERO)
        total_dispatched += max(line.dispatched_quantity, ZERO)
    return total_required, total_dispatched


def calculate_completion_percentage(lines: Iterable[OrderLine]) -> int:
    """
    Whole-number completion percentage across all lines, in [0, 100].

    Returns 0 when nothing is required. Over-dispatch from upstream
    rounding is clamped to 100.
    """
    total_required, total_dispatched = completion_totals(lines)
    if total_required <= ZERO:
        return 0
    percentage = total_dispatched / total_required * HUNDRED
    return round_percent(clamp(percentage, ZERO, HUNDRED))


def order_completion_percentage(order: Order) -> int:
    return calculate_completion_percentage(order.lines)


def pending_quantity(lines: Iterable[OrderLine]) -> Decimal:
    """Quantity still outstanding across all lines."""
    return sum((line.pending_quantity for line in lines), ZERO)
