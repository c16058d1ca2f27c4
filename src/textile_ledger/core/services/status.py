"""
Display-status resolution for orders and invoices.

"Overdue" is never persisted. It is derived at read time by comparing the
due date with the evaluation date, so no background job has to flip rows.
Every resolver takes ``now`` explicitly and falls back to the system clock
only when it is omitted.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, TypeVar

from textile_ledger.core.entities.invoice import (
    Invoice,
    InvoiceDisplayStatus,
    InvoiceStatus,
    InvoiceStatusView,
)
from textile_ledger.core.entities.order import (
    Order,
    OrderDisplayStatus,
    OrderStatus,
    OrderStatusView,
)
from textile_ledger.core.exceptions import InvalidStatusError
from textile_ledger.core.numbers import ZERO, to_date, to_decimal
from textile_ledger.core.services.formatting import (
    due_date_for_display,
    due_time_text,
    format_currency,
)

DEFAULT_DUE_SOON_DAYS = 14

E = TypeVar("E", bound=Enum)

ORDER_STATUS_LABELS: dict[OrderDisplayStatus, str] = {
    OrderDisplayStatus.APPROVAL_PENDING: "Approval Pending",
    OrderDisplayStatus.IN_PROGRESS: "In Progress",
    OrderDisplayStatus.OVERDUE: "Overdue",
    OrderDisplayStatus.COMPLETED: "Completed",
    OrderDisplayStatus.CANCELLED: "Cancelled",
}

INVOICE_STATUS_LABELS: dict[InvoiceDisplayStatus, str] = {
    InvoiceDisplayStatus.OPEN: "Open",
    InvoiceDisplayStatus.PARTIALLY_PAID: "Partially Paid",
    InvoiceDisplayStatus.PAID: "Paid",
    InvoiceDisplayStatus.OVERDUE: "Overdue",
    InvoiceDisplayStatus.CANCELLED: "Cancelled",
}


def resolve_today(now: date | datetime | None = None) -> date:
    """Date-only evaluation instant; time of day is dropped."""
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now


def _parse_status(enum_cls: type[E], value: Any, domain: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidStatusError(domain, value, [s.value for s in enum_cls]) from None


def get_order_display_status(
    status: OrderStatus | str,
    due_date: date | str | None,
    now: date | datetime | None = None,
    window_days: int = DEFAULT_DUE_SOON_DAYS,
) -> OrderStatusView:
    """
    Overlay the due date onto a persisted order status.

    completed, cancelled and approval_pending display as themselves.
    in_progress displays as overdue once the due date is strictly before
    today; an order due today is still on time.

    Args:
        status: Persisted order status.
        due_date: Expected delivery date, if any.
        now: Evaluation instant (defaults to today).
        window_days: How far ahead a due date earns a "Due in N days" label.

    Raises:
        InvalidStatusError: If status is not an order status.
    """
    persisted = _parse_status(OrderStatus, status, "order")

    if persisted != OrderStatus.IN_PROGRESS:
        display = OrderDisplayStatus(persisted.value)
        return OrderStatusView(status=display, text=ORDER_STATUS_LABELS[display])

    due = to_date(due_date)
    if due is not None:
        today = resolve_today(now)
        text = due_time_text(due, today, window_days)
        if text is not None:
            display = OrderDisplayStatus.OVERDUE if due < today else OrderDisplayStatus.IN_PROGRESS
            return OrderStatusView(status=display, text=text)

    return OrderStatusView(
        status=OrderDisplayStatus.IN_PROGRESS,
        text=ORDER_STATUS_LABELS[OrderDisplayStatus.IN_PROGRESS],
    )


def get_invoice_display_status(
    status: InvoiceStatus | str,
    due_date: date | str | None,
    now: date | datetime | None = None,
    outstanding_amount: Any = None,
    window_days: int = DEFAULT_DUE_SOON_DAYS,
) -> InvoiceStatusView:
    """
    Overlay the due date onto a persisted invoice status.

    paid and cancelled are absorbing. open and partially_paid display as
    overdue once the due date is strictly before today. When an outstanding
    amount is given and nothing is left to pay, the date is ignored.

    Raises:
        InvalidStatusError: If status is not an invoice status.
    """
    persisted = _parse_status(InvoiceStatus, status, "invoice")

    if persisted in (InvoiceStatus.PAID, InvoiceStatus.CANCELLED):
        display = InvoiceDisplayStatus(persisted.value)
        return InvoiceStatusView(status=display, text=INVOICE_STATUS_LABELS[display])

    due = to_date(due_date)
    today = resolve_today(now)

    if persisted == InvoiceStatus.OVERDUE:
        text = due_time_text(due, today, window_days) if due is not None else None
        return InvoiceStatusView(
            status=InvoiceDisplayStatus.OVERDUE,
            text=text or INVOICE_STATUS_LABELS[InvoiceDisplayStatus.OVERDUE],
        )

    base = InvoiceDisplayStatus(persisted.value)
    has_balance = outstanding_amount is None or to_decimal(outstanding_amount) > ZERO

    if due is not None and has_balance:
        text = due_time_text(due, today, window_days)
        if text is not None:
            display = InvoiceDisplayStatus.OVERDUE if due < today else base
            return InvoiceStatusView(status=display, text=text)

    return InvoiceStatusView(status=base, text=INVOICE_STATUS_LABELS[base])


def order_display_status(
    order: Order,
    now: date | datetime | None = None,
    window_days: int = DEFAULT_DUE_SOON_DAYS,
) -> OrderStatusView:
    """Display status for an order snapshot."""
    return get_order_display_status(
        order.status, order.expected_delivery_date, now, window_days
    )


def invoice_display_status(
    invoice: Invoice,
    now: date | datetime | None = None,
    window_days: int = DEFAULT_DUE_SOON_DAYS,
) -> InvoiceStatusView:
    """Display status for an invoice snapshot, honouring its balance."""
    return get_invoice_display_status(
        invoice.status,
        invoice.due_date,
        now,
        outstanding_amount=invoice.outstanding_amount,
        window_days=window_days,
    )


def invoice_info(
    invoice: Invoice,
    now: date | datetime | None = None,
    window_days: int = DEFAULT_DUE_SOON_DAYS,
) -> str:
    """One-line summary such as "Due in 3 days • Outstanding: 1,250"."""
    parts: list[str] = []
    if invoice.due_date is not None:
        parts.append(due_date_for_display(invoice.due_date, resolve_today(now), window_days))
    if invoice.outstanding_amount is not None and invoice.outstanding_amount > ZERO:
        parts.append(f"Outstanding: {format_currency(invoice.outstanding_amount)}")
    return " • ".join(parts)
