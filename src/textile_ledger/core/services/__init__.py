"""Derivation engine: pure functions over order and invoice snapshots."""

from textile_ledger.core.services.completion import (
    calculate_completion_percentage,
    completion_totals,
    order_completion_percentage,
    pending_quantity,
)
from textile_ledger.core.services.financials import (
    build_invoice_breakdown,
    calculate_discount,
    calculate_order_financials,
    calculate_payment_progress,
    order_financials,
)
from textile_ledger.core.services.formatting import (
    amount_in_words,
    due_date_for_display,
    due_time_text,
    format_currency,
    round_currency,
    round_percent,
)
from textile_ledger.core.services.status import (
    get_invoice_display_status,
    get_order_display_status,
    invoice_display_status,
    invoice_info,
    order_display_status,
    resolve_today,
)
from textile_ledger.core.services.stock import (
    aggregate_quantities_by_unit,
    calculate_stock_status,
    format_quantities_by_unit,
    measuring_unit_abbreviation,
    movement_number,
    pluralize_unit_abbreviation,
)

__all__ = [
    # Financials
    "calculate_order_financials",
    "calculate_discount",
    "order_financials",
    "calculate_payment_progress",
    "build_invoice_breakdown",
    # Status
    "get_order_display_status",
    "get_invoice_display_status",
    "order_display_status",
    "invoice_display_status",
    "invoice_info",
    "resolve_today",
    # Completion
    "calculate_completion_percentage",
    "completion_totals",
    "order_completion_percentage",
    "pending_quantity",
    # Formatting
    "round_currency",
    "round_percent",
    "format_currency",
    "amount_in_words",
    "due_time_text",
    "due_date_for_display",
    # Stock
    "calculate_stock_status",
    "measuring_unit_abbreviation",
    "pluralize_unit_abbreviation",
    "aggregate_quantities_by_unit",
    "format_quantities_by_unit",
    "movement_number",
]
