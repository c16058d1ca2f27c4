"""
Textile Ledger command line.

Usage:
    textile-ledger serve                      Start the API server
    textile-ledger financials 1000 --discount-type percentage --discount-value 10
    textile-ledger order-status in_progress --due 2026-10-18
    textile-ledger invoice-status open --due 2026-10-18 --outstanding 500
"""

import argparse
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import NoReturn

from textile_ledger.config import get_settings
from textile_ledger.core.entities import DiscountType
from textile_ledger.core.exceptions import LedgerError
from textile_ledger.core.numbers import to_date
from textile_ledger.core.services import (
    calculate_order_financials,
    format_currency,
    get_invoice_display_status,
    get_order_display_status,
)


def _date_arg(value: str) -> date:
    parsed = to_date(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"not a date: {value!r}")
    return parsed


def _decimal_arg(value: str) -> Decimal:
    try:
        parsed = Decimal(value.replace(",", ""))
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not parsed.is_finite():
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    return parsed


def _fail(error: LedgerError) -> NoReturn:
    print(f"error: {error.message}", file=sys.stderr)
    sys.exit(2)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "textile_ledger.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


def cmd_financials(args: argparse.Namespace) -> None:
    """Print order totals."""
    gst_rate = args.gst_rate if args.gst_rate is not None else get_settings().engine.default_gst_rate
    result = calculate_order_financials(
        args.item_total, args.discount_type, args.discount_value, gst_rate
    )
    rows = [
        ("Item Total", result.item_total),
        ("Discount", result.discount_amount),
        ("After Discount", result.after_discount),
        (f"GST ({gst_rate.normalize():f}%)", result.gst_amount),
        ("Total", result.total_amount),
    ]
    for label, amount in rows:
        print(f"{label:<16}{format_currency(amount):>16}")


def cmd_order_status(args: argparse.Namespace) -> None:
    """Print an order display status."""
    view = get_order_display_status(
        args.status, args.due, now=args.as_of, window_days=get_settings().engine.due_soon_days
    )
    print(f"{view.status.value}\t{view.text}")


def cmd_invoice_status(args: argparse.Namespace) -> None:
    """Print an invoice display status."""
    view = get_invoice_display_status(
        args.status,
        args.due,
        now=args.as_of,
        outstanding_amount=args.outstanding,
        window_days=get_settings().engine.due_soon_days,
    )
    print(f"{view.status.value}\t{view.text}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Textile Ledger CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    try:
        settings = get_settings()
    except LedgerError as e:
        _fail(e)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=settings.api.host, help="Bind host")
    p_serve.add_argument("--port", type=int, default=settings.api.port, help="Bind port")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # financials
    p_fin = sub.add_parser("financials", help="Order totals for an item total")
    p_fin.add_argument("item_total", type=_decimal_arg, help="Sum of line totals")
    p_fin.add_argument(
        "--discount-type",
        choices=[t.value for t in DiscountType],
        default=DiscountType.NONE.value,
    )
    p_fin.add_argument("--discount-value", type=_decimal_arg, default=Decimal("0"))
    p_fin.add_argument("--gst-rate", type=_decimal_arg, default=None, help="GST percentage")
    p_fin.set_defaults(func=cmd_financials)

    # order-status
    p_order = sub.add_parser("order-status", help="Order display status")
    p_order.add_argument("status", help="Persisted order status")
    p_order.add_argument("--due", type=_date_arg, default=None, help="Expected delivery date")
    p_order.add_argument("--as-of", type=_date_arg, default=None, help="Evaluation date")
    p_order.set_defaults(func=cmd_order_status)

    # invoice-status
    p_invoice = sub.add_parser("invoice-status", help="Invoice display status")
    p_invoice.add_argument("status", help="Persisted invoice status")
    p_invoice.add_argument("--due", type=_date_arg, default=None, help="Due date")
    p_invoice.add_argument("--outstanding", type=_decimal_arg, default=None)
    p_invoice.add_argument("--as-of", type=_date_arg, default=None, help="Evaluation date")
    p_invoice.set_defaults(func=cmd_invoice_status)

    args = parser.parse_args(argv)
    try:
        args.func(args)
    except LedgerError as e:
        _fail(e)


if __name__ == "__main__":
    main()
