"""
Order and invoice financial computations.

Pure functions over already-loaded snapshots. Out-of-range inputs are
clamped rather than rejected: these feed read models and previews, and
the persistence layer validates writes.
"""

from decimal import Decimal
from typing import Any

from textile_ledger.config import get_logger
from textile_ledger.core.entities.invoice import (
    BreakdownRow,
    BreakdownRowKind,
    Invoice,
    InvoiceBreakdown,
    InvoiceTaxType,
)
from textile_ledger.core.entities.order import DiscountType, Order, OrderFinancials
from textile_ledger.core.exceptions import ValidationError
from textile_ledger.core.numbers import HUNDRED, ZERO, clamp, to_decimal

logger = get_logger(__name__)

DEFAULT_GST_RATE = Decimal("10")


def _non_negative(name: str, value: Any) -> Decimal:
    amount = to_decimal(value)
    if amount < ZERO:
        logger.debug("financial_input_clamped", field=name, value=amount)
        return ZERO
    return amount


def calculate_discount(
    item_total: Any,
    discount_type: DiscountType | str,
    discount_value: Any,
) -> Decimal:
    """
    Discount for a subtotal.

    Percentages are bounded to [0, 100]; flat amounts to [0, item_total].
    """
    total = _non_negative("item_total", item_total)
    value = _non_negative("discount_value", discount_value)
    try:
        kind = DiscountType(discount_type)
    except ValueError:
        raise ValidationError(
            "discount_type",
            f"must be one of: {', '.join(t.value for t in DiscountType)}",
            discount_type,
        ) from None

    if kind == DiscountType.PERCENTAGE:
        if value > HUNDRED:
            logger.debug("discount_percentage_clamped", value=value)
        return total * clamp(value, ZERO, HUNDRED) / HUNDRED
    if kind == DiscountType.FLAT_AMOUNT:
        if value > total:
            logger.debug("discount_flat_clamped", value=value, item_total=total)
        return min(value, total)
    return ZERO


def calculate_order_financials(
    item_total: Any,
    discount_type: DiscountType | str,
    discount_value: Any,
    gst_rate: Any = DEFAULT_GST_RATE,
) -> OrderFinancials:
    """
    Calculate order totals: (item_total - discount) + GST.

    GST is charged on the post-discount amount.

    Args:
        item_total: Sum of all line totals before discount.
        discount_type: none, percentage or flat_amount.
        discount_value: Percentage (0-100) or currency amount.
        gst_rate: GST percentage of the post-discount amount.

    Returns:
        OrderFinancials at full precision.
    """
    total = _non_negative("item_total", item_total)
    rate = _non_negative("gst_rate", gst_rate)

    discount_amount = calculate_discount(total, discount_type, discount_value)
    after_discount = total - discount_amount
    gst_amount = after_discount * rate / HUNDRED

    return OrderFinancials(
        item_total=total,
        discount_amount=discount_amount,
        after_discount=after_discount,
        gst_amount=gst_amount,
        total_amount=after_discount + gst_amount,
    )


def order_financials(order: Order, default_gst_rate: Any = DEFAULT_GST_RATE) -> OrderFinancials:
    """Financials for an order; orders without their own GST rate use the default."""
    return calculate_order_financials(
        order.item_total,
        order.discount_type,
        order.discount_value,
        order.gst_rate if order.gst_rate is not None else default_gst_rate,
    )


def calculate_payment_progress(
    total_amount: Any,
    outstanding_amount: Any,
) -> tuple[Decimal, Decimal, Decimal]:
    """
    Paid amount and payment progress for an invoice.

    Returns:
        (outstanding, paid, progress_percent) with outstanding clamped to
        [0, total] and progress clamped to [0, 100].
    """
    total = _non_negative("total_amount", total_amount)
    outstanding = clamp(to_decimal(outstanding_amount), ZERO, total)
    paid = total - outstanding
    progress = clamp(paid / total * HUNDRED, ZERO, HUNDRED) if total > ZERO else ZERO
    return outstanding, paid, progress


def _rate_suffix(rate: Decimal) -> str:
    return f" ({rate.normalize():f}%)" if rate > ZERO else ""


def _breakdown_rows(invoice: Invoice) -> list[BreakdownRow]:
    rows = [
        BreakdownRow(
            kind=BreakdownRowKind.SUBTOTAL, label="Subtotal", amount=invoice.subtotal_amount
        )
    ]

    if invoice.discount_amount > ZERO:
        label = "Discount"
        if invoice.discount_type == DiscountType.PERCENTAGE:
            label += _rate_suffix(invoice.discount_value)
        rows.append(
            BreakdownRow(
                kind=BreakdownRowKind.DISCOUNT, label=label, amount=-invoice.discount_amount
            )
        )

    rows.append(
        BreakdownRow(
            kind=BreakdownRowKind.TAXABLE, label="Taxable Amount", amount=invoice.taxable_amount
        )
    )

    if invoice.tax_type == InvoiceTaxType.GST:
        if invoice.total_cgst_amount > ZERO:
            rows.append(
                BreakdownRow(
                    kind=BreakdownRowKind.CGST, label="CGST", amount=invoice.total_cgst_amount
                )
            )
        if invoice.total_sgst_amount > ZERO:
            rows.append(
                BreakdownRow(
                    kind=BreakdownRowKind.SGST, label="SGST", amount=invoice.total_sgst_amount
                )
            )
    elif invoice.tax_type == InvoiceTaxType.IGST and invoice.total_igst_amount > ZERO:
        rows.append(
            BreakdownRow(
                kind=BreakdownRowKind.IGST, label="IGST", amount=invoice.total_igst_amount
            )
        )

    if invoice.direct_tax_amount > ZERO:
        label = invoice.direct_tax_type.value.upper() + _rate_suffix(invoice.direct_tax_rate)
        rows.append(
            BreakdownRow(
                kind=BreakdownRowKind.DIRECT_TAX, label=label, amount=-invoice.direct_tax_amount
            )
        )

    if invoice.round_off_amount != ZERO:
        rows.append(
            BreakdownRow(
                kind=BreakdownRowKind.ROUND_OFF, label="Round Off", amount=invoice.round_off_amount
            )
        )

    rows.append(
        BreakdownRow(
            kind=BreakdownRowKind.GRAND_TOTAL, label="Grand Total", amount=invoice.total_amount
        )
    )
    return rows


def build_invoice_breakdown(invoice: Invoice) -> InvoiceBreakdown:
    """
    Assemble the persisted totals of an invoice into one view.

    Nothing is recomputed except paid amount and payment progress.
    """
    outstanding, paid, progress = calculate_payment_progress(
        invoice.total_amount, invoice.outstanding_amount
    )
    return InvoiceBreakdown(
        subtotal_amount=invoice.subtotal_amount,
        discount_amount=invoice.discount_amount,
        taxable_amount=invoice.taxable_amount,
        total_cgst_amount=invoice.total_cgst_amount,
        total_sgst_amount=invoice.total_sgst_amount,
        total_igst_amount=invoice.total_igst_amount,
        direct_tax_amount=invoice.direct_tax_amount,
        round_off_amount=invoice.round_off_amount,
        total_amount=invoice.total_amount,
        outstanding_amount=outstanding,
        paid_amount=paid,
        payment_progress_percent=progress,
        rows=_breakdown_rows(invoice),
    )
