"""
Totals calculator - derives subtotal, GST amounts and grand total from line items.

Pure functions; callers coerce blank/non-numeric input to 0 beforehand.
"""

from typing import Sequence

from .schemas import InvoiceTotals, LineItem


def line_amount(item: LineItem) -> float:
    """Amount for one row: quantity times rate, unrounded."""
    return item.quantity * item.rate


def tax_amount(subtotal: float, rate: float) -> float:
    """Percentage of the subtotal; a rate of 0 gives exactly 0."""
    return subtotal * (rate / 100)


def compute_totals(
    items: Sequence[LineItem],
    sgst_rate: float,
    cgst_rate: float,
    igst_rate: float,
    cartage: float,
) -> InvoiceTotals:
    """
    Compute invoice totals from the current line items and rates.

    Args:
        items: Line items in display order
        sgst_rate: SGST percentage
        cgst_rate: CGST percentage
        igst_rate: IGST percentage
        cartage: Flat fee added to the grand total

    Returns:
        InvoiceTotals: Unrounded subtotal, tax amounts and grand total
    """
    subtotal = 0.0
    for item in items:
        subtotal += line_amount(item)

    sgst_amount = tax_amount(subtotal, sgst_rate)
    cgst_amount = tax_amount(subtotal, cgst_rate)
    igst_amount = tax_amount(subtotal, igst_rate)

    return InvoiceTotals(
        subtotal=subtotal,
        sgst_amount=sgst_amount,
        cgst_amount=cgst_amount,
        igst_amount=igst_amount,
        cartage=cartage,
        grand_total=subtotal + sgst_amount + cgst_amount + igst_amount + cartage,
    )
