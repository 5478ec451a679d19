"""Invoices module"""

from .calculator import compute_totals, line_amount
from .schemas import InvoiceState, InvoiceTotals, InvoiceView, LineItem
from .service import InvoiceService
from .router import router

__all__ = [
    "compute_totals",
    "line_amount",
    "InvoiceState",
    "InvoiceTotals",
    "InvoiceView",
    "LineItem",
    "InvoiceService",
    "router",
]
