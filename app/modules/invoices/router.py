"""
Invoices Router - FastAPI routes for editing an invoice and computing its totals.
The server holds no invoice state: each request carries it and mutating routes
return the new state.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from app.core.exceptions import ValidationError
from app.core.utils import inclusive_day_span
from .service import InvoiceService
from .schemas import (
    AmountInWordsResponse,
    DaySpanResponse,
    InvoiceState,
    InvoiceView,
    UpdateInvoiceRequest,
    UpdateLineItemRequest,
)

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("/sample", response_model=InvoiceState)
async def get_sample_invoice():
    """
    Get the pre-filled demo invoice.
    """
    return InvoiceService.sample_state()


@router.get("/blank", response_model=InvoiceState)
async def get_blank_invoice():
    """
    Get an empty invoice (what "Reset Invoice" starts from).
    """
    return InvoiceService.blank_state()


@router.post("/preview", response_model=InvoiceView)
async def preview_invoice(state: InvoiceState):
    """
    Compute the invoice view for the given state.

    Returns:
        - items: each row with its amount and inclusive day count
        - totals: subtotal, SGST, CGST, IGST, cartage and grand total
        - totals_display: the same totals formatted with currency symbol
        - amount_in_words: rounded grand total in Indian English words
    """
    return InvoiceService.build_view(state)


@router.post("/update", response_model=InvoiceState)
async def update_invoice(request: UpdateInvoiceRequest):
    """
    Apply header, footer, rate or cartage changes. Blank numbers read as 0.
    """
    return InvoiceService.update_fields(request.state, request.changes)


@router.post("/items", response_model=InvoiceState, status_code=201)
async def add_line_item(state: InvoiceState):
    """
    Append a blank line item (quantity 1, rate 0) with a fresh id.
    """
    return InvoiceService.add_item(state)


@router.post("/items/{item_id}/update", response_model=InvoiceState)
async def update_line_item(item_id: str, request: UpdateLineItemRequest):
    """
    Change fields of one line item.
    """
    return InvoiceService.update_item(request.state, item_id, request.changes)


@router.post("/items/{item_id}/remove", response_model=InvoiceState)
async def remove_line_item(item_id: str, state: InvoiceState):
    """
    Remove a line item by id.
    """
    return InvoiceService.remove_item(state, item_id)


@router.get("/amount-in-words", response_model=AmountInWordsResponse)
async def get_amount_in_words(
    amount: int = Query(..., description="Whole rupee amount"),
):
    """
    Convert a whole rupee amount to words (crore/lakh grouping).
    """
    if amount < 0:
        raise ValidationError("Amount must be zero or more")

    return AmountInWordsResponse(
        amount=amount, words=InvoiceService.amount_in_words(amount)
    )


@router.get("/day-span", response_model=DaySpanResponse)
async def get_day_span(
    from_date: Optional[date] = Query(None, description="Start date (YYYY-MM-DD)"),
    to_date: Optional[date] = Query(None, description="End date (YYYY-MM-DD)"),
):
    """
    Inclusive number of days between two dates; empty when it can't be computed.
    """
    return DaySpanResponse(
        from_date=from_date,
        to_date=to_date,
        days=inclusive_day_span(from_date, to_date),
    )
