"""
InvoiceService - Editing operations and computed view for an invoice.

The service keeps no state of its own. Every operation takes the current
InvoiceState and returns a new one, leaving the input untouched.
"""

import logging
import math
from datetime import date
from typing import List

from app.core.config import config
from app.core.exceptions import NotFoundError, ValidationError
from app.core.utils import (
    format_currency,
    format_invoice_date,
    inclusive_day_span,
    number_to_words,
    round_half_up,
)
from .calculator import compute_totals, line_amount
from .schemas import (
    FormattedTotals,
    InvoiceState,
    InvoiceTotals,
    InvoiceView,
    LineItem,
    LineItemView,
    UpdateInvoiceDto,
    UpdateLineItemDto,
)

logger = logging.getLogger(__name__)


def _applied_changes(changes, clearable: tuple = ()) -> dict:
    """Fields that were sent, minus nulls on fields that can't be empty."""
    update = changes.model_dump(exclude_unset=True)
    return {
        field: value
        for field, value in update.items()
        if value is not None or field in clearable
    }


class InvoiceService:
    """
    Invoice service for editing invoice state and building the printable view.
    All methods are copy-on-write: the state passed in is never modified.
    """

    @staticmethod
    def sample_state() -> InvoiceState:
        """Pre-filled demo invoice shown when the editor first opens."""
        return InvoiceState(
            company_name="BALA JEE TIMBER",
            company_address=(
                "Plot No. 11&12 Shuttering Market Vill. Sanouli, Old Ambala Road\n"
                "Zirakpur, Distt. Mohali, Punjab-140603"
            ),
            gstin="03AARFB9110B1ZX",
            company_phone="M. 9466053608\n7534807429",
            invoice_title="GST Invoice",
            invoice_number="279",
            invoice_date=date(2023, 8, 21),
            client_name="VS & V Communication Pvt. Ltd.",
            client_address="mata Sadan chowk, Jwalather Handwa",
            client_gstin="05AARCV9746J1Z...",
            delivery_address="Doon Hospital Gate No. 4 Dehradun",
            items=[
                LineItem(
                    description="Prop 3x2",
                    hsn_code="9954",
                    quantity=3000,
                    rate=1.20,
                    from_date=date(2023, 7, 1),
                    to_date=date(2023, 7, 31),
                ),
                LineItem(
                    description="Prop 2x2",
                    hsn_code="9954",
                    quantity=2700,
                    rate=1.10,
                    from_date=date(2023, 7, 1),
                    to_date=date(2023, 7, 31),
                ),
                LineItem(
                    description="Standard 3 mtr",
                    hsn_code="9954",
                    quantity=845,
                    rate=26.59,
                    from_date=date(2023, 7, 1),
                    to_date=date(2023, 7, 31),
                ),
            ],
            sgst_rate=0,
            cgst_rate=0,
            igst_rate=18,
            cartage=0,
            bank_account_holder="BALA JEE TIMBER",
            bank_name="AXIS Bank, Rohtak",
            account_number="917020045984632",
            ifsc_code="UTIB0000204",
            terms=(
                "The bill is not paid within 8 days of presentation, interest @ 24% "
                "per annum will be charged.\n"
                "In case of any objection in amount please return the bill with in "
                "eight days of the receipt otherwise it will be treated as accepted."
            ),
        )

    @staticmethod
    def blank_state() -> InvoiceState:
        """
        Empty invoice used when the user resets the editor.

        Returns:
            InvoiceState with today's date and a single blank line item
        """
        return InvoiceState(
            invoice_title=config.default_invoice_title,
            invoice_date=date.today(),
            items=[LineItem()],
        )

    @staticmethod
    def update_fields(state: InvoiceState, changes: UpdateInvoiceDto) -> InvoiceState:
        """
        Replace header, footer, rate or cartage fields.

        Args:
            state: Current invoice state
            changes: Only the fields that were sent are applied

        Returns:
            New invoice state
        """
        update = _applied_changes(changes, clearable=("invoice_date",))
        logger.debug(f"Updating invoice fields: {sorted(update)}")
        return state.model_copy(update=update)

    @staticmethod
    def add_item(state: InvoiceState) -> InvoiceState:
        """Append a fresh line item with quantity 1 and rate 0."""
        item = LineItem()
        logger.debug(f"Adding line item {item.id}")
        return state.model_copy(update={"items": [*state.items, item]})

    @staticmethod
    def update_item(
        state: InvoiceState, item_id: str, changes: UpdateLineItemDto
    ) -> InvoiceState:
        """
        Replace fields of one line item.

        Args:
            state: Current invoice state
            item_id: Id of the line item to change
            changes: Only the fields that were sent are applied

        Returns:
            New invoice state

        Raises:
            NotFoundError: If no item has this id
        """
        update = _applied_changes(changes, clearable=("from_date", "to_date"))
        items: List[LineItem] = []
        found = False
        for item in state.items:
            if item.id == item_id:
                item = item.model_copy(update=update)
                found = True
            items.append(item)

        if not found:
            raise NotFoundError("Line item", item_id)

        return state.model_copy(update={"items": items})

    @staticmethod
    def remove_item(state: InvoiceState, item_id: str) -> InvoiceState:
        """
        Drop a line item by id. Removing the last item leaves an empty list.

        Raises:
            NotFoundError: If no item has this id
        """
        items = [item for item in state.items if item.id != item_id]
        if len(items) == len(state.items):
            raise NotFoundError("Line item", item_id)

        logger.debug(f"Removed line item {item_id}")
        return state.model_copy(update={"items": items})

    @staticmethod
    def compute_totals(state: InvoiceState) -> InvoiceTotals:
        return compute_totals(
            state.items,
            state.sgst_rate,
            state.cgst_rate,
            state.igst_rate,
            state.cartage,
        )

    @staticmethod
    def amount_in_words(rounded_total: int) -> str:
        """Words for the rounded grand total; a negative total reads "Minus ..."."""
        if rounded_total < 0:
            return "Minus " + number_to_words(-rounded_total)
        return number_to_words(rounded_total)

    @staticmethod
    def build_view(state: InvoiceState) -> InvoiceView:
        """
        Build the computed invoice: row amounts, day spans, totals and words.

        Nothing here is cached; every call recomputes from the state.

        Args:
            state: Current invoice state

        Returns:
            InvoiceView ready for display
        """
        rows = []
        for item in state.items:
            amount = line_amount(item)
            days = inclusive_day_span(item.from_date, item.to_date)
            rows.append(
                LineItemView(
                    item=item,
                    amount=amount,
                    amount_display=format_currency(amount),
                    days=days,
                    days_display="" if days is None else str(days),
                )
            )

        totals = InvoiceService.compute_totals(state)
        if not math.isfinite(totals.grand_total):
            raise ValidationError("Invoice total is too large to display")
        rounded = round_half_up(totals.grand_total)

        return InvoiceView(
            state=state,
            invoice_date_display=(
                format_invoice_date(state.invoice_date) if state.invoice_date else ""
            ),
            items=rows,
            totals=totals,
            totals_display=FormattedTotals(
                subtotal=format_currency(totals.subtotal),
                sgst_amount=format_currency(totals.sgst_amount),
                cgst_amount=format_currency(totals.cgst_amount),
                igst_amount=format_currency(totals.igst_amount),
                cartage=format_currency(totals.cartage),
                grand_total=format_currency(totals.grand_total),
            ),
            rounded_grand_total=rounded,
            amount_in_words=InvoiceService.amount_in_words(rounded),
        )
