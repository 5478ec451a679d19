from datetime import date

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.modules.invoices.schemas import (
    InvoiceState,
    LineItem,
    UpdateInvoiceDto,
    UpdateLineItemDto,
)
from app.modules.invoices.service import InvoiceService


@pytest.fixture
def state():
    return InvoiceService.sample_state()


def test_sample_state_matches_demo_invoice(state):
    assert state.company_name == "BALA JEE TIMBER"
    assert state.igst_rate == 18
    assert len(state.items) == 3
    assert len({item.id for item in state.items}) == 3


def test_blank_state_has_one_default_item():
    state = InvoiceService.blank_state()
    assert state.invoice_title == "GST Invoice"
    assert state.invoice_date == date.today()
    assert state.company_name == ""
    assert len(state.items) == 1
    item = state.items[0]
    assert item.quantity == 1
    assert item.rate == 0
    assert item.from_date is None


def test_update_fields_coerces_blank_numbers(state):
    changes = UpdateInvoiceDto(igst_rate="", cartage="150", client_name="Acme")
    updated = InvoiceService.update_fields(state, changes)

    assert updated.igst_rate == 0
    assert updated.cartage == 150
    assert updated.client_name == "Acme"
    assert updated.company_name == state.company_name
    # input is untouched
    assert state.igst_rate == 18
    assert state.client_name == "VS & V Communication Pvt. Ltd."


def test_add_item_appends_fresh_item(state):
    updated = InvoiceService.add_item(state)

    assert len(updated.items) == 4
    assert len(state.items) == 3
    new_item = updated.items[-1]
    assert new_item.id not in {item.id for item in state.items}
    assert new_item.quantity == 1
    assert new_item.rate == 0
    assert new_item.description == ""


def test_update_item_changes_only_that_item(state):
    target = state.items[1]
    changes = UpdateLineItemDto(quantity="abc", description="Prop 2x2 (returned)")
    updated = InvoiceService.update_item(state, target.id, changes)

    assert updated.items[1].id == target.id
    assert updated.items[1].quantity == 0
    assert updated.items[1].description == "Prop 2x2 (returned)"
    assert updated.items[1].rate == target.rate
    assert updated.items[0] == state.items[0]
    assert state.items[1].quantity == 2700


def test_update_item_clears_blank_date(state):
    target = state.items[0]
    updated = InvoiceService.update_item(
        state, target.id, UpdateLineItemDto(to_date="")
    )
    assert updated.items[0].to_date is None
    assert updated.items[0].from_date == date(2023, 7, 1)


def test_update_unknown_item(state):
    with pytest.raises(NotFoundError) as exc_info:
        InvoiceService.update_item(state, "missing", UpdateLineItemDto(rate=5))
    assert exc_info.value.status_code == 404


def test_remove_item(state):
    target = state.items[0]
    updated = InvoiceService.remove_item(state, target.id)

    assert [item.id for item in updated.items] == [item.id for item in state.items[1:]]
    assert len(state.items) == 3


def test_remove_last_item_leaves_empty_list():
    state = InvoiceService.blank_state()
    updated = InvoiceService.remove_item(state, state.items[0].id)

    assert updated.items == []
    assert InvoiceService.compute_totals(updated).subtotal == 0


def test_remove_unknown_item(state):
    with pytest.raises(NotFoundError):
        InvoiceService.remove_item(state, "missing")


def test_build_view_for_sample_invoice(state):
    view = InvoiceService.build_view(state)

    assert view.totals.subtotal == pytest.approx(29038.55)
    assert view.totals.igst_amount == pytest.approx(5226.939)
    assert view.totals_display.subtotal == "₹29038.55"
    assert view.totals_display.igst_amount == "₹5226.94"
    assert view.totals_display.grand_total == "₹34265.49"
    assert view.rounded_grand_total == 34265
    assert view.amount_in_words == "Thirty Four Thousand Two Hundred Sixty Five Only"
    assert view.invoice_date_display == "21-Aug-2023"

    first = view.items[0]
    assert first.amount == pytest.approx(3600)
    assert first.amount_display == "₹3600.00"
    assert first.days == 31
    assert first.days_display == "31"


def test_build_view_without_dates_or_items():
    state = InvoiceState(invoice_date=None, items=[LineItem()])
    view = InvoiceService.build_view(state)

    assert view.items[0].days is None
    assert view.items[0].days_display == ""
    assert view.invoice_date_display == ""
    assert view.rounded_grand_total == 0
    assert view.amount_in_words == "Zero"


def test_build_view_reflects_every_change(state):
    before = InvoiceService.build_view(state)
    updated = InvoiceService.update_fields(state, UpdateInvoiceDto(cartage=1000))
    after = InvoiceService.build_view(updated)

    assert after.totals.grand_total == pytest.approx(before.totals.grand_total + 1000)
    assert InvoiceService.build_view(state).totals == before.totals


def test_negative_total_in_words():
    assert InvoiceService.amount_in_words(-250) == "Minus Two Hundred Fifty Only"


def test_update_fields_ignores_null_text(state):
    changes = UpdateInvoiceDto(company_name=None, client_name="Acme")
    updated = InvoiceService.update_fields(state, changes)

    assert updated.company_name == "BALA JEE TIMBER"
    assert updated.client_name == "Acme"
    InvoiceState.model_validate(updated.model_dump())


def test_update_fields_null_clears_invoice_date(state):
    updated = InvoiceService.update_fields(state, UpdateInvoiceDto(invoice_date=None))
    assert updated.invoice_date is None


def test_update_item_ignores_null_text(state):
    target = state.items[0]
    changes = UpdateLineItemDto(description=None, hsn_code=None, from_date=None)
    updated = InvoiceService.update_item(state, target.id, changes)

    assert updated.items[0].description == "Prop 3x2"
    assert updated.items[0].hsn_code == "9954"
    assert updated.items[0].from_date is None
    InvoiceState.model_validate(updated.model_dump())


def test_infinite_quantity_reads_as_zero():
    state = InvoiceState(items=[LineItem(quantity="inf", rate="0")])
    view = InvoiceService.build_view(state)

    assert view.items[0].amount == 0
    assert view.amount_in_words == "Zero"


def test_overflowing_total_is_rejected():
    state = InvoiceState(items=[LineItem(quantity=1e308, rate=1e308)])
    with pytest.raises(ValidationError) as exc_info:
        InvoiceService.build_view(state)
    assert exc_info.value.status_code == 422
