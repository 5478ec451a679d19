import pytest

from app.modules.invoices.calculator import compute_totals, line_amount, tax_amount
from app.modules.invoices.schemas import LineItem


@pytest.fixture
def sample_items():
    return [
        LineItem(quantity=3000, rate=1.20),
        LineItem(quantity=2700, rate=1.10),
        LineItem(quantity=845, rate=26.59),
    ]


def test_empty_invoice_totals_are_zero():
    totals = compute_totals([], 0, 0, 0, 0)
    assert totals.subtotal == 0
    assert totals.sgst_amount == 0
    assert totals.cgst_amount == 0
    assert totals.igst_amount == 0
    assert totals.grand_total == 0


def test_subtotal_sums_quantity_times_rate(sample_items):
    totals = compute_totals(sample_items, 0, 0, 0, 0)
    assert totals.subtotal == pytest.approx(29038.55)
    assert totals.grand_total == pytest.approx(29038.55)


def test_igst_applied_to_subtotal(sample_items):
    totals = compute_totals(sample_items, 0, 0, 18, 0)
    assert totals.igst_amount == pytest.approx(5226.939)
    assert totals.sgst_amount == 0
    assert totals.cgst_amount == 0
    assert totals.grand_total == pytest.approx(34265.489)


def test_all_taxes_and_cartage_are_added(sample_items):
    totals = compute_totals(sample_items, 9, 9, 0, 500)
    assert totals.sgst_amount == pytest.approx(29038.55 * 0.09)
    assert totals.cgst_amount == pytest.approx(29038.55 * 0.09)
    assert totals.cartage == 500
    assert totals.grand_total == pytest.approx(29038.55 * 1.18 + 500)


def test_negative_rate_is_accepted():
    totals = compute_totals([LineItem(quantity=1, rate=100)], -10, 0, 0, 0)
    assert totals.sgst_amount == pytest.approx(-10)
    assert totals.grand_total == pytest.approx(90)


def test_compute_totals_is_repeatable(sample_items):
    first = compute_totals(sample_items, 2.5, 2.5, 18, 120)
    second = compute_totals(sample_items, 2.5, 2.5, 18, 120)
    assert first == second


def test_line_amount():
    assert line_amount(LineItem(quantity=845, rate=26.59)) == pytest.approx(22468.55)
    assert line_amount(LineItem(quantity=0, rate=10)) == 0


def test_zero_rate_gives_exact_zero():
    assert tax_amount(29038.55, 0) == 0.0
