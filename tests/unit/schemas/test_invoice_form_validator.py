from __future__ import annotations

from decimal import Decimal

import pytest

from invoicedash.models import InvoiceStatus
from invoicedash.schemas.invoices import InvoiceFormValidator


@pytest.fixture
def validator():
    return InvoiceFormValidator()


def test_valid_form_parses_all_fields(validator):
    result = validator.validate({"customerId": "c1", "amount": "42.5", "status": "pending"})

    assert result.ok
    assert result.errors == {}
    assert result.form.customer_id == "c1"
    assert result.form.amount == Decimal("42.5")
    assert result.form.status is InvoiceStatus.PENDING


def test_empty_submission_reports_every_field(validator):
    result = validator.validate({})

    assert not result.ok
    assert result.errors == {
        "customerId": ["Please select a customer."],
        "amount": ["Please enter an amount greater than $0."],
        "status": ["Please select an invoice status."],
    }


@pytest.mark.parametrize(
    ("form", "failed"),
    [
        ({"customerId": "", "amount": "10", "status": "paid"}, {"customerId"}),
        ({"customerId": "c1", "amount": "0", "status": "paid"}, {"amount"}),
        ({"customerId": "c1", "amount": "-3.20", "status": "paid"}, {"amount"}),
        ({"customerId": "c1", "amount": "ten", "status": "paid"}, {"amount"}),
        ({"customerId": "c1", "amount": "", "status": "paid"}, {"amount"}),
        ({"customerId": "c1", "amount": "nan", "status": "paid"}, {"amount"}),
        ({"customerId": "c1", "amount": "0.004", "status": "paid"}, {"amount"}),
        ({"customerId": "c1", "amount": "1e30", "status": "paid"}, {"amount"}),
        ({"customerId": "c1", "amount": "21474836.48", "status": "paid"}, {"amount"}),
        ({"customerId": "c1", "amount": "10", "status": "overdue"}, {"status"}),
        ({"customerId": "c1", "amount": "10", "status": "Paid"}, {"status"}),
        ({"customerId": None, "amount": "0", "status": None}, {"customerId", "amount", "status"}),
    ],
)
def test_errors_name_exactly_the_violated_fields(validator, form, failed):
    result = validator.validate(form)

    assert not result.ok
    assert set(result.errors) == failed
    assert all(len(messages) == 1 for messages in result.errors.values())


def test_extra_form_keys_are_ignored(validator):
    result = validator.validate(
        {"id": "inv-1", "date": "2020-01-01", "customerId": "c1", "amount": "5", "status": "paid"}
    )

    assert result.ok


@pytest.mark.parametrize(
    ("amount", "cents"),
    [
        ("42.5", 4250),
        ("0.01", 1),
        ("19.99", 1999),
        ("0.015", 2),
        ("0.005", 1),
        ("1000", 100000),
        ("21474836.47", 2147483647),
        (42.5, 4250),
    ],
)
def test_amount_in_cents_is_exact(validator, amount, cents):
    result = validator.validate({"customerId": "c1", "amount": amount, "status": "paid"})

    assert result.form.amount_in_cents == cents
