"""Invoice form schema and the validator that aggregates its field errors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from invoicedash.models.enums import InvoiceStatus

MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Create Invoice."

# Largest amount whose cents fit a 32-bit INTEGER column.
MAX_AMOUNT = Decimal("21474836.47")

FIELD_MESSAGES: dict[str, str] = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}


class InvoiceForm(BaseModel):
    """Fields submitted by the create and edit invoice forms."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)
    status: InvoiceStatus

    @field_validator("amount")
    @classmethod
    def amount_has_a_cent(cls, value: Decimal) -> Decimal:
        if _to_cents(value) < 1:
            raise ValueError("amount rounds to zero cents")
        return value

    @property
    def amount_in_cents(self) -> int:
        return _to_cents(self.amount)


def _to_cents(amount: Decimal) -> int:
    return int((amount * 100).to_integral_value(rounding=ROUND_HALF_UP))


class InvoiceFormState(BaseModel):
    """What a form handler hands back to the page after a failed or finished mutation."""

    errors: dict[str, list[str]] | None = None
    message: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    form: InvoiceForm | None
    errors: dict[str, list[str]]

    @property
    def ok(self) -> bool:
        return self.form is not None


class InvoiceFormValidator:
    """Run every field rule of :class:`InvoiceForm` and collect all failures.

    Errors are keyed by the form field name and carry the fixed user-facing
    message for that field; a field is listed once however many of its
    rules failed.
    """

    fields = tuple(FIELD_MESSAGES)

    def validate(self, form: Mapping[str, Any]) -> ValidationResult:
        raw = {name: form.get(name) for name in self.fields}
        try:
            parsed = InvoiceForm.model_validate(raw)
        except ValidationError as exc:
            return ValidationResult(form=None, errors=self._flatten(exc))
        return ValidationResult(form=parsed, errors={})

    def _flatten(self, exc: ValidationError) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            message = FIELD_MESSAGES.get(field, error["msg"])
            messages = errors.setdefault(field, [])
            if message not in messages:
                messages.append(message)
        return errors
