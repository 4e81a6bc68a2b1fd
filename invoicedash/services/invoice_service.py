"""Invoice form mutations: validate, write one statement, report back."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any

from sqlalchemy import delete, insert, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.base import Executable

from invoicedash.database import db as database
from invoicedash.models import Invoice
from invoicedash.models.base import new_id
from invoicedash.schemas.invoices import MISSING_FIELDS_MESSAGE, InvoiceFormState, InvoiceFormValidator
from invoicedash.services.effects import Effect, Redirect, Revalidate

logger = logging.getLogger(__name__)

INVOICES_PATH = "/dashboard/invoices"

CREATE_FAILED_MESSAGE = "Database Error: Failed to Create Invoice."
UPDATE_FAILED_MESSAGE = "Database Error: Failed to Update Invoice."
DELETE_FAILED_MESSAGE = "Database Error: Failed to Delete Invoice."
DELETED_MESSAGE = "Deleted Invoice."


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class MutationResult:
    """Form state for the page plus the effects to run when the write landed."""

    state: InvoiceFormState
    effects: tuple[Effect, ...] = field(default_factory=tuple)
    succeeded: bool = False


class InvoiceMutationService:
    """Create, update and delete invoices from raw form submissions.

    Expected failures come back as :class:`MutationResult` data: field
    errors from the validator, or a fixed message when the database
    rejects the statement. Nothing here raises for either case.
    """

    def __init__(
        self,
        db: Session | None = None,
        validator: InvoiceFormValidator | None = None,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self.db = db or database.SessionLocal()
        self.validator = validator or InvoiceFormValidator()
        self._today = today

    def create_invoice(self, form: Mapping[str, Any]) -> MutationResult:
        result = self.validator.validate(form)
        if not result.ok:
            return _invalid(result.errors)

        data = result.form
        invoice_id = new_id()
        statement = insert(Invoice).values(
            id=invoice_id,
            customer_id=data.customer_id,
            amount=data.amount_in_cents,
            status=data.status,
            date=self._today(),
        )
        if not self._execute(statement, "invoice.create", invoice_id=invoice_id):
            return MutationResult(state=InvoiceFormState(message=CREATE_FAILED_MESSAGE))

        logger.info("invoice.created", extra={"event": "invoice.created", "invoice_id": invoice_id})
        return _listing_changed(redirect=True)

    def update_invoice(self, invoice_id: str, form: Mapping[str, Any]) -> MutationResult:
        # Edits go through the same form rules and message as creation.
        result = self.validator.validate(form)
        if not result.ok:
            return _invalid(result.errors)

        data = result.form
        statement = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(customer_id=data.customer_id, amount=data.amount_in_cents, status=data.status)
        )
        if not self._execute(statement, "invoice.update", invoice_id=invoice_id):
            return MutationResult(state=InvoiceFormState(message=UPDATE_FAILED_MESSAGE))

        logger.info("invoice.updated", extra={"event": "invoice.updated", "invoice_id": invoice_id})
        return _listing_changed(redirect=True)

    def delete_invoice(self, invoice_id: str) -> MutationResult:
        if not invoice_id:
            raise ValueError("invoice_id is required.")

        statement = delete(Invoice).where(Invoice.id == invoice_id)
        if not self._execute(statement, "invoice.delete", invoice_id=invoice_id):
            return MutationResult(state=InvoiceFormState(message=DELETE_FAILED_MESSAGE))

        logger.info("invoice.deleted", extra={"event": "invoice.deleted", "invoice_id": invoice_id})
        return _listing_changed(redirect=False, message=DELETED_MESSAGE)

    def _execute(self, statement: Executable, action: str, **fields: Any) -> bool:
        """Run one statement in its own transaction; False when the database refused it."""
        try:
            self.db.execute(statement)
            self.db.commit()
        except (SQLAlchemyError, OverflowError):
            # Drivers raise OverflowError for integers their column type cannot hold.
            self.db.rollback()
            event = f"{action}.database_error"
            logger.exception(event, extra={"event": event, **fields})
            return False
        return True


def _invalid(errors: dict[str, list[str]]) -> MutationResult:
    return MutationResult(state=InvoiceFormState(errors=errors, message=MISSING_FIELDS_MESSAGE))


def _listing_changed(redirect: bool, message: str | None = None) -> MutationResult:
    effects: tuple[Effect, ...] = (Revalidate(INVOICES_PATH),)
    if redirect:
        effects += (Redirect(INVOICES_PATH),)
    return MutationResult(state=InvoiceFormState(message=message), effects=effects, succeeded=True)
