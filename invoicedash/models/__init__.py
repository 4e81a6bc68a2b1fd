"""SQLAlchemy models for the dashboard schema."""

from invoicedash.models.base import Base
from invoicedash.models.customer import Customer
from invoicedash.models.enums import InvoiceStatus
from invoicedash.models.invoice import Invoice
from invoicedash.models.user import User

__all__ = [
    "Base",
    "Customer",
    "Invoice",
    "InvoiceStatus",
    "User",
]
