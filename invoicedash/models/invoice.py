"""Invoice model module."""

from __future__ import annotations

import datetime as dt

from sqlalchemy import Date, Enum, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from invoicedash.models.base import Base, new_id
from invoicedash.models.enums import InvoiceStatus


class Invoice(Base):
    """One billed amount, stored in integer cents."""

    __tablename__ = "invoices"
    __table_args__ = (Index("idx_invoices_customer_status", "customer_id", "status"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[InvoiceStatus] = mapped_column(
        Enum(InvoiceStatus, values_callable=lambda members: [m.value for m in members], name="invoice_status"),
        nullable=False,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
