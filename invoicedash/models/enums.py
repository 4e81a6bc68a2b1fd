"""Canonical enum values for the dashboard schema."""

from __future__ import annotations

import enum


class InvoiceStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
