"""Shared SQLAlchemy base and id helpers."""

from __future__ import annotations

import uuid

from sqlalchemy.orm import DeclarativeBase


def new_id() -> str:
    """Opaque text primary key shared by every table."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Declarative base class for the dashboard schema."""
