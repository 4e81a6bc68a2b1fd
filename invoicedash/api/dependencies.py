"""Dependency providers for the dashboard form handlers."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from starlette.datastructures import FormData

from invoicedash.auth.gateway import AuthGateway
from invoicedash.auth.providers import CredentialsProvider
from invoicedash.database.db import get_db
from invoicedash.services.invoice_service import InvoiceMutationService
from invoicedash.web.cache import PageCache


async def read_form(request: Request) -> FormData:
    return await request.form()


def get_page_cache(request: Request) -> PageCache:
    return request.app.state.page_cache


def get_invoice_service(db: Session = Depends(get_db)) -> InvoiceMutationService:
    return InvoiceMutationService(db=db)


def get_auth_gateway(db: Session = Depends(get_db)) -> AuthGateway:
    return AuthGateway(CredentialsProvider(db))
