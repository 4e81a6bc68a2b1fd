"""Identity verifiers that the login gateway signs users in against."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from invoicedash.core.exceptions import AuthError, CredentialsSignin
from invoicedash.core.security import verify_password
from invoicedash.models import User
from invoicedash.schemas.auth import LoginRequest

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"


class IdentityVerifier(Protocol):
    def sign_in(self, provider: str, credentials: Mapping[str, Any]) -> Any:
        """Return the signed-in principal or raise :class:`AuthError`."""
        ...


class CredentialsProvider:
    """Email + password sign-in backed by the ``users`` table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def sign_in(self, provider: str, credentials: Mapping[str, Any]) -> User:
        if provider != CREDENTIALS_PROVIDER:
            raise AuthError(f"Unknown sign-in provider: {provider}", type="ProviderNotFound")

        try:
            login = LoginRequest(email=credentials.get("email"), password=credentials.get("password"))
        except ValidationError as exc:
            raise CredentialsSignin("Malformed credentials.") from exc

        user = self.db.scalars(select(User).where(User.email == login.email)).first()
        if user is None or not verify_password(login.password, user.password):
            logger.info("auth.sign_in.rejected", extra={"event": "auth.sign_in.rejected"})
            raise CredentialsSignin()

        logger.info("auth.sign_in.accepted", extra={"event": "auth.sign_in.accepted", "user_id": user.id})
        return user
