"""Login form handling on top of an identity verifier."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from invoicedash.auth.providers import CREDENTIALS_PROVIDER, IdentityVerifier
from invoicedash.core.exceptions import AuthError, CredentialsSignin

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_AUTH_MESSAGE = "Something went wrong."


class AuthGateway:
    def __init__(self, verifier: IdentityVerifier) -> None:
        self.verifier = verifier

    def authenticate(self, form: Mapping[str, Any]) -> str | None:
        """Sign in with the submitted credentials.

        Returns ``None`` on success and a user-facing message for
        authentication failures. Anything that is not an :class:`AuthError`
        propagates.
        """
        try:
            self.verifier.sign_in(CREDENTIALS_PROVIDER, form)
        except AuthError as exc:
            if exc.type == CredentialsSignin.type:
                return INVALID_CREDENTIALS_MESSAGE
            return GENERIC_AUTH_MESSAGE
        return None
