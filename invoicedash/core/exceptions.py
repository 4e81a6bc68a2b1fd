"""Custom exceptions for the invoicedash application."""


class InvoiceDashException(Exception):
    """Base exception for invoicedash application."""

    pass


class ConfigurationError(InvoiceDashException):
    """Raised when configuration is invalid."""

    pass


class AuthError(InvoiceDashException):
    """Raised by an identity verifier when sign-in fails.

    ``type`` names the failure kind so callers can branch on it without
    matching on message text.
    """

    type = "AuthError"

    def __init__(self, message: str | None = None, type: str | None = None) -> None:
        super().__init__(message or "Authentication failed.")
        if type is not None:
            self.type = type


class CredentialsSignin(AuthError):
    """Raised when the submitted credentials do not match a user."""

    type = "CredentialsSignin"
