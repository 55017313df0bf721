"""Exceptions raised by tillbook_auth.

The application layer translates these into HTTP responses.
"""

from datetime import datetime


class AuthError(Exception):
    """Root of all authentication failures."""

    default_message = "Authentication failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    default_message = "Invalid or expired token"


class WeakPasswordError(AuthError):
    default_message = "Password does not meet requirements"


class InvalidCredentialsError(AuthError):
    default_message = "Invalid email or password"


class AccountLockedError(AuthError):
    """Too many failed logins; the account is temporarily locked."""

    default_message = "Account is locked due to too many failed login attempts"

    def __init__(self, locked_until: datetime | None = None):
        self.locked_until = locked_until
        message = self.default_message
        if locked_until is not None:
            message = f"{message}. Try again after {locked_until.isoformat()}"
        super().__init__(message)
