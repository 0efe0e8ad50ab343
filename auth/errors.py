"""
Error taxonomy for the auth service.

Input validation failures are not exceptions: they come back from
``auth.validation`` as ``ValidationFailed`` values.
"""

from __future__ import annotations


class AuthServiceError(Exception):
    """Base class for errors raised by the auth service."""


class UserAlreadyExistsError(AuthServiceError):
    """A user with the given email is already stored."""

    def __init__(self, email: str) -> None:
        super().__init__("User with this email already exists")
        self.email = email


class TokenError(AuthServiceError):
    """Signing or verifying an auth token failed."""


class UnclassifiedStoreError(AuthServiceError):
    """Any persistence failure other than a duplicate email."""
