"""Errors raised by the authentication flows.

Each error carries the HTTP status and the client-facing message; the
application maps them to ``{"message": ...}`` responses.
"""
from __future__ import annotations

from fastapi import status


class AuthFlowError(Exception):
    """Base class for expected authentication failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class MissingFields(AuthFlowError):
    default_message = "Required fields are missing"


class EmailAlreadyExists(AuthFlowError):
    default_message = "Email already exists"


class InvalidCredentials(AuthFlowError):
    default_message = "Wrong email or password"


class UnsupportedPassword(AuthFlowError):
    default_message = "Password contains unsupported characters or is too long"


class NotAuthenticated(AuthFlowError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class Forbidden(AuthFlowError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class UserNotFound(AuthFlowError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


__all__ = [
    "AuthFlowError",
    "EmailAlreadyExists",
    "Forbidden",
    "InvalidCredentials",
    "MissingFields",
    "NotAuthenticated",
    "UnsupportedPassword",
    "UserNotFound",
]
