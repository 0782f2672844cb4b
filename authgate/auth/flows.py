"""Registration and login flows.

Both flows return an :class:`AuthResult` on success and raise an
:class:`~authgate.auth.errors.AuthFlowError` subclass for expected failures.
Anything else (database down, hashing failure) propagates to the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import (
    EmailAlreadyExists,
    InvalidCredentials,
    MissingFields,
    UnsupportedPassword,
)
from .models import AuthResponse, User, UserView
from .passwords import hash_password, verify_password
from .store import CredentialStore, normalize_email
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)

REGISTER_FIELDS_REQUIRED = "Name, email, and password are required"
LOGIN_FIELDS_REQUIRED = "Email and password are required"


@dataclass(frozen=True)
class AuthResult:
    """A successfully authenticated user and the token minted for them."""

    user: User
    token: str

    def to_response(self) -> AuthResponse:
        return AuthResponse(user=UserView.from_user(self.user), is_admin=self.user.is_admin)


def register_user(
    store: CredentialStore,
    issuer: TokenIssuer,
    *,
    name: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> AuthResult:
    email = normalize_email(email)
    if not name or not email or not password:
        raise MissingFields(REGISTER_FIELDS_REQUIRED)

    if store.find_by_email(email) is not None:
        raise EmailAlreadyExists()

    # bcrypt refuses NUL bytes and oversized secrets
    try:
        hashed_password = hash_password(password)
    except ValueError as exc:
        raise UnsupportedPassword() from exc

    user = store.create(
        name=name,
        email=email,
        hashed_password=hashed_password,
        is_admin=False,
    )
    logger.info("Registered user id=%s", user.id)
    return AuthResult(user=user, token=issuer.issue(user.id, user.is_admin))


def login_user(
    store: CredentialStore,
    issuer: TokenIssuer,
    *,
    email: Optional[str],
    password: Optional[str],
) -> AuthResult:
    email = normalize_email(email)
    if not email or not password:
        raise MissingFields(LOGIN_FIELDS_REQUIRED)

    user = store.find_by_email(email)
    if user is None or not verify_password(password, user.hashed_password):
        logger.info("Rejected login attempt")
        raise InvalidCredentials()

    logger.info("User id=%s signed in", user.id)
    return AuthResult(user=user, token=issuer.issue(user.id, user.is_admin))


__all__ = [
    "AuthResult",
    "LOGIN_FIELDS_REQUIRED",
    "REGISTER_FIELDS_REQUIRED",
    "login_user",
    "register_user",
]
