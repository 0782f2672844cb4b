"""Authentication helpers and models."""

from .cookies import (
    SESSION_COOKIE_NAME,
    SESSION_COOKIE_TTL,
    SESSION_COOKIE_TTL_SECONDS,
    clear_session_cookie,
    set_session_cookie,
)
from .errors import (
    AuthFlowError,
    EmailAlreadyExists,
    InvalidCredentials,
    MissingFields,
    NotAuthenticated,
)
from .flows import AuthResult, login_user, register_user
from .passwords import hash_password, needs_rehash, verify_password
from .store import CredentialStore, init_auth_storage, normalize_email
from .tokens import SessionTokenData, TokenIssuer, parse_duration

__all__ = [
    "SESSION_COOKIE_NAME",
    "SESSION_COOKIE_TTL",
    "SESSION_COOKIE_TTL_SECONDS",
    "AuthFlowError",
    "AuthResult",
    "CredentialStore",
    "EmailAlreadyExists",
    "InvalidCredentials",
    "MissingFields",
    "NotAuthenticated",
    "SessionTokenData",
    "TokenIssuer",
    "clear_session_cookie",
    "hash_password",
    "init_auth_storage",
    "login_user",
    "needs_rehash",
    "normalize_email",
    "parse_duration",
    "register_user",
    "set_session_cookie",
    "verify_password",
]
