"""FastAPI dependencies for authentication."""
from __future__ import annotations

from fastapi import Depends, Request
from sqlmodel import Session

from ..database import get_session
from .cookies import SESSION_COOKIE_NAME
from .errors import Forbidden, NotAuthenticated
from .models import User
from .store import CredentialStore
from .tokens import SessionTokenData, TokenIssuer


def get_token_issuer(request: Request) -> TokenIssuer:
    """Return the issuer built at application startup."""

    issuer = getattr(request.app.state, "token_issuer", None)
    if issuer is None:
        raise RuntimeError("token issuer has not been initialised")
    return issuer


def get_credential_store(session: Session = Depends(get_session)) -> CredentialStore:
    return CredentialStore(session)


def get_current_user(
    request: Request,
    store: CredentialStore = Depends(get_credential_store),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> User:
    """Return the authenticated ``User`` or raise ``401``."""

    token_value = request.cookies.get(SESSION_COOKIE_NAME)
    if not token_value:
        raise NotAuthenticated()

    token_data: SessionTokenData | None = issuer.decode(token_value)
    if token_data is None:
        raise NotAuthenticated()

    user = store.get(token_data.user_id)
    if not user:
        raise NotAuthenticated()

    request.state.user = user
    request.state.session_token = token_data
    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the current user has administrator privileges."""

    if not current_user.is_admin:
        raise Forbidden()
    return current_user


__all__ = [
    "get_credential_store",
    "get_current_user",
    "get_token_issuer",
    "require_admin",
]
