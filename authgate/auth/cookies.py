"""Cookie policy for the access token."""
from __future__ import annotations

from datetime import timedelta

from fastapi import Response

SESSION_COOKIE_NAME = "accessToken"
SESSION_COOKIE_TTL = timedelta(days=1)
SESSION_COOKIE_TTL_SECONDS = int(SESSION_COOKIE_TTL.total_seconds())
SESSION_COOKIE_PATH = "/"
SESSION_COOKIE_SAMESITE = "strict"


def set_session_cookie(response: Response, token: str) -> None:
    """Attach ``token`` to ``response`` as the session cookie."""

    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=SESSION_COOKIE_TTL_SECONDS,
        path=SESSION_COOKIE_PATH,
        httponly=True,
        secure=True,
        samesite=SESSION_COOKIE_SAMESITE,
    )


def clear_session_cookie(response: Response) -> None:
    """Expire the session cookie on ``response``.

    Matches the ``HttpOnly``/``Secure`` flags used when setting it.
    """

    response.delete_cookie(
        SESSION_COOKIE_NAME,
        path=SESSION_COOKIE_PATH,
        httponly=True,
        secure=True,
        samesite=None,
    )


__all__ = [
    "SESSION_COOKIE_NAME",
    "SESSION_COOKIE_TTL",
    "SESSION_COOKIE_TTL_SECONDS",
    "clear_session_cookie",
    "set_session_cookie",
]
