"""Signed access tokens (JWT, HS256)."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt as pyjwt

ALGORITHM = "HS256"
ADMIN_CLAIM = "isAdmin"

_DURATION_RE = re.compile(
    r"^\s*(?P<amount>-?\d+(?:\.\d+)?)\s*(?P<unit>[a-z]*)\s*$", re.IGNORECASE
)

_UNIT_SECONDS = {
    "ms": 0.001,
    "msec": 0.001,
    "msecs": 0.001,
    "millisecond": 0.001,
    "milliseconds": 0.001,
    "s": 1,
    "sec": 1,
    "secs": 1,
    "second": 1,
    "seconds": 1,
    "m": 60,
    "min": 60,
    "mins": 60,
    "minute": 60,
    "minutes": 60,
    "h": 3600,
    "hr": 3600,
    "hrs": 3600,
    "hour": 3600,
    "hours": 3600,
    "d": 86400,
    "day": 86400,
    "days": 86400,
    "w": 604800,
    "week": 604800,
    "weeks": 604800,
    "y": 31557600,
    "yr": 31557600,
    "yrs": 31557600,
    "year": 31557600,
    "years": 31557600,
}


def parse_duration(value: str | int | float) -> timedelta:
    """Parse an expiry such as ``"1d"``, ``"12h"`` or ``3600``.

    Numbers are seconds; a string without a unit is milliseconds.
    """

    if isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        seconds = float(value)
    else:
        match = _DURATION_RE.match(str(value))
        if match is None:
            raise ValueError(f"invalid duration: {value!r}")
        unit = match.group("unit").lower() or "ms"
        if unit not in _UNIT_SECONDS:
            raise ValueError(f"unknown duration unit {unit!r} in {value!r}")
        seconds = float(match.group("amount")) * _UNIT_SECONDS[unit]

    if seconds <= 0:
        raise ValueError(f"duration must be positive: {value!r}")
    return timedelta(seconds=seconds)


@dataclass(frozen=True)
class SessionTokenData:
    """Claims extracted from a verified access token."""

    user_id: int
    is_admin: bool
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class TokenIssuer:
    """Mint and verify access tokens with a fixed secret and lifetime."""

    secret: str
    expires_in: timedelta

    def __post_init__(self) -> None:
        if not self.secret:
            raise RuntimeError("JWT_SECRET must be configured")
        if self.expires_in <= timedelta(0):
            raise ValueError("token lifetime must be positive")

    @classmethod
    def from_settings(cls, settings) -> "TokenIssuer":
        return cls(
            secret=settings.JWT_SECRET,
            expires_in=parse_duration(settings.ACCESS_TOKEN_EXPIRY),
        )

    def issue(self, subject_id: int, is_admin: bool) -> str:
        """Return a signed token for ``subject_id``."""

        if subject_id is None:
            raise ValueError("user must be persisted before issuing a token")
        issued_at = datetime.now(timezone.utc)
        payload = {
            "sub": str(subject_id),
            "id": subject_id,
            ADMIN_CLAIM: bool(is_admin),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.expires_in).timestamp()),
        }
        return pyjwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> Optional[SessionTokenData]:
        """Validate ``token`` and return its claims, or ``None``."""

        if not token:
            return None
        try:
            payload = pyjwt.decode(
                token,
                self.secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "iat", "sub"]},
            )
        except pyjwt.InvalidTokenError:
            return None

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            return None

        return SessionTokenData(
            user_id=user_id,
            is_admin=bool(payload.get(ADMIN_CLAIM, False)),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )


__all__ = ["ALGORITHM", "SessionTokenData", "TokenIssuer", "parse_duration"]
