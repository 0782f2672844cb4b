"""Credential store backed by the ``users`` table."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .. import database
from ..config import settings
from .errors import EmailAlreadyExists
from .models import User
from .passwords import hash_password

logger = logging.getLogger(__name__)


def normalize_email(email: Optional[str]) -> str:
    """Return ``email`` stripped and lower-cased for storage and lookup."""

    return (email or "").strip().lower()


class CredentialStore:
    """Lookup and creation of :class:`User` rows within one session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> Optional[User]:
        normalized = normalize_email(email)
        if not normalized:
            return None
        statement = select(User).where(User.email == normalized)
        return self.session.exec(statement).first()

    def get(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def create(
        self,
        *,
        name: str,
        email: str,
        hashed_password: str,
        is_admin: bool = False,
    ) -> User:
        """Insert a new user; a duplicate e-mail raises :class:`EmailAlreadyExists`."""

        user = User(
            name=name,
            email=normalize_email(email),
            hashed_password=hashed_password,
            is_admin=is_admin,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise EmailAlreadyExists() from exc
        self.session.refresh(user)
        return user


def init_auth_storage() -> None:
    """Ensure tables exist and seed the initial administrator."""

    db = database.get_database()
    db.create_tables()

    with db.session() as session:
        _seed_initial_admin(session)


def _seed_initial_admin(session: Session) -> None:
    """Create the configured admin when no administrator exists yet."""

    existing_admin = session.exec(select(User).where(User.is_admin.is_(True))).first()
    if existing_admin:
        return

    email = normalize_email(settings.INITIAL_ADMIN_EMAIL)
    password = settings.INITIAL_ADMIN_PASSWORD
    if not email or not password:
        return

    store = CredentialStore(session)
    if store.find_by_email(email):
        logger.warning("Initial admin %s already exists without admin rights", email)
        return

    user = store.create(
        name=settings.INITIAL_ADMIN_NAME or email,
        email=email,
        hashed_password=hash_password(password),
        is_admin=True,
    )
    logger.info("Seeded initial administrator id=%s", user.id)


__all__ = ["CredentialStore", "init_auth_storage", "normalize_email"]
