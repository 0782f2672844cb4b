"""Engine and session handling for the credential store.

The active :class:`Database` is built lazily from ``settings.AUTH_DB_URL``;
tests and the bootstrap CLI swap it with :func:`use_database`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator, Optional

from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session, SQLModel, create_engine

from .config import settings


def _sqlite_file(database_url: str) -> Optional[Path]:
    try:
        url = make_url(database_url)
    except ArgumentError:
        return None
    if not url.drivername.startswith("sqlite"):
        return None
    if not url.database or url.database == ":memory:":
        return None
    return Path(url.database).expanduser()


class Database:
    """One engine plus the session factory bound to it."""

    def __init__(self, url: str) -> None:
        self.url = url
        connect_args: dict[str, Any] = {}
        sqlite_file = _sqlite_file(url)
        if sqlite_file is not None:
            sqlite_file.parent.mkdir(parents=True, exist_ok=True)
        if url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        self.engine: Engine = create_engine(url, connect_args=connect_args)
        self._sessions = sessionmaker(
            bind=self.engine,
            class_=Session,
            autocommit=False,
            autoflush=False,
        )

    def session(self) -> Session:
        return self._sessions()

    def create_tables(self) -> None:
        """Create every SQLModel table that is missing."""

        SQLModel.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


_database: Optional[Database] = None


def get_database() -> Database:
    """Return the active database, building it from settings on first use."""

    global _database
    if _database is None:
        _database = Database(settings.AUTH_DB_URL)
    return _database


def use_database(url: str) -> Database:
    """Replace the active database with one connected to ``url``."""

    global _database
    reset_database()
    _database = Database(url)
    return _database


def reset_database() -> None:
    """Drop the active database so the next use rebuilds it from settings."""

    global _database
    if _database is not None:
        _database.dispose()
    _database = None


def get_session() -> Iterator[Session]:
    """Yield a database session suitable for FastAPI dependencies."""

    session = get_database().session()
    try:
        yield session
    finally:
        session.close()


__all__ = ["Database", "get_database", "get_session", "reset_database", "use_database"]
