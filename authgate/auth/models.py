"""SQLModel table and response views for user accounts."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField
from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without an offset
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _timestamp_column(*, onupdate: bool = False) -> Column:
    return Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now() if onupdate else None,
    )


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String(120), nullable=False))
    email: str = Field(
        sa_column=Column(String(254), unique=True, index=True, nullable=False)
    )
    hashed_password: str = Field(
        sa_column=Column(String(255), nullable=False)
    )
    is_admin: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(default_factory=_utcnow, sa_column=_timestamp_column())
    updated_at: datetime = Field(
        default_factory=_utcnow, sa_column=_timestamp_column(onupdate=True)
    )


class UserView(BaseModel):
    """Client-safe representation of a :class:`User` (no password hash)."""

    id: int
    name: str
    email: str
    is_admin: bool = PydanticField(..., alias="isAdmin")
    created_at: datetime = PydanticField(..., alias="createdAt")
    updated_at: datetime = PydanticField(..., alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            is_admin=user.is_admin,
            created_at=_as_utc(user.created_at),
            updated_at=_as_utc(user.updated_at),
        )


class AuthResponse(BaseModel):
    """Body returned by successful registration and login."""

    user: UserView
    is_admin: bool = PydanticField(..., alias="isAdmin")

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


__all__ = ["AuthResponse", "MessageResponse", "User", "UserView"]
