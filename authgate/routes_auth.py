from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from .auth.cookies import clear_session_cookie, set_session_cookie
from .auth.dependencies import (
    get_credential_store,
    get_current_user,
    get_token_issuer,
    require_admin,
)
from .auth.errors import UserNotFound
from .auth.flows import login_user, register_user
from .auth.models import AuthResponse, MessageResponse, User, UserView
from .auth.store import CredentialStore
from .auth.tokens import TokenIssuer

router = APIRouter(prefix="/api/auth", tags=["auth"])


class RegisterRequest(BaseModel):
    """Request body for creating an account."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Request body for signing in."""

    email: Optional[str] = None
    password: Optional[str] = None


@router.post("/register", response_model=AuthResponse)
def register(
    response: Response,
    payload: Optional[RegisterRequest] = None,
    store: CredentialStore = Depends(get_credential_store),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    payload = payload or RegisterRequest()
    result = register_user(
        store,
        issuer,
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )
    set_session_cookie(response, result.token)
    return result.to_response()


@router.post("/login", response_model=AuthResponse)
def login(
    response: Response,
    payload: Optional[LoginRequest] = None,
    store: CredentialStore = Depends(get_credential_store),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    payload = payload or LoginRequest()
    result = login_user(store, issuer, email=payload.email, password=payload.password)
    set_session_cookie(response, result.token)
    return result.to_response()


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserView)
def me(current_user: User = Depends(get_current_user)):
    return UserView.from_user(current_user)


@router.get("/users/{user_id}", response_model=UserView)
def get_user(
    user_id: int,
    _admin: User = Depends(require_admin),
    store: CredentialStore = Depends(get_credential_store),
):
    user = store.get(user_id)
    if user is None:
        raise UserNotFound()
    return UserView.from_user(user)
