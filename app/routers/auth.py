"""
Auth router.

POST /auth/sign-up   — create an account and open a session
POST /auth/sign-in   — open a session
POST /auth/sign-out  — revoke the presented session
GET  /auth/session   — the current session
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.auth import bearer_token, require_session
from app.db.base import get_db
from app.schemas.auth import Credentials, CurrentSessionResponse, SessionResponse
from app.schemas.common import ErrorResponse
from app.services.auth import CurrentSession, sign_in, sign_out, sign_up

router = APIRouter(prefix="/auth", tags=["auth"])


def _to_response(s: CurrentSession) -> SessionResponse:
    return SessionResponse(
        user_id=s.user_id,
        email=s.email,
        access_token=s.token,
        expires_at=s.expires_at.isoformat(),
    )


@router.post(
    "/sign-up",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={409: {"model": ErrorResponse, "description": "Email already registered."}},
)
def sign_up_endpoint(payload: Credentials, db: Session = Depends(get_db)):
    """Register `email` and return a session for the new account."""
    return _to_response(sign_up(db, payload.email, payload.password))


@router.post(
    "/sign-in",
    response_model=SessionResponse,
    summary="Sign in",
    responses={401: {"model": ErrorResponse, "description": "Bad email or password."}},
)
def sign_in_endpoint(payload: Credentials, db: Session = Depends(get_db)):
    return _to_response(sign_in(db, payload.email, payload.password))


@router.post(
    "/sign-out",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Sign out",
)
def sign_out_endpoint(
    token: Optional[str] = Depends(bearer_token),
    db: Session = Depends(get_db),
):
    """Revoke the presented bearer token. Signing out twice is a no-op."""
    if token:
        sign_out(db, token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/session",
    response_model=CurrentSessionResponse,
    summary="Current session",
    responses={401: {"model": ErrorResponse, "description": "No valid session."}},
)
def current_session(session: CurrentSession = Depends(require_session)):
    return CurrentSessionResponse(
        user_id=session.user_id,
        email=session.email,
        expires_at=session.expires_at.isoformat(),
    )
