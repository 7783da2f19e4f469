"""
FastAPI dependencies that resolve the bearer session.

    @router.get("/dashboard")
    def dashboard(session: CurrentSession = Depends(require_session), ...):
"""
from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.core.errors import NotAuthenticatedError
from app.db.base import get_db
from app.services.auth import CurrentSession, resolve_session


def bearer_token(
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def optional_session(
    token: Optional[str] = Depends(bearer_token),
    db: Session = Depends(get_db),
) -> Optional[CurrentSession]:
    return resolve_session(db, token)


def require_session(
    token: Optional[str] = Depends(bearer_token),
    db: Session = Depends(get_db),
) -> CurrentSession:
    if token is None:
        raise NotAuthenticatedError("missing")
    session = resolve_session(db, token)
    if session is None:
        raise NotAuthenticatedError("invalid_or_expired")
    return session
