"""
Auth service: accounts, bearer sessions and auth-state listeners.

Public API
----------
sign_up(db, email, password)      -> CurrentSession
sign_in(db, email, password)      -> CurrentSession
sign_out(db, token)               -> None
resolve_session(db, token)        -> CurrentSession | None
on_auth_state_change(listener)    -> unsubscribe callable

Listeners are called with (event, session) after the change is committed.
A failing listener is logged and skipped; it never breaks the auth flow.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import structlog
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import EmailAlreadyRegisteredError, InvalidCredentialsError
from app.core.security import hash_password, new_session_token, verify_password
from app.db.base import commit, persistence_guard
from app.models.user import AuthSession, User

logger = structlog.get_logger(__name__)


class AuthEvent:
    SIGNED_IN  = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


@dataclass
class CurrentSession:
    user_id: str
    email: str
    token: str
    expires_at: datetime


AuthListener = Callable[[str, Optional[CurrentSession]], None]

_listeners: list[AuthListener] = []


# ---------------------------------------------------------------------------
# Listeners
# ---------------------------------------------------------------------------

def on_auth_state_change(listener: AuthListener) -> Callable[[], None]:
    """Register a listener; returns a callable that unregisters it."""
    _listeners.append(listener)

    def unsubscribe() -> None:
        if listener in _listeners:
            _listeners.remove(listener)

    return unsubscribe


def _notify(event: str, session: Optional[CurrentSession]) -> None:
    for listener in list(_listeners):
        try:
            listener(event, session)
        except Exception:
            logger.exception("auth_listener_failed", auth_event=event)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _open_session(db: Session, user: User) -> CurrentSession:
    row = AuthSession(
        token=new_session_token(),
        user_id=user.id,
        expires_at=_now() + timedelta(hours=settings.SESSION_TTL_HOURS),
    )
    db.add(row)
    commit(db, "open_session", user_id=user.id)
    session = CurrentSession(
        user_id=user.id,
        email=user.email,
        token=row.token,
        expires_at=_as_utc(row.expires_at),
    )
    logger.info("signed_in", user_id=user.id)
    _notify(AuthEvent.SIGNED_IN, session)
    return session


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------

def sign_up(db: Session, email: str, password: str) -> CurrentSession:
    address = normalize_email(email)
    with persistence_guard(db, "sign_up"):
        exists = db.query(User.id).filter(User.email == address).first() is not None
    if exists:
        raise EmailAlreadyRegisteredError(address)

    user = User(email=address, password_hash=hash_password(password))
    db.add(user)
    commit(db, "sign_up")
    logger.info("user_registered", user_id=user.id)
    return _open_session(db, user)


def sign_in(db: Session, email: str, password: str) -> CurrentSession:
    with persistence_guard(db, "sign_in"):
        user: Optional[User] = (
            db.query(User).filter(User.email == normalize_email(email)).first()
        )
    if user is None or not verify_password(password, user.password_hash):
        logger.info("sign_in_rejected")
        raise InvalidCredentialsError()
    return _open_session(db, user)


def sign_out(db: Session, token: str) -> None:
    with persistence_guard(db, "sign_out"):
        row: Optional[AuthSession] = (
            db.query(AuthSession).filter(AuthSession.token == token).first()
        )
    if row is None or row.revoked_at is not None:
        return
    row.revoked_at = _now()
    commit(db, "sign_out", user_id=row.user_id)
    logger.info("signed_out", user_id=row.user_id)
    _notify(AuthEvent.SIGNED_OUT, None)


def resolve_session(db: Session, token: Optional[str]) -> Optional[CurrentSession]:
    """Return the live session for a bearer token, or None."""
    if not token:
        return None
    with persistence_guard(db, "resolve_session"):
        found = (
            db.query(AuthSession, User)
            .join(User, User.id == AuthSession.user_id)
            .filter(AuthSession.token == token)
            .first()
        )
    if found is None:
        return None
    row, user = found
    if row.revoked_at is not None or _as_utc(row.expires_at) <= _now():
        return None
    return CurrentSession(
        user_id=user.id,
        email=user.email,
        token=row.token,
        expires_at=_as_utc(row.expires_at),
    )
