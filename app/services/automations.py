"""
Automation Bank service.

Visibility rule: a row is readable when created_by == viewer OR is_public.
Only the creator may change or delete it; for anyone else the row does not
exist (AutomationNotFoundError), whether or not it is public.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

import structlog
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.errors import AutomationNotFoundError
from app.db.base import commit, persistence_guard
from app.models.automation import Automation

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def matches_search(automation: Automation, term: Optional[str]) -> bool:
    """Case-insensitive substring match on title, description or tools_used."""
    if not term or not term.strip():
        return True
    needle = term.strip().lower()
    haystacks = (automation.title, automation.description, automation.tools_used)
    return any(h and needle in h.lower() for h in haystacks)


def search(automations: Iterable[Automation], term: Optional[str]) -> list[Automation]:
    return [a for a in automations if matches_search(a, term)]


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def _visible_to(viewer_id: str):
    return or_(Automation.created_by == viewer_id, Automation.is_public.is_(True))


def list_visible(db: Session, viewer_id: str) -> list[Automation]:
    """Own rows plus everyone's public rows, newest first."""
    with persistence_guard(db, "list_automations", user_id=viewer_id):
        return (
            db.query(Automation)
            .filter(_visible_to(viewer_id))
            .order_by(Automation.created_at.desc(), Automation.id.desc())
            .all()
        )


def get_visible(db: Session, viewer_id: str, automation_id: int) -> Automation:
    with persistence_guard(db, "get_automation", user_id=viewer_id):
        automation: Optional[Automation] = (
            db.query(Automation)
            .filter(Automation.id == automation_id, _visible_to(viewer_id))
            .first()
        )
    if automation is None:
        raise AutomationNotFoundError(automation_id)
    return automation


def _get_owned(db: Session, owner_id: str, automation_id: int) -> Automation:
    with persistence_guard(db, "get_automation", user_id=owner_id):
        automation: Optional[Automation] = (
            db.query(Automation)
            .filter(Automation.id == automation_id, Automation.created_by == owner_id)
            .first()
        )
    if automation is None:
        raise AutomationNotFoundError(automation_id)
    return automation


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

def create_automation(db: Session, owner_id: str, fields: dict[str, Any]) -> Automation:
    automation = Automation(created_by=owner_id, **fields)
    db.add(automation)
    commit(db, "create_automation", user_id=owner_id)
    db.refresh(automation)
    logger.info(
        "automation_created",
        user_id=owner_id,
        automation_id=automation.id,
        is_public=automation.is_public,
    )
    return automation


def update_automation(
    db: Session, owner_id: str, automation_id: int, changes: dict[str, Any]
) -> Automation:
    automation = _get_owned(db, owner_id, automation_id)
    for name, value in changes.items():
        setattr(automation, name, value)
    commit(db, "update_automation", user_id=owner_id, automation_id=automation_id)
    db.refresh(automation)
    logger.info("automation_updated", user_id=owner_id, automation_id=automation_id,
                fields=sorted(changes))
    return automation


def delete_automation(db: Session, owner_id: str, automation_id: int) -> None:
    automation = _get_owned(db, owner_id, automation_id)
    db.delete(automation)
    commit(db, "delete_automation", user_id=owner_id, automation_id=automation_id)
    logger.info("automation_deleted", user_id=owner_id, automation_id=automation_id)
