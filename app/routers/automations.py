"""
Automation Bank router.

GET    /automations          — own + public recipes, optional ?q= search
POST   /automations          — create
GET    /automations/{id}     — read (if visible)
PATCH  /automations/{id}     — partial update (creator only)
DELETE /automations/{id}     — delete (creator only)
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.auth import require_session
from app.db.base import get_db
from app.models.automation import Automation
from app.schemas.automation import (
    AutomationCreate,
    AutomationListResponse,
    AutomationOut,
    AutomationUpdate,
)
from app.schemas.common import ErrorResponse, ValidationErrorResponse, enum_value
from app.services import automations as service
from app.services.auth import CurrentSession

router = APIRouter(prefix="/automations", tags=["automations"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Not found or not yours."}}


def _to_response(a: Automation, viewer_id: str) -> AutomationOut:
    return AutomationOut(
        id=a.id,
        created_by=a.created_by,
        is_mine=a.created_by == viewer_id,
        title=a.title,
        description=a.description,
        category=enum_value(a.category),
        difficulty_level=enum_value(a.difficulty_level),
        time_to_implement=float(a.time_to_implement or 0),
        hours_saved=float(a.hours_saved or 0),
        tools_used=a.tools_used,
        steps_description=a.steps_description,
        is_public=a.is_public,
        created_at=a.created_at.isoformat() if a.created_at else "",
        updated_at=a.updated_at.isoformat() if a.updated_at else "",
    )


@router.get("", response_model=AutomationListResponse, summary="Browse the automation bank")
def list_automations(
    q: Optional[str] = Query(
        default=None,
        max_length=200,
        description="Case-insensitive search in title, description and tools.",
        examples=["zapier"],
    ),
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    """Your own automations plus every public one, newest first."""
    visible = service.list_visible(db, session.user_id)
    items = service.search(visible, q)
    return AutomationListResponse(
        total=len(items),
        q=q,
        items=[_to_response(a, session.user_id) for a in items],
    )


@router.post(
    "",
    response_model=AutomationOut,
    status_code=status.HTTP_201_CREATED,
    summary="Share an automation",
    responses={422: {"model": ValidationErrorResponse}},
)
def create_automation(
    payload: AutomationCreate,
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    automation = service.create_automation(db, session.user_id, payload.model_dump())
    return _to_response(automation, session.user_id)


@router.get("/{automation_id}", response_model=AutomationOut, responses=_NOT_FOUND)
def get_automation(
    automation_id: int,
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    return _to_response(service.get_visible(db, session.user_id, automation_id), session.user_id)


@router.patch("/{automation_id}", response_model=AutomationOut, responses=_NOT_FOUND)
def update_automation(
    automation_id: int,
    payload: AutomationUpdate,
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    changes = payload.model_dump(exclude_unset=True)
    automation = service.update_automation(db, session.user_id, automation_id, changes)
    return _to_response(automation, session.user_id)


@router.delete(
    "/{automation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
)
def delete_automation(
    automation_id: int,
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    service.delete_automation(db, session.user_id, automation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
