"""
Decision Log router.

GET    /decisions               — own log (filterable) + stats
GET    /decisions/principles    — the 10 principles
POST   /decisions               — create
GET    /decisions/{id}          — read
PATCH  /decisions/{id}          — partial update
DELETE /decisions/{id}          — delete
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.auth import require_session
from app.db.base import get_db
from app.models.decision_log import DecisionLog
from app.schemas.common import ErrorResponse, ValidationErrorResponse, enum_value
from app.schemas.decision import (
    DecisionCreate,
    DecisionListResponse,
    DecisionOut,
    DecisionStatsOut,
    DecisionTypeFilter,
    DecisionUpdate,
    PrincipleOut,
)
from app.services import decisions as service
from app.services.auth import CurrentSession
from app.services.catalog import PRINCIPLES

router = APIRouter(prefix="/decisions", tags=["decisions"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "No such decision in your log."}}


# ---------------------------------------------------------------------------
# Serialization helper
# ---------------------------------------------------------------------------

def _to_response(d: DecisionLog) -> DecisionOut:
    return DecisionOut(
        id=d.id,
        title=d.title,
        description=d.description,
        decision_type=enum_value(d.decision_type),
        impact_level=enum_value(d.impact_level),
        principle_applied=d.principle_applied,
        time_saved_estimate=float(d.time_saved_estimate or 0),
        created_at=d.created_at.isoformat() if d.created_at else "",
        updated_at=d.updated_at.isoformat() if d.updated_at else "",
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("", response_model=DecisionListResponse, summary="List your decisions")
def list_decisions(
    decision_type: DecisionTypeFilter = Query(
        default=DecisionTypeFilter.all,
        description='"all" or one of eliminate | automate | delegate | simplify.',
    ),
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    """
    Newest first. `stats` always covers the whole log; `items` honour the
    `decision_type` filter.
    """
    log = service.list_decisions(db, session.user_id)
    stats = service.compute_stats(log)
    return DecisionListResponse(
        decision_type=decision_type.value,
        items=[_to_response(d) for d in service.filter_by_type(log, decision_type.value)],
        stats=DecisionStatsOut(
            total=stats.total,
            total_time_saved=stats.total_time_saved,
            average_time_saved=stats.average_time_saved,
        ),
    )


@router.get("/principles", response_model=list[PrincipleOut], summary="The 10 principles")
def principles():
    return [PrincipleOut(id=p.id, name=p.name, description=p.description) for p in PRINCIPLES]


@router.post(
    "",
    response_model=DecisionOut,
    status_code=status.HTTP_201_CREATED,
    summary="Log a decision",
    responses={422: {"model": ValidationErrorResponse}},
)
def create_decision(
    payload: DecisionCreate,
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    return _to_response(service.create_decision(db, session.user_id, payload.model_dump()))


@router.get("/{decision_id}", response_model=DecisionOut, responses=_NOT_FOUND)
def get_decision(
    decision_id: int,
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    return _to_response(service.get_decision(db, session.user_id, decision_id))


@router.patch("/{decision_id}", response_model=DecisionOut, responses=_NOT_FOUND)
def update_decision(
    decision_id: int,
    payload: DecisionUpdate,
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    changes = payload.model_dump(exclude_unset=True)
    return _to_response(service.update_decision(db, session.user_id, decision_id, changes))


@router.delete(
    "/{decision_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
)
def delete_decision(
    decision_id: int,
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    service.delete_decision(db, session.user_id, decision_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
