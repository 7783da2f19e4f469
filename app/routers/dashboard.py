"""
Dashboard router.

GET /dashboard  — the caller's score, band and activity counts
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.auth import require_session
from app.db.base import get_db
from app.schemas.dashboard import DashboardResponse
from app.services.auth import CurrentSession
from app.services.dashboard import get_dashboard

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse, summary="Personal summary")
def dashboard(
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    """Score is 0 and the band is the lowest until a first assessment is submitted."""
    d = get_dashboard(db, session)
    return DashboardResponse(
        email=d.email,
        score=d.score,
        label=d.label,
        band=d.band,
        automations_created=d.automations_created,
        hours_saved=d.hours_saved,
        decisions_logged=d.decisions_logged,
        last_assessment_date=d.last_assessment_date.isoformat() if d.last_assessment_date else None,
    )
