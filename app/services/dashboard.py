"""
Dashboard service: the signed-in user's own summary numbers.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.db.base import persistence_guard
from app.models.automation import Automation
from app.models.decision_log import DecisionLog
from app.models.profile import Profile
from app.services.auth import CurrentSession
from app.services.scoring import band_for


@dataclass
class DashboardSummary:
    email: str
    score: int
    label: str
    band: str
    automations_created: int
    hours_saved: float
    decisions_logged: int
    last_assessment_date: Optional[datetime]


def get_dashboard(db: Session, session: CurrentSession) -> DashboardSummary:
    user_id = session.user_id
    with persistence_guard(db, "dashboard", user_id=user_id):
        profile: Optional[Profile] = (
            db.query(Profile).filter(Profile.user_id == user_id).first()
        )
        automations_created, hours_saved = (
            db.query(func.count(Automation.id), func.coalesce(func.sum(Automation.hours_saved), 0))
            .filter(Automation.created_by == user_id)
            .one()
        )
        decisions_logged: int = (
            db.query(func.count(DecisionLog.id))
            .filter(DecisionLog.user_id == user_id)
            .scalar()
            or 0
        )

    score = (profile.score if profile else None) or 0
    band = band_for(score)
    return DashboardSummary(
        email=session.email,
        score=score,
        label=band.label,
        band=band.key,
        automations_created=automations_created or 0,
        hours_saved=float(hours_saved or 0),
        decisions_logged=decisions_logged,
        last_assessment_date=profile.last_assessment_date if profile else None,
    )
