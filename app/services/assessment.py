"""
Assessment service: score a questionnaire submission and persist it.

The AssessmentResult insert and the Profile upsert share one transaction:
either both rows are written or neither is.

Public API
----------
submit_assessment(db, user_id, answers)   -> SubmittedAssessment
list_results(db, user_id, limit)          -> list[AssessmentResult]
count_results(db, user_id)                -> int
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping

import structlog
from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from app.core.errors import AssessmentIncompleteError
from app.db.base import commit, persistence_guard
from app.models.assessment_result import AssessmentResult
from app.models.profile import Profile
from app.services.scoring import AssessmentScore, Band, band_for, score_answers

logger = structlog.get_logger(__name__)


@dataclass
class SubmittedAssessment:
    result: AssessmentResult
    score: AssessmentScore
    band: Band


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


def submit_assessment(
    db: Session,
    user_id: str,
    answers: Mapping[int, bool],
) -> SubmittedAssessment:
    """Reject incomplete answer sets; otherwise write result + profile atomically."""
    scored = score_answers(answers)
    if not scored.is_complete:
        raise AssessmentIncompleteError(missing=scored.missing)

    submitted_at = _now()
    result = AssessmentResult(
        user_id=user_id,
        answers={str(k): bool(v) for k, v in sorted(answers.items())},
        score=scored.score,
        symptoms_count=scored.symptoms_count,
    )
    with persistence_guard(db, "submit_assessment", user_id=user_id):
        db.add(result)
        _upsert_profile(db, user_id, scored.score, submitted_at)
    commit(db, "submit_assessment", user_id=user_id)
    db.refresh(result)

    band = band_for(scored.score)
    logger.info(
        "assessment_submitted",
        user_id=user_id,
        score=scored.score,
        symptoms_count=scored.symptoms_count,
        band=band.key,
    )
    return SubmittedAssessment(result=result, score=scored, band=band)


def _upsert_profile(db: Session, user_id: str, score: int, when: datetime) -> None:
    """
    Stage the cached score on the user's profile row. Caller commits.

    A single INSERT .. ON CONFLICT (user_id) DO UPDATE, so two first
    submissions racing for the same user both land on one row.
    """
    dialect = db.get_bind().dialect.name
    insert = postgresql.insert if dialect == "postgresql" else sqlite.insert
    stmt = insert(Profile).values(user_id=user_id, score=score, last_assessment_date=when)
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id"],
        set_={"score": score, "last_assessment_date": when, "updated_at": func.now()},
    )
    db.execute(stmt)


def list_results(db: Session, user_id: str, limit: int = 50) -> list[AssessmentResult]:
    with persistence_guard(db, "list_assessment_results", user_id=user_id):
        return (
            db.query(AssessmentResult)
            .filter(AssessmentResult.user_id == user_id)
            .order_by(AssessmentResult.created_at.desc(), AssessmentResult.id.desc())
            .limit(limit)
            .all()
        )


def count_results(db: Session, user_id: str) -> int:
    with persistence_guard(db, "count_assessment_results", user_id=user_id):
        return (
            db.query(func.count(AssessmentResult.id))
            .filter(AssessmentResult.user_id == user_id)
            .scalar()
            or 0
        )
