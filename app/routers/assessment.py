"""
Assessment router.

GET  /assessment/symptoms   — the 10 statements
GET  /assessment/bands      — score bands and their recommendations
POST /assessment            — submit answers, get score + band
GET  /assessment/history    — caller's past results (newest first)
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.auth import require_session
from app.db.base import get_db
from app.schemas.assessment import (
    AssessmentHistoryItem,
    AssessmentHistoryResponse,
    AssessmentRequest,
    AssessmentResponse,
    BandOut,
    SymptomListResponse,
    SymptomOut,
)
from app.schemas.common import ErrorResponse
from app.services.assessment import count_results, list_results, submit_assessment
from app.services.auth import CurrentSession
from app.services.catalog import SYMPTOMS
from app.services.scoring import BANDS, Band, band_for

router = APIRouter(prefix="/assessment", tags=["assessment"])


def _band_to_response(b: Band) -> BandOut:
    return BandOut(
        key=b.key,
        label=b.label,
        min_score=b.min_score,
        max_score=b.max_score,
        description=b.description,
        recommendations=list(b.recommendations),
    )


@router.get("/symptoms", response_model=SymptomListResponse, summary="Questionnaire items")
def symptoms():
    return SymptomListResponse(
        total=len(SYMPTOMS),
        items=[
            SymptomOut(id=s.id, title=s.title, description=s.description,
                       examples=list(s.examples))
            for s in SYMPTOMS
        ],
    )


@router.get("/bands", response_model=list[BandOut], summary="Score bands (worst first)")
def bands():
    return [_band_to_response(b) for b in BANDS]


@router.post(
    "",
    response_model=AssessmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a completed assessment",
    responses={
        401: {"model": ErrorResponse},
        422: {"model": ErrorResponse, "description": "Unanswered or unknown items."},
        503: {"model": ErrorResponse, "description": "Could not save; try again."},
    },
)
def submit(
    payload: AssessmentRequest,
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    """
    Score the answers and store them.

    `score = round(100 × answers_without_symptom / 10)`. The result row and
    the profile's cached score are saved together or not at all.
    """
    submitted = submit_assessment(db, session.user_id, payload.answers)
    result = submitted.result
    return AssessmentResponse(
        id=result.id,
        score=submitted.score.score,
        symptoms_count=submitted.score.symptoms_count,
        total_items=submitted.score.total,
        band=_band_to_response(submitted.band),
        created_at=result.created_at.isoformat() if result.created_at else "",
    )


@router.get("/history", response_model=AssessmentHistoryResponse, summary="Past results")
def history(
    limit: int = Query(default=50, ge=1, le=200, description="Page size."),
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    results = list_results(db, session.user_id, limit=limit)
    return AssessmentHistoryResponse(
        total=count_results(db, session.user_id),
        latest_score=results[0].score if results else None,
        items=[
            AssessmentHistoryItem(
                id=r.id,
                score=r.score,
                symptoms_count=r.symptoms_count,
                label=band_for(r.score).label,
                answers=r.answers,
                created_at=r.created_at.isoformat() if r.created_at else "",
            )
            for r in results
        ],
    )
