"""
Metrics router — team-wide aggregates.

GET /metrics/team   — users, scores, automations, rankings
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.auth import require_session
from app.db.base import get_db
from app.schemas.common import ErrorResponse
from app.schemas.metrics import TeamMetricsResponse
from app.services.auth import CurrentSession
from app.services.team_metrics import get_team_metrics

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get(
    "/team",
    response_model=TeamMetricsResponse,
    summary="Team-wide Smart Laziness metrics",
    responses={401: {"model": ErrorResponse}},
)
def team_metrics(
    session: CurrentSession = Depends(require_session),
    db: Session = Depends(get_db),
):
    """
    Aggregates every profile and every automation at request time.

    ### Score distribution buckets
    | Band | Range |
    |---|---|
    | Unintelligently Lazy | 0–59 |
    | In Transition        | 60–79 |
    | Smart-Lazy           | 80–100 |

    `top_automators` lists at most 5 users, most automations first.
    """
    return TeamMetricsResponse.model_validate(get_team_metrics(db))
