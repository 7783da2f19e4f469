"""
Team Metrics service — read-only aggregation across every user.

Pulls all profile scores and all automation rows at request time, then
reduces them in Python. Nothing is cached or persisted.

  total_users              profile count
  average_score            rounded mean score, 0 with no users
                           (a profile without a score counts as 0)
  total_automations        row count
  total_hours_saved        sum of hours_saved
  score_distribution       3 buckets on the assessment band thresholds
  automations_by_category  count per category, first-appearance order
  top_automators           top 5 creators by count, stable on ties

Public API
----------
aggregate(scores, automations)   -> TeamMetrics   (pure)
get_team_metrics(db)             -> TeamMetrics
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Protocol, Sequence

from sqlalchemy.orm import Session

from app.db.base import persistence_guard
from app.models.automation import Automation
from app.models.profile import Profile
from app.schemas.common import enum_value
from app.services.scoring import BANDS, band_for

TOP_AUTOMATORS = 5


class AutomationRow(Protocol):
    category: object
    hours_saved: Optional[float]
    created_by: str


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class ScoreBucket:
    band: str
    label: str
    min_score: int
    max_score: int
    count: int


@dataclass
class CategoryCount:
    category: str
    count: int


@dataclass
class Automator:
    user_id: str
    count: int
    name: str


@dataclass
class TeamMetrics:
    total_users: int
    average_score: int
    total_automations: int
    total_hours_saved: float
    score_distribution: list[ScoreBucket]
    automations_by_category: list[CategoryCount]
    top_automators: list[Automator]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _rounded_mean(values: Sequence[int]) -> int:
    if not values:
        return 0
    raw = Decimal(sum(values)) / Decimal(len(values))
    return int(raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def display_name(user_id: str) -> str:
    return f"User {user_id[:8]}"


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------

def aggregate(
    scores: Iterable[Optional[int]],
    automations: Iterable[AutomationRow],
) -> TeamMetrics:
    values = [s or 0 for s in scores]
    rows = list(automations)

    per_band = Counter(band_for(v).key for v in values)
    distribution = [
        ScoreBucket(
            band=b.key,
            label=b.label,
            min_score=b.min_score,
            max_score=b.max_score,
            count=per_band.get(b.key, 0),
        )
        for b in BANDS
    ]

    per_category = Counter(enum_value(a.category) for a in rows)
    per_creator = Counter(a.created_by for a in rows)
    # sorted() is stable, so equal counts keep first-appearance order
    ranked = sorted(per_creator.items(), key=lambda item: item[1], reverse=True)

    return TeamMetrics(
        total_users=len(values),
        average_score=_rounded_mean(values),
        total_automations=len(rows),
        total_hours_saved=sum(float(a.hours_saved or 0) for a in rows),
        score_distribution=distribution,
        automations_by_category=[
            CategoryCount(category=c, count=n) for c, n in per_category.items()
        ],
        top_automators=[
            Automator(user_id=uid, count=n, name=display_name(uid))
            for uid, n in ranked[:TOP_AUTOMATORS]
        ],
    )


def get_team_metrics(db: Session) -> TeamMetrics:
    with persistence_guard(db, "team_metrics"):
        scores = [row.score for row in db.query(Profile.score).order_by(Profile.id).all()]
        automations = (
            db.query(Automation.category, Automation.hours_saved, Automation.created_by)
            .order_by(Automation.id)
            .all()
        )
    return aggregate(scores, automations)
