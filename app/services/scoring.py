"""
Smart Laziness score and band categorisation.

Definition
----------
score = round(100 × healthy_answers / N), halves rounded up, where an answer
is "healthy" when the respondent does NOT identify with the symptom.

The score is only defined for a complete answer set; incomplete sets (and the
degenerate N = 0 questionnaire) score 0.

Bands
-----
  score >= 80        → "Smart-Lazy"
  60 <= score < 80   → "In Transition"
  score < 60         → "Unintelligently Lazy"

Pure functions only: no DB, no HTTP.

Public API
----------
score_answers(answers, symptom_ids)   -> AssessmentScore
band_for(score)                       -> Band
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Sequence

from app.services.catalog import SYMPTOM_IDS


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class AssessmentScore:
    score: int               # 0 – 100
    symptoms_count: int      # answers where the symptom is present
    healthy_count: int
    total: int               # N
    missing: list[int] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing


@dataclass(frozen=True)
class Band:
    key: str
    label: str
    min_score: int
    max_score: int
    description: str
    recommendations: tuple[str, ...]

    def contains(self, score: int) -> bool:
        return self.min_score <= score <= self.max_score


# ---------------------------------------------------------------------------
# Bands (worst first)
# ---------------------------------------------------------------------------

SMART_LAZY_THRESHOLD = 80
IN_TRANSITION_THRESHOLD = 60

UNINTELLIGENTLY_LAZY = Band(
    key="unintelligently_lazy",
    label="Unintelligently Lazy",
    min_score=0,
    max_score=IN_TRANSITION_THRESHOLD - 1,
    description=(
        "You are still stuck in the old model. "
        "Time to rethink your approach to work."
    ),
    recommendations=(
        "Pick one recurring meeting this week and ask why it exists",
        "Write down every task you repeat more than twice a week",
        "Say \"no\" to one request today",
        "Block two hours in your calendar for work that produces output",
    ),
)

IN_TRANSITION = Band(
    key="in_transition",
    label="In Transition",
    min_score=IN_TRANSITION_THRESHOLD,
    max_score=SMART_LAZY_THRESHOLD - 1,
    description=(
        "You are on the right path, but a few workaholic habits "
        "are still left to eliminate."
    ),
    recommendations=(
        "Start logging your daily decisions",
        "Identify one task to automate",
        "Practise saying \"no\" to one thing today",
        "Ask \"Why am I doing this?\" before executing",
    ),
)

SMART_LAZY = Band(
    key="smart_lazy",
    label="Smart-Lazy",
    min_score=SMART_LAZY_THRESHOLD,
    max_score=100,
    description=(
        "Congratulations! You understand that efficiency beats effort. "
        "Keep applying the principles."
    ),
    recommendations=(
        "Share one of your automations with the team",
        "Document a process so someone else can run it without you",
        "Mentor a teammate who is still in transition",
        "Review your decision log monthly and double down on what worked",
    ),
)

BANDS: tuple[Band, ...] = (UNINTELLIGENTLY_LAZY, IN_TRANSITION, SMART_LAZY)


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------

def percentage(part: int, total: int) -> int:
    """round(100 * part / total) with halves rounded up; 0 when total is 0."""
    if total <= 0:
        return 0
    raw = Decimal(100 * part) / Decimal(total)
    return int(raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def score_answers(
    answers: Mapping[int, bool],
    symptom_ids: Sequence[int] = SYMPTOM_IDS,
) -> AssessmentScore:
    """
    Score an answer map against the ordered questionnaire.

    `answers[i]` is True when the respondent identifies with symptom `i`.
    Keys not in `symptom_ids` are ignored; callers validate them.
    """
    total = len(symptom_ids)
    missing = [sid for sid in symptom_ids if answers.get(sid) is None]
    symptoms_count = sum(1 for sid in symptom_ids if answers.get(sid) is True)
    healthy_count = sum(1 for sid in symptom_ids if answers.get(sid) is False)

    score = percentage(healthy_count, total) if not missing else 0

    return AssessmentScore(
        score=score,
        symptoms_count=symptoms_count,
        healthy_count=healthy_count,
        total=total,
        missing=missing,
    )


def band_for(score: int | None) -> Band:
    """Map a score to its band. A missing score is treated as 0."""
    value = score or 0
    if value >= SMART_LAZY_THRESHOLD:
        return SMART_LAZY
    if value >= IN_TRANSITION_THRESHOLD:
        return IN_TRANSITION
    return UNINTELLIGENTLY_LAZY
