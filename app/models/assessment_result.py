"""
AssessmentResult — one row per questionnaire submission.

Append-only. `answers` maps symptom id (as a string key) to a bool,
True meaning the respondent identifies with the symptom.
"""
from datetime import datetime
from sqlalchemy import Integer, String, JSON, DateTime, CheckConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class AssessmentResult(Base):
    __tablename__ = "assessment_results"
    __table_args__ = (
        CheckConstraint("score >= 0 AND score <= 100", name="ck_assessment_results_score_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    answers: Mapped[dict] = mapped_column(JSON, nullable=False)
    score: Mapped[int] = mapped_column(
        Integer, nullable=False,
        comment="0-100, derived from answers",
    )
    symptoms_count: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
