"""
Decision Log service: owner-scoped CRUD plus the log's aggregate numbers.

Every query filters on user_id; a row owned by someone else behaves exactly
like a missing row (DecisionNotFoundError).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

import structlog
from sqlalchemy.orm import Session

from app.core.errors import DecisionNotFoundError
from app.db.base import commit, persistence_guard
from app.models.decision_log import DecisionLog
from app.schemas.common import enum_value

logger = structlog.get_logger(__name__)

ALL_TYPES = "all"


@dataclass
class DecisionStats:
    total: int
    total_time_saved: float
    average_time_saved: float


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def filter_by_type(decisions: Iterable[DecisionLog], decision_type: str) -> list[DecisionLog]:
    if decision_type == ALL_TYPES:
        return list(decisions)
    return [d for d in decisions if enum_value(d.decision_type) == decision_type]


def compute_stats(decisions: Iterable[DecisionLog]) -> DecisionStats:
    estimates = [float(d.time_saved_estimate or 0) for d in decisions]
    total = len(estimates)
    total_time_saved = sum(estimates)
    average = total_time_saved / total if total else 0.0
    return DecisionStats(
        total=total,
        total_time_saved=total_time_saved,
        average_time_saved=average,
    )


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def list_decisions(db: Session, user_id: str) -> list[DecisionLog]:
    """The user's whole log, newest first."""
    with persistence_guard(db, "list_decisions", user_id=user_id):
        return (
            db.query(DecisionLog)
            .filter(DecisionLog.user_id == user_id)
            .order_by(DecisionLog.created_at.desc(), DecisionLog.id.desc())
            .all()
        )


def get_decision(db: Session, user_id: str, decision_id: int) -> DecisionLog:
    with persistence_guard(db, "get_decision", user_id=user_id):
        decision: Optional[DecisionLog] = (
            db.query(DecisionLog)
            .filter(DecisionLog.id == decision_id, DecisionLog.user_id == user_id)
            .first()
        )
    if decision is None:
        raise DecisionNotFoundError(decision_id)
    return decision


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

def create_decision(db: Session, user_id: str, fields: dict[str, Any]) -> DecisionLog:
    decision = DecisionLog(user_id=user_id, **fields)
    db.add(decision)
    commit(db, "create_decision", user_id=user_id)
    db.refresh(decision)
    logger.info(
        "decision_created",
        user_id=user_id,
        decision_id=decision.id,
        decision_type=enum_value(decision.decision_type),
    )
    return decision


def update_decision(
    db: Session, user_id: str, decision_id: int, changes: dict[str, Any]
) -> DecisionLog:
    decision = get_decision(db, user_id, decision_id)
    for name, value in changes.items():
        setattr(decision, name, value)
    commit(db, "update_decision", user_id=user_id, decision_id=decision_id)
    db.refresh(decision)
    logger.info("decision_updated", user_id=user_id, decision_id=decision_id,
                fields=sorted(changes))
    return decision


def delete_decision(db: Session, user_id: str, decision_id: int) -> None:
    decision = get_decision(db, user_id, decision_id)
    db.delete(decision)
    commit(db, "delete_decision", user_id=user_id, decision_id=decision_id)
    logger.info("decision_deleted", user_id=user_id, decision_id=decision_id)
