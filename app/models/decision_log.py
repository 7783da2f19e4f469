from datetime import datetime
from sqlalchemy import Integer, String, Text, Float, DateTime, Enum, func
from sqlalchemy.orm import Mapped, mapped_column
import enum

from app.db.base import Base


class DecisionType(str, enum.Enum):
    eliminate = "eliminate"
    automate = "automate"
    delegate = "delegate"
    simplify = "simplify"


class ImpactLevel(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


class DecisionLog(Base):
    __tablename__ = "decision_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    decision_type: Mapped[str] = mapped_column(
        Enum(DecisionType, name="decision_type_enum"),
        nullable=False, default=DecisionType.eliminate,
    )
    impact_level: Mapped[str] = mapped_column(
        Enum(ImpactLevel, name="impact_level_enum"),
        nullable=False, default=ImpactLevel.medium,
    )
    principle_applied: Mapped[str | None] = mapped_column(String(128), nullable=True)
    time_saved_estimate: Mapped[float] = mapped_column(
        Float, nullable=False, default=0,
        comment="Estimated hours saved",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
