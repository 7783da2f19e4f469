from datetime import datetime
from sqlalchemy import Integer, String, Text, Float, Boolean, DateTime, Enum, func
from sqlalchemy.orm import Mapped, mapped_column
import enum

from app.db.base import Base


class AutomationCategory(str, enum.Enum):
    process = "process"
    communication = "communication"
    data = "data"
    development = "development"
    marketing = "marketing"


class DifficultyLevel(str, enum.Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


class Automation(Base):
    """A shared automation recipe. Visible to others only when is_public."""

    __tablename__ = "automations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    created_by: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(
        Enum(AutomationCategory, name="automation_category_enum"),
        nullable=False, default=AutomationCategory.process,
    )
    difficulty_level: Mapped[str] = mapped_column(
        Enum(DifficultyLevel, name="difficulty_level_enum"),
        nullable=False, default=DifficultyLevel.medium,
    )
    time_to_implement: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    hours_saved: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    tools_used: Mapped[str | None] = mapped_column(Text, nullable=True)
    steps_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
