"""
Decision Log request / response schemas.
"""
from __future__ import annotations

import enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.models.decision_log import DecisionType, ImpactLevel
from app.schemas.common import Hours
from app.services.catalog import PRINCIPLE_NAMES


class DecisionTypeFilter(str, enum.Enum):
    all = "all"
    eliminate = "eliminate"
    automate = "automate"
    delegate = "delegate"
    simplify = "simplify"


def _check_principle(v: Optional[str]) -> Optional[str]:
    if v is None or not v.strip():
        return None
    if v not in PRINCIPLE_NAMES:
        raise ValueError("principle_applied must be one of the 10 principles")
    return v


class DecisionCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: Annotated[str, Field(min_length=1, max_length=255,
                                examples=["Drop the weekly status meeting"])]
    description: Optional[str] = None
    decision_type: DecisionType = DecisionType.eliminate
    impact_level: ImpactLevel = ImpactLevel.medium
    principle_applied: Optional[str] = Field(
        default=None,
        description="Name of one of the principles from GET /decisions/principles.",
    )
    time_saved_estimate: Hours = Field(default=0, description="Estimated hours saved.")

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("principle_applied")
    @classmethod
    def check_principle(cls, v: Optional[str]) -> Optional[str]:
        return _check_principle(v)


class DecisionUpdate(BaseModel):
    """Partial update: only the fields sent are changed."""
    model_config = ConfigDict(use_enum_values=True)

    title: Optional[Annotated[str, Field(min_length=1, max_length=255)]] = None
    description: Optional[str] = None
    decision_type: Optional[DecisionType] = None
    impact_level: Optional[ImpactLevel] = None
    principle_applied: Optional[str] = None
    time_saved_estimate: Optional[Hours] = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("principle_applied")
    @classmethod
    def check_principle(cls, v: Optional[str]) -> Optional[str]:
        return _check_principle(v)

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in ("title", "decision_type", "impact_level", "time_saved_estimate"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class DecisionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    decision_type: str
    impact_level: str
    principle_applied: Optional[str] = None
    time_saved_estimate: float
    created_at: str
    updated_at: str


class DecisionStatsOut(BaseModel):
    total: int = Field(description="Rows in the whole log (ignores the type filter).")
    total_time_saved: float
    average_time_saved: float = Field(description="0.0 when the log is empty.")


class DecisionListResponse(BaseModel):
    decision_type: str
    items: list[DecisionOut]
    stats: DecisionStatsOut


class PrincipleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
