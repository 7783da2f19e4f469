"""
Assessment request / response schemas.

GET  /assessment/symptoms  → SymptomListResponse
GET  /assessment/bands     → list[BandOut]
POST /assessment           → AssessmentRequest → AssessmentResponse
GET  /assessment/history   → AssessmentHistoryResponse
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from app.services.catalog import SYMPTOM_IDS


class SymptomOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    examples: list[str]


class SymptomListResponse(BaseModel):
    total: int
    items: list[SymptomOut]


class BandOut(BaseModel):
    key: str
    label: str
    min_score: int
    max_score: int
    description: str
    recommendations: list[str]


class AssessmentRequest(BaseModel):
    """One boolean per symptom id. `true` = "yes, I identify with this"."""
    answers: dict[int, StrictBool] = Field(
        description="Map of symptom id → identifies with the symptom.",
        examples=[{"1": True, "2": False}],
    )

    @field_validator("answers")
    @classmethod
    def check_known_ids(cls, v: dict[int, bool]) -> dict[int, bool]:
        unknown = sorted(k for k in v if k not in SYMPTOM_IDS)
        if unknown:
            raise ValueError(f"unknown symptom ids: {unknown}")
        return v


class AssessmentResponse(BaseModel):
    id: int
    score: int = Field(description="0–100. Percentage of symptoms NOT present.")
    symptoms_count: int = Field(description="Answers where the symptom is present.")
    total_items: int
    band: BandOut
    created_at: str


class AssessmentHistoryItem(BaseModel):
    id: int
    score: int
    symptoms_count: int
    label: str
    answers: dict[str, bool]
    created_at: str


class AssessmentHistoryResponse(BaseModel):
    total: int = Field(description="All of the caller's results, not just this page.")
    items: list[AssessmentHistoryItem]
    latest_score: Optional[int] = None
