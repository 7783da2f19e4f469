"""
Automation Bank request / response schemas.
"""
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.models.automation import AutomationCategory, DifficultyLevel
from app.schemas.common import Hours


class AutomationCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: Annotated[str, Field(min_length=1, max_length=255,
                                examples=["Auto-file invoices from email"])]
    description: Optional[str] = None
    category: AutomationCategory = AutomationCategory.process
    difficulty_level: DifficultyLevel = DifficultyLevel.medium
    time_to_implement: Hours = Field(default=0, description="Hours to build.")
    hours_saved: Hours = Field(default=0, description="Hours saved.")
    tools_used: Optional[str] = Field(default=None, examples=["Zapier, Gmail"])
    steps_description: Optional[str] = None
    is_public: bool = True

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v


class AutomationUpdate(BaseModel):
    """Partial update: only the fields sent are changed."""
    model_config = ConfigDict(use_enum_values=True)

    title: Optional[Annotated[str, Field(min_length=1, max_length=255)]] = None
    description: Optional[str] = None
    category: Optional[AutomationCategory] = None
    difficulty_level: Optional[DifficultyLevel] = None
    time_to_implement: Optional[Hours] = None
    hours_saved: Optional[Hours] = None
    tools_used: Optional[str] = None
    steps_description: Optional[str] = None
    is_public: Optional[bool] = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def reject_null_required(self):
        required = ("title", "category", "difficulty_level",
                    "time_to_implement", "hours_saved", "is_public")
        for name in required:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class AutomationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_by: str
    is_mine: bool
    title: str
    description: Optional[str] = None
    category: str
    difficulty_level: str
    time_to_implement: float
    hours_saved: float
    tools_used: Optional[str] = None
    steps_description: Optional[str] = None
    is_public: bool
    created_at: str
    updated_at: str


class AutomationListResponse(BaseModel):
    total: int
    q: Optional[str] = None
    items: list[AutomationOut]
