"""
Team Metrics schema.

GET /metrics/team → TeamMetricsResponse
"""
from pydantic import BaseModel, ConfigDict, Field


class ScoreBucketOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    band: str
    label: str
    min_score: int
    max_score: int
    count: int


class CategoryCountOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    count: int


class AutomatorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    count: int
    name: str


class TeamMetricsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_users: int
    average_score: int = Field(description="Rounded mean score. 0 with no users.")
    total_automations: int
    total_hours_saved: float
    score_distribution: list[ScoreBucketOut] = Field(description="Worst band first.")
    automations_by_category: list[CategoryCountOut]
    top_automators: list[AutomatorOut] = Field(description="At most 5, most automations first.")
