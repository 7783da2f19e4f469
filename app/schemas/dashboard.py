from typing import Optional
from pydantic import BaseModel, ConfigDict


class DashboardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    email: str
    score: int
    label: str
    band: str
    automations_created: int
    hours_saved: float
    decisions_logged: int
    last_assessment_date: Optional[str] = None
