"""
Shared schema primitives: error envelopes, hour amounts, enum unwrapping.
"""
from typing import Annotated, Any, Optional
from pydantic import BaseModel, Field

# Upper bound for any single hour-valued field; sums of them stay finite.
MAX_HOURS = 10_000

Hours = Annotated[float, Field(ge=0, le=MAX_HOURS, allow_inf_nan=False)]


def enum_value(v) -> str:
    """Plain string for a str-enum member or an already-unwrapped value."""
    return v.value if hasattr(v, "value") else str(v)


class ErrorResponse(BaseModel):
    """`{code, message, details}` returned for every 4xx/5xx."""
    code: str = Field(examples=["DECISION_NOT_FOUND"])
    message: str = Field(examples=["Decision 7 not found."])
    details: Optional[dict[str, Any]] = None


class FieldError(BaseModel):
    field: str = Field(examples=["time_saved_estimate"])
    message: str
    type: str


class ValidationDetails(BaseModel):
    errors: list[FieldError]


class ValidationErrorResponse(BaseModel):
    """422 body produced when the request does not match its schema."""
    code: str = Field(default="VALIDATION_ERROR", examples=["VALIDATION_ERROR"])
    message: str = "Request validation failed."
    details: ValidationDetails
