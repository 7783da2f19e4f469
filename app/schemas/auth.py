"""
Auth request / response schemas.

POST /auth/sign-up    → Credentials → SessionResponse
POST /auth/sign-in    → Credentials → SessionResponse
GET  /auth/session    → CurrentSessionResponse
"""
import re
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Credentials(BaseModel):
    email: Annotated[str, Field(
        min_length=3,
        max_length=320,
        examples=["ana@example.com"],
    )]
    password: Annotated[str, Field(
        min_length=8,
        max_length=256,
        description="At least 8 characters.",
    )]

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v: str) -> str:
        cleaned = v.strip().lower() if isinstance(v, str) else v
        if isinstance(cleaned, str) and not _EMAIL_RE.match(cleaned):
            raise ValueError("email address is not valid")
        return cleaned


class SessionResponse(BaseModel):
    """A freshly opened session. Send `access_token` as a Bearer token."""
    user_id: str
    email: str
    access_token: str
    token_type: str = "bearer"
    expires_at: str


class CurrentSessionResponse(BaseModel):
    user_id: str
    email: str
    expires_at: str
