"""
Custom exception hierarchy for the Smart Laziness API.

Rule: every HTTP error has a machine-readable `code` string so clients
can branch on it without parsing English messages.
"""
from __future__ import annotations

from typing import Any

import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

logger = structlog.get_logger(__name__)

TRY_AGAIN = "Something went wrong. Please try again."


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class SmartLazinessError(Exception):
    """Base class for all application-level errors."""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class NotAuthenticatedError(SmartLazinessError):
    http_status = status.HTTP_401_UNAUTHORIZED
    code = "NOT_AUTHENTICATED"

    def __init__(self, reason: str = "missing"):
        super().__init__(
            message="A valid session is required. Sign in and try again.",
            details={"reason": reason},
        )


class InvalidCredentialsError(SmartLazinessError):
    http_status = status.HTTP_401_UNAUTHORIZED
    code = "INVALID_CREDENTIALS"

    def __init__(self):
        super().__init__(message="Email or password is incorrect.")


class EmailAlreadyRegisteredError(SmartLazinessError):
    http_status = status.HTTP_409_CONFLICT
    code = "EMAIL_ALREADY_REGISTERED"

    def __init__(self, email: str):
        super().__init__(
            message=f"An account for {email} already exists.",
            details={"email": email},
        )


class AssessmentIncompleteError(SmartLazinessError):
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "ASSESSMENT_INCOMPLETE"

    def __init__(self, missing: list[int]):
        super().__init__(
            message=f"All symptoms must be answered. Missing {len(missing)}.",
            details={"missing": missing},
        )


class DecisionNotFoundError(SmartLazinessError):
    http_status = status.HTTP_404_NOT_FOUND
    code = "DECISION_NOT_FOUND"

    def __init__(self, decision_id: int):
        super().__init__(
            message=f"Decision {decision_id} not found.",
            details={"id": decision_id},
        )


class AutomationNotFoundError(SmartLazinessError):
    http_status = status.HTTP_404_NOT_FOUND
    code = "AUTOMATION_NOT_FOUND"

    def __init__(self, automation_id: int):
        super().__init__(
            message=f"Automation {automation_id} not found.",
            details={"id": automation_id},
        )


class PersistenceError(SmartLazinessError):
    """A database call failed. Never carries driver messages to the client."""
    http_status = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "PERSISTENCE_ERROR"

    def __init__(self, operation: str):
        super().__init__(message=TRY_AGAIN, details={"operation": operation})


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def smart_laziness_exception_handler(
    request: Request, exc: SmartLazinessError
) -> JSONResponse:
    if exc.http_status >= 500:
        logger.warning("request_failed", path=request.url.path, code=exc.code)
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return structured 422 with machine-readable field errors."""
    field_errors = []
    for error in exc.errors():
        field_errors.append({
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "message": error["msg"],
            "type": error["type"],
        })
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed.",
            "details": {"errors": field_errors},
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "INTERNAL_ERROR",
            "message": TRY_AGAIN,
        },
    )
