from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy import text

from app.db.base import get_db
from app.core.config import settings
from app.core.logging import configure_logging
from app.routers import auth as auth_router
from app.routers import layout as layout_router
from app.routers import dashboard as dashboard_router
from app.routers import assessment as assessment_router
from app.routers import decisions as decisions_router
from app.routers import automations as automations_router
from app.routers import metrics as metrics_router
from app.core.errors import (
    SmartLazinessError,
    smart_laziness_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
)

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("startup", env=settings.APP_ENV)
    yield
    logger.info("shutdown")


app = FastAPI(
    title="Smart Laziness API",
    description=(
        "**Smart Laziness** — workaholism self-assessment, decision log, "
        "automation bank and team metrics.\n\n"
        "Authenticate with `Authorization: Bearer <access_token>` from "
        "`/auth/sign-in`.\n\n"
        "All error responses follow the `{code, message, details}` envelope."
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Exception handlers (most specific first) ---
app.add_exception_handler(SmartLazinessError, smart_laziness_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# --- Routers ---
app.include_router(auth_router.router)
app.include_router(layout_router.router)
app.include_router(dashboard_router.router)
app.include_router(assessment_router.router)
app.include_router(decisions_router.router)
app.include_router(automations_router.router)
app.include_router(metrics_router.router)


@app.get("/health", tags=["health"], summary="Health check")
def health(db: Session = Depends(get_db)):
    """
    Returns `{"status": "ok", "db": "ok"}` when both the API and the database
    are reachable. Returns HTTP 503 if the DB is down.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "ok"
    except SQLAlchemyError as exc:
        logger.warning("health_db_unreachable", error=str(exc))
        db_status = "unreachable"

    if db_status != "ok":
        return JSONResponse(
            status_code=503,
            content={"status": "error", "db": db_status},
        )
    return {"status": "ok", "db": "ok", "env": settings.APP_ENV}
