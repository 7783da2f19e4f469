"""
Logging setup.

stdlib `logging` owns the handlers (stdout, same as gunicorn's access/error
logs); structlog renders key/value events on top of it. Modules obtain a
logger with `structlog.get_logger(__name__)`.
"""
import logging
import sys

import structlog

from app.core.config import settings


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(levelname)s %(name)s %(message)s",
        stream=sys.stdout,
    )
    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.APP_ENV == "development"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
