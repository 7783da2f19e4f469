from contextlib import contextmanager
from typing import Generator, Iterator

import structlog
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.core.config import settings
from app.core.errors import PersistenceError

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    pass


engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def persistence_guard(db: Session, operation: str, **context) -> Iterator[None]:
    """
    Wrap a block of database calls.

    A SQLAlchemyError rolls the session back, is logged once with context,
    and reaches the client as a generic "please try again" envelope.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("persistence_failed", operation=operation, error=str(exc), **context)
        raise PersistenceError(operation) from exc


def commit(db: Session, operation: str, **context) -> None:
    with persistence_guard(db, operation, **context):
        db.commit()
