"""
Shared pytest fixtures.

Uses a SQLite database file so no Postgres is required for tests.
Tables are created once per session and emptied after every test.
"""
import os
import uuid

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_smart_laziness.db")
os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import app.models  # noqa: F401
from app.db.base import Base, get_db
from app.main import app

SQLITE_URL = "sqlite:///./test_smart_laziness.db"

engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "correct-horse-battery"


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_tables():
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture()
def db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(client):
    """Sign up a fresh user; returns {"user_id", "email", "token", "headers"}."""

    def _make(email: str | None = None) -> dict:
        address = email or f"user-{uuid.uuid4().hex[:10]}@example.com"
        r = client.post("/auth/sign-up", json={"email": address, "password": PASSWORD})
        assert r.status_code == 201, r.text
        body = r.json()
        return {
            "user_id": body["user_id"],
            "email": body["email"],
            "token": body["access_token"],
            "headers": {"Authorization": f"Bearer {body['access_token']}"},
        }

    return _make


@pytest.fixture()
def user(make_user):
    return make_user()
