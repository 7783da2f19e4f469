"""
Tests for error handling: structured error responses, HTTP status codes,
and the custom exception classes.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.core.errors import (
    TRY_AGAIN,
    AssessmentIncompleteError,
    AutomationNotFoundError,
    DecisionNotFoundError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    PersistenceError,
)
from app.db.base import persistence_guard
from app.main import app


def _db_down(*args, **kwargs):
    raise OperationalError("COMMIT", {}, Exception("connection refused"))


# ---------------------------------------------------------------------------
# Unit tests on exception classes
# ---------------------------------------------------------------------------

class TestExceptionClasses:
    def test_not_authenticated(self):
        err = NotAuthenticatedError("invalid_or_expired")
        assert err.http_status == 401
        assert err.code == "NOT_AUTHENTICATED"
        assert err.to_dict()["details"]["reason"] == "invalid_or_expired"

    def test_invalid_credentials_has_no_details(self):
        d = InvalidCredentialsError().to_dict()
        assert d["code"] == "INVALID_CREDENTIALS"
        assert "details" not in d

    def test_email_already_registered(self):
        err = EmailAlreadyRegisteredError("a@b.co")
        assert err.http_status == 409
        assert "a@b.co" in err.message

    def test_assessment_incomplete(self):
        err = AssessmentIncompleteError(missing=[3, 7])
        assert err.http_status == 422
        assert err.details["missing"] == [3, 7]
        assert "2" in err.message

    @pytest.mark.parametrize("cls,code", [
        (DecisionNotFoundError, "DECISION_NOT_FOUND"),
        (AutomationNotFoundError, "AUTOMATION_NOT_FOUND"),
    ])
    def test_not_found(self, cls, code):
        err = cls(42)
        assert err.http_status == 404
        assert err.code == code
        assert err.details["id"] == 42

    def test_persistence_error_hides_cause(self):
        err = PersistenceError("create_decision")
        assert err.http_status == 503
        assert err.message == TRY_AGAIN
        assert err.details == {"operation": "create_decision"}


# ---------------------------------------------------------------------------
# persistence_guard
# ---------------------------------------------------------------------------

class _FakeSession:
    def __init__(self):
        self.rolled_back = False

    def rollback(self):
        self.rolled_back = True


class TestPersistenceGuard:
    def test_translates_sqlalchemy_errors(self):
        db = _FakeSession()
        with pytest.raises(PersistenceError) as info:
            with persistence_guard(db, "list_decisions", user_id="u1"):
                _db_down()
        assert db.rolled_back
        assert isinstance(info.value.__cause__, OperationalError)

    def test_other_errors_pass_through(self):
        db = _FakeSession()
        with pytest.raises(KeyError):
            with persistence_guard(db, "list_decisions"):
                raise KeyError("x")
        assert not db.rolled_back


# ---------------------------------------------------------------------------
# HTTP envelopes
# ---------------------------------------------------------------------------

class TestErrorEnvelopes:
    def test_missing_session(self, client):
        r = client.get("/decisions")
        assert r.status_code == 401
        body = r.json()
        assert body["code"] == "NOT_AUTHENTICATED"
        assert body["details"]["reason"] == "missing"

    def test_unknown_token(self, client):
        r = client.get("/decisions", headers={"Authorization": "Bearer nope"})
        assert r.status_code == 401
        assert r.json()["details"]["reason"] == "invalid_or_expired"

    def test_validation_error_shape(self, client, user):
        r = client.post("/decisions", json={"decision_type": "procrastinate"},
                        headers=user["headers"])
        assert r.status_code == 422
        body = r.json()
        assert body["code"] == "VALIDATION_ERROR"
        fields = {e["field"] for e in body["details"]["errors"]}
        assert {"title", "decision_type"} <= fields

    def test_not_found_shape(self, client, user):
        r = client.get("/decisions/999999", headers=user["headers"])
        assert r.status_code == 404
        assert r.json() == {
            "code": "DECISION_NOT_FOUND",
            "message": "Decision 999999 not found.",
            "details": {"id": 999999},
        }

    def test_database_failure_is_503_try_again(self, client, user, monkeypatch):
        monkeypatch.setattr(Session, "commit", _db_down)
        r = client.post("/decisions", json={"title": "Skip the meeting"},
                        headers=user["headers"])
        assert r.status_code == 503
        body = r.json()
        assert body["code"] == "PERSISTENCE_ERROR"
        assert body["message"] == TRY_AGAIN
        assert "connection refused" not in r.text

    def test_unhandled_exception_is_500_try_again(self, client, user, monkeypatch):
        def boom(db):
            raise RuntimeError("kaboom")

        monkeypatch.setattr("app.routers.metrics.get_team_metrics", boom)
        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.get("/metrics/team", headers=user["headers"])
        assert r.status_code == 500
        assert r.json() == {"code": "INTERNAL_ERROR", "message": TRY_AGAIN}
