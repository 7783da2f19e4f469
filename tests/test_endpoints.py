"""
Integration tests for the app shell: health, layout and dashboard.
"""
import pytest


def _answers(present: set[int]) -> dict:
    return {"answers": {str(i): i in present for i in range(1, 11)}}


class TestHealth:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"
        assert r.json()["db"] == "ok"


class TestLayout:
    def test_signed_out_redirects_to_login(self, client):
        r = client.get("/layout")
        assert r.status_code == 200
        body = r.json()
        assert body["authenticated"] is False
        assert body["user"] is None
        assert body["redirect"] == "/login"
        assert [n["href"] for n in body["navigation"]] == ["/login"]

    def test_signed_out_on_login_page_stays(self, client):
        assert client.get("/layout?path=/login").json()["redirect"] is None

    def test_bad_token_is_treated_as_signed_out(self, client):
        r = client.get("/layout", headers={"Authorization": "Bearer stale"})
        assert r.status_code == 200
        assert r.json()["authenticated"] is False

    def test_signed_in_shell(self, client, user):
        body = client.get("/layout", headers=user["headers"]).json()
        assert body["authenticated"] is True
        assert body["user"]["email"] == user["email"]
        assert body["redirect"] is None
        assert [n["name"] for n in body["navigation"]] == [
            "Dashboard", "Assessment", "Decision Log", "Automations", "Team Metrics",
        ]

    @pytest.mark.parametrize("path,redirect", [
        ("/team", None),
        ("/decisions", None),
        ("/settings", "/"),
        ("/login", "/"),
    ])
    def test_signed_in_paths(self, client, user, path, redirect):
        body = client.get(f"/layout?path={path}", headers=user["headers"]).json()
        assert body["redirect"] == redirect

    def test_after_sign_out(self, client, user):
        client.post("/auth/sign-out", headers=user["headers"])
        body = client.get("/layout", headers=user["headers"]).json()
        assert body["authenticated"] is False
        assert body["redirect"] == "/login"


class TestDashboard:
    def test_requires_session(self, client):
        assert client.get("/dashboard").status_code == 401

    def test_fresh_user(self, client, user):
        body = client.get("/dashboard", headers=user["headers"]).json()
        assert body["email"] == user["email"]
        assert body["score"] == 0
        assert body["band"] == "unintelligently_lazy"
        assert body["automations_created"] == 0
        assert body["hours_saved"] == 0
        assert body["decisions_logged"] == 0
        assert body["last_assessment_date"] is None

    def test_reflects_own_activity_only(self, client, make_user):
        me, other = make_user(), make_user()
        client.post("/assessment", json=_answers({1}), headers=me["headers"])
        client.post("/decisions", json={"title": "Batch email"}, headers=me["headers"])
        client.post("/automations", json={"title": "a", "hours_saved": 3}, headers=me["headers"])
        client.post("/automations", json={"title": "b", "hours_saved": 1.5}, headers=me["headers"])
        client.post("/automations", json={"title": "c", "hours_saved": 50}, headers=other["headers"])

        body = client.get("/dashboard", headers=me["headers"]).json()
        assert body["score"] == 90
        assert body["band"] == "smart_lazy"
        assert body["label"] == "Smart-Lazy"
        assert body["automations_created"] == 2
        assert body["hours_saved"] == 4.5
        assert body["decisions_logged"] == 1
        assert body["last_assessment_date"] is not None
