"""
Tests for the Automation Bank: visibility rule, search and owner-only writes.
"""
import pytest

from app.models.automation import Automation
from app.services.automations import matches_search, search


def _create(client, user, **overrides) -> dict:
    payload = {
        "title": "Auto-file invoices",
        "description": "Moves PDF invoices from Gmail to the finance drive",
        "category": "data",
        "difficulty_level": "easy",
        "time_to_implement": 2,
        "hours_saved": 10,
        "tools_used": "Zapier, Google Drive",
        "is_public": True,
    }
    payload.update(overrides)
    r = client.post("/automations", json=payload, headers=user["headers"])
    assert r.status_code == 201, r.text
    return r.json()


class TestSearchUnit:
    _ROW = Automation(title="Weekly Report Bot", description=None, tools_used="Python, Slack")

    @pytest.mark.parametrize("term", ["report", "REPORT", "slack", "py", "", None, "   "])
    def test_matches(self, term):
        assert matches_search(self._ROW, term)

    @pytest.mark.parametrize("term", ["excel", "reports"])
    def test_no_match(self, term):
        assert not matches_search(self._ROW, term)

    def test_description_is_searched(self):
        row = Automation(title="t", description="Scrapes the CRM nightly", tools_used=None)
        assert search([row], "crm") == [row]


class TestCreate:
    def test_defaults(self, client, user):
        r = client.post("/automations", json={"title": "Minimal"}, headers=user["headers"])
        assert r.status_code == 201
        body = r.json()
        assert body["category"] == "process"
        assert body["difficulty_level"] == "medium"
        assert body["hours_saved"] == 0
        assert body["is_public"] is True
        assert body["is_mine"] is True
        assert body["created_by"] == user["user_id"]

    @pytest.mark.parametrize("field,value", [
        ("category", "finance"),
        ("difficulty_level", "trivial"),
        ("hours_saved", -3),
        ("time_to_implement", -0.5),
        ("hours_saved", 10_001),
        ("title", "   "),
    ])
    def test_invalid_fields(self, client, user, field, value):
        r = client.post("/automations", json={"title": "x", field: value}, headers=user["headers"])
        assert r.status_code == 422

    @pytest.mark.parametrize("field", ["hours_saved", "time_to_implement"])
    def test_overflowing_number_rejected(self, client, user, field):
        body = '{"title": "Big", "' + field + '": 1e400}'
        r = client.post("/automations", content=body,
                        headers={**user["headers"], "Content-Type": "application/json"})
        assert r.status_code == 422

    def test_team_total_stays_a_number_at_the_cap(self, client, make_user):
        for _ in range(2):
            _create(client, make_user(), hours_saved=10_000)
        viewer = make_user()
        body = client.get("/metrics/team", headers=viewer["headers"]).json()
        assert body["total_hours_saved"] == 20_000


class TestVisibility:
    def test_private_hidden_from_others_public_shown_to_all(self, client, make_user):
        alice, bob, carol = make_user(), make_user(), make_user()
        private = _create(client, alice, title="Alice private", is_public=False)
        public = _create(client, alice, title="Alice public", is_public=True)

        for viewer in (bob, carol):
            ids = [a["id"] for a in client.get("/automations", headers=viewer["headers"]).json()["items"]]
            assert public["id"] in ids
            assert private["id"] not in ids

        own = [a["id"] for a in client.get("/automations", headers=alice["headers"]).json()["items"]]
        assert own == [public["id"], private["id"]]

    def test_private_detail_is_404_for_others(self, client, make_user):
        alice, bob = make_user(), make_user()
        private = _create(client, alice, is_public=False)
        r = client.get(f"/automations/{private['id']}", headers=bob["headers"])
        assert r.status_code == 404
        assert r.json()["code"] == "AUTOMATION_NOT_FOUND"
        assert client.get(f"/automations/{private['id']}", headers=alice["headers"]).status_code == 200

    def test_public_detail_marks_ownership(self, client, make_user):
        alice, bob = make_user(), make_user()
        public = _create(client, alice)
        body = client.get(f"/automations/{public['id']}", headers=bob["headers"]).json()
        assert body["is_mine"] is False


class TestSearchEndpoint:
    def test_q_filters_title_description_tools(self, client, user):
        by_title = _create(client, user, title="Slack digest", description=None, tools_used=None)
        by_tools = _create(client, user, title="Other", description=None, tools_used="slack API")
        _create(client, user, title="Unrelated", description="nothing here", tools_used="Excel")

        body = client.get("/automations?q=SLACK", headers=user["headers"]).json()
        assert body["q"] == "SLACK"
        assert {a["id"] for a in body["items"]} == {by_title["id"], by_tools["id"]}
        assert body["total"] == 2

    def test_blank_q_returns_everything(self, client, user):
        _create(client, user)
        _create(client, user)
        assert client.get("/automations?q=", headers=user["headers"]).json()["total"] == 2


class TestOwnerWrites:
    def test_owner_can_update_and_make_private(self, client, make_user):
        alice, bob = make_user(), make_user()
        created = _create(client, alice)
        r = client.patch(f"/automations/{created['id']}",
                         json={"is_public": False, "hours_saved": 12.5},
                         headers=alice["headers"])
        assert r.status_code == 200
        assert r.json()["is_public"] is False
        assert r.json()["hours_saved"] == 12.5
        assert r.json()["title"] == created["title"]
        ids = [a["id"] for a in client.get("/automations", headers=bob["headers"]).json()["items"]]
        assert created["id"] not in ids

    def test_others_cannot_update_public_row(self, client, make_user):
        alice, bob = make_user(), make_user()
        created = _create(client, alice)
        r = client.patch(f"/automations/{created['id']}", json={"title": "hijack"},
                         headers=bob["headers"])
        assert r.status_code == 404

    def test_patch_null_required_field_rejected(self, client, user):
        created = _create(client, user)
        r = client.patch(f"/automations/{created['id']}", json={"is_public": None},
                         headers=user["headers"])
        assert r.status_code == 422

    @pytest.mark.parametrize("changes", [
        {"title": "   "},
        {"hours_saved": 1e9},
        {"time_to_implement": -1},
    ])
    def test_patch_invalid_values_rejected(self, client, user, changes):
        created = _create(client, user)
        r = client.patch(f"/automations/{created['id']}", json=changes,
                         headers=user["headers"])
        assert r.status_code == 422
        body = client.get(f"/automations/{created['id']}", headers=user["headers"]).json()
        assert body["title"] == created["title"]
        assert body["hours_saved"] == created["hours_saved"]

    def test_delete(self, client, make_user):
        alice, bob = make_user(), make_user()
        created = _create(client, alice)
        assert client.delete(f"/automations/{created['id']}", headers=bob["headers"]).status_code == 404
        assert client.delete(f"/automations/{created['id']}", headers=alice["headers"]).status_code == 204
        assert client.get(f"/automations/{created['id']}", headers=alice["headers"]).status_code == 404
