"""
HTTP Surface Tests
==================

End-to-end through FastAPI with the mock database: status codes, error
bodies and response shapes.
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from app.dependencies import get_anthropic_relay
from app.services import AnthropicRelay

from conftest import ADMIN_SECRET


class TestHealth:

    def test_connected(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"status": "Rasoi proxy ✓", "storage": "MongoDB"}

    def test_degraded_is_still_200(self, client, database):
        database.database_url = None

        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["storage"] == "MongoDB disconnected"
        assert "MONGODB_URI" in body["error"]

    def test_failed_ping_is_degraded(self, client, database, monkeypatch):
        monkeypatch.setattr(database, "ping", AsyncMock(return_value=False))

        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["storage"] == "MongoDB disconnected"
        assert response.json()["error"] == "MongoDB ping failed"


class TestProfileRoutes:

    def test_save_and_load(self, client):
        response = client.post("/api/save", json={"userId": "u1", "pantry": ["rice"], "tgCid": "42"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert isinstance(body["savedAt"], str)

        loaded = client.get("/api/load", params={"userId": "u1"}).json()
        assert loaded["found"] is True
        assert loaded["userId"] == "u1"
        assert loaded["pantry"] == ["rice"]
        assert loaded["tgCid"] == "42"

    def test_save_without_user_id(self, client):
        response = client.post("/api/save", json={"pantry": ["rice"]})
        assert response.status_code == 400
        assert response.json() == {"error": "userId required"}

    def test_save_without_body(self, client):
        response = client.post("/api/save")
        assert response.status_code == 400

    def test_load_unknown(self, client):
        response = client.get("/api/load", params={"userId": "ghost"})
        assert response.status_code == 200
        assert response.json() == {"found": False}

    def test_load_without_user_id(self, client):
        response = client.get("/api/load")
        assert response.status_code == 400
        assert response.json() == {"error": "userId required"}

    def test_delete(self, client):
        client.post("/api/save", json={"userId": "u1", "pantry": ["rice"]})
        client.post("/api/menu/save", json={"userId": "u1", "weekStart": "2026-01-05", "meals": [{"name": "Dal"}]})

        response = client.delete("/api/delete", params={"userId": "u1"})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/api/load", params={"userId": "u1"}).json() == {"found": False}
        history = client.get("/api/menu/history", params={"userId": "u1"}).json()
        assert history["found"] is False

    def test_delete_without_user_id(self, client):
        assert client.delete("/api/delete").status_code == 400

    def test_store_unreachable_is_500(self, client, database):
        database.database_url = None

        response = client.get("/api/load", params={"userId": "u1"})

        assert response.status_code == 500
        assert response.json() == {"error": "MONGODB_URI environment variable not set"}

    def test_oversized_body_rejected(self, client):
        response = client.post("/api/save", json={"userId": "u1", "notes": "x" * 8192})
        assert response.status_code == 413

    def test_oversized_chunked_body_rejected(self, client):
        chunks = (b"x" * 1024 for _ in range(8))

        response = client.post("/api/save", content=chunks, headers={"content-type": "application/json"})

        assert response.status_code == 413

    def test_small_chunked_body_accepted(self, client):
        chunks = iter([b'{"userId": "u1", ', b'"pantry": ["rice"]}'])

        response = client.post("/api/save", content=chunks, headers={"content-type": "application/json"})

        assert response.status_code == 200
        assert client.get("/api/load", params={"userId": "u1"}).json()["pantry"] == ["rice"]

    def test_oversized_body_has_cors_headers(self, client):
        response = client.post(
            "/api/save",
            json={"userId": "u1", "notes": "x" * 8192},
            headers={"Origin": "https://rasoi.example"},
        )

        assert response.status_code == 413
        assert response.headers["access-control-allow-origin"] == "*"

    def test_save_non_object_body(self, client):
        response = client.post("/api/save", json=[1, 2])
        assert response.status_code == 400
        assert response.json() == {"error": "userId required"}


class TestMenuRoutes:

    def test_save_and_current(self, client):
        payload = {
            "userId": "u1",
            "weekStart": "2026-01-05",
            "meals": [{"day": "Mon", "name": "Dal"}],
            "shop": [{"item": "Toor dal"}],
        }
        response = client.post("/api/menu/save", json=payload)
        assert response.status_code == 200
        assert response.json() == {"success": True}

        current = client.get("/api/menu/current", params={"userId": "u1", "weekStart": "2026-01-05"}).json()
        assert current["found"] is True
        assert current["meals"] == payload["meals"]
        assert current["shop"] == payload["shop"]
        assert isinstance(current["savedAt"], str)

    def test_save_without_body(self, client):
        response = client.post("/api/menu/save")
        assert response.status_code == 400
        assert response.json() == {"error": "userId required"}

    def test_save_numeric_user_id(self, client):
        response = client.post("/api/menu/save", json={"userId": 123, "weekStart": "2026-01-05", "meals": []})
        assert response.status_code == 200
        assert response.json() == {"success": True}

    @pytest.mark.parametrize("meals", ["Dal", {"mon": {"name": "Dal"}}])
    def test_save_non_list_meals(self, client, meals):
        response = client.post("/api/menu/save", json={"userId": "u1", "weekStart": "2026-01-05", "meals": meals})
        assert response.status_code == 200

        current = client.get("/api/menu/current", params={"userId": "u1", "weekStart": "2026-01-05"}).json()
        assert current["meals"] == meals

        history = client.get("/api/menu/history", params={"userId": "u1"}).json()
        assert history["found"] is True
        assert history["recentDishes"] == []

    def test_save_without_week_start(self, client):
        response = client.post("/api/menu/save", json={"userId": "u1", "meals": []})
        assert response.status_code == 400
        assert response.json() == {"error": "weekStart required"}

    def test_current_without_keys(self, client):
        assert client.get("/api/menu/current", params={"userId": "u1"}).status_code == 400
        assert client.get("/api/menu/current", params={"weekStart": "2026-01-05"}).status_code == 400

    def test_current_not_found(self, client):
        response = client.get("/api/menu/current", params={"userId": "u1", "weekStart": "2026-01-05"})
        assert response.json() == {"found": False}

    def test_history(self, client):
        for week_start in ["2026-01-01", "2026-01-08", "2026-01-15"]:
            client.post("/api/menu/save", json={
                "userId": "u1",
                "weekStart": week_start,
                "meals": [{"name": "Dal"}],
            })

        history = client.get("/api/menu/history", params={"userId": "u1", "weeks": "2"}).json()

        assert history["found"] is True
        assert [week["weekStart"] for week in history["weeks"]] == ["2026-01-15", "2026-01-08"]
        assert history["recentDishes"] == ["Dal"]

    @pytest.mark.parametrize("weeks", ["0", "abc", "-2"])
    def test_history_bad_weeks(self, client, weeks):
        response = client.get("/api/menu/history", params={"userId": "u1", "weeks": weeks})
        assert response.status_code == 200
        assert response.json() == {"found": False, "weeks": [], "recentDishes": []}

    def test_history_without_user_id(self, client):
        assert client.get("/api/menu/history").status_code == 400


class TestAdminRoutes:

    @pytest.mark.parametrize("params", [{}, {"secret": "wrong"}])
    def test_forbidden(self, client, params):
        response = client.get("/api/admin/users", params=params)
        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden"}

    def test_listing(self, client):
        client.post("/api/save", json={"userId": "u1", "pantry": ["rice", "dal"], "meals": []})

        response = client.get("/api/admin/users", params={"secret": ADMIN_SECRET})

        assert response.status_code == 200
        body = response.json()
        assert body["users"] == 1
        assert body["data"][0]["userId"] == "u1"
        assert body["data"][0]["pantryCount"] == 2
        assert body["data"][0]["mealsCount"] == 0


class TestClaudeRoute:

    def test_relays_status_and_body(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"type": "error", "error": {"message": "bad model"}})

        client.app.dependency_overrides[get_anthropic_relay] = lambda: AnthropicRelay(
            api_key="test-key", transport=httpx.MockTransport(handler)
        )

        response = client.post("/api/claude", json={"model": "nope", "messages": []})

        assert response.status_code == 400
        assert response.json() == {"type": "error", "error": {"message": "bad model"}}

    def test_missing_key(self, client):
        client.app.dependency_overrides[get_anthropic_relay] = lambda: AnthropicRelay(api_key=None)

        response = client.post("/api/claude", json={"messages": []})

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "ANTHROPIC_API_KEY not set"}}

    def test_transport_failure(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused")

        client.app.dependency_overrides[get_anthropic_relay] = lambda: AnthropicRelay(
            api_key="test-key", transport=httpx.MockTransport(handler)
        )

        response = client.post("/api/claude", json={"messages": []})

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "connection refused"}}
