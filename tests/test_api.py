"""
HTTP-level checks for the /api routers using FastAPI's TestClient.
"""
from __future__ import annotations

import logging
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the civic package importable when running tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from civic.app import create_app  # noqa: E402
from civic.core.config import Settings  # noqa: E402
from civic.repositories.memory_repository import MemoryRepository  # noqa: E402


def _settings(**overrides) -> Settings:
    values = dict(
        app_env="test",
        public_base_url="http://testserver",
        seed_data=False,
        log_level=logging.INFO,
        create_rate_limit=100,
        create_rate_window=60,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def client():
    ticks = iter(range(10_000))
    start = datetime(2026, 3, 1, tzinfo=timezone.utc)
    repo = MemoryRepository(clock=lambda: start + timedelta(seconds=next(ticks)))
    with TestClient(create_app(settings=_settings(), repository=repo)) as c:
        yield c


def test_create_issue_returns_camel_case_record(client):
    resp = client.post(
        "/api/issues",
        json={"category": "Road", "description": "pothole", "location": "Main St"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "pending"
    assert body["photoUrl"] is None
    assert "createdAt" in body

    fetched = client.get(f"/api/issues/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body
    assert client.get("/api/issues").json() == [body]


def test_invalid_body_is_rejected_before_storage(client):
    resp = client.post("/api/issues", json={"category": "Road"})
    assert resp.status_code == 422
    assert client.get("/api/issues").json() == []


def test_announcement_date_from_client_is_ignored(client):
    resp = client.post(
        "/api/announcements",
        json={"title": "Hello", "category": "Community", "description": "d", "date": "1999-01-01T00:00:00Z"},
    )
    assert resp.status_code == 201
    assert not resp.json()["date"].startswith("1999")


def test_events_listed_soonest_first(client):
    client.post(
        "/api/events",
        json={"title": "Market", "date": "2026-05-10T09:00:00Z", "time": "8-2", "location": "Square", "description": "..."},
    )
    client.post(
        "/api/events",
        json={"title": "Cleanup", "date": "2026-05-01T09:00:00Z", "time": "9", "location": "Park", "description": "..."},
    )
    assert [e["title"] for e in client.get("/api/events").json()] == ["Cleanup", "Market"]


def test_discussion_reply_and_threads(client):
    root = client.post("/api/discussions", json={"author": "A", "content": "hi"}).json()
    assert root["parentId"] is None
    reply = client.post(
        "/api/discussions", json={"author": "B", "content": "hello", "parentId": root["id"]}
    ).json()
    assert reply["parentId"] == root["id"]

    listed = client.get("/api/discussions").json()
    assert [d["id"] for d in listed] == [reply["id"], root["id"]]
    assert client.get(f"/api/discussions/{reply['parentId']}").json() == root

    threads = client.get("/api/discussions/threads").json()
    assert len(threads) == 1
    assert threads[0]["discussion"]["id"] == root["id"]
    assert [r["id"] for r in threads[0]["replies"]] == [reply["id"]]


@pytest.mark.parametrize("kind", ["issues", "announcements", "events", "discussions"])
def test_unknown_id_is_404(client, kind):
    resp = client.get(f"/api/{kind}/nonexistent-id")
    assert resp.status_code == 404
    assert "not found" in resp.json()["detail"]


def test_security_headers(client):
    resp = client.get("/api/events")
    assert resp.headers["x-frame-options"] == "DENY"
    assert resp.headers["x-content-type-options"] == "nosniff"
    assert "strict-transport-security" not in resp.headers


def test_create_rate_limit():
    app = create_app(settings=_settings(create_rate_limit=2), repository=MemoryRepository())
    with TestClient(app) as c:
        body = {"author": "A", "content": "hi"}
        assert c.post("/api/discussions", json=body).status_code == 201
        assert c.post("/api/discussions", json=body).status_code == 201
        assert c.post("/api/discussions", json=body).status_code == 429
        # other kinds keep their own budget
        assert c.post("/api/announcements", json={"title": "t", "category": "c", "description": "d"}).status_code == 201


def test_seeded_app_serves_demo_data():
    app = create_app(settings=_settings(seed_data=True))
    with TestClient(app) as c:
        assert len(c.get("/api/announcements").json()) == 4
        assert len(c.get("/api/events").json()) == 3
        assert len(c.get("/api/discussions").json()) == 3
        assert c.get("/api/issues").json() == []
        assert len(c.get("/api/discussions/threads").json()) == 2


def test_rotating_forwarded_for_does_not_bypass_limit():
    app = create_app(settings=_settings(create_rate_limit=1), repository=MemoryRepository())
    with TestClient(app) as c:
        codes = [
            c.post(
                "/api/discussions",
                json={"author": "A", "content": "hi"},
                headers={"X-Forwarded-For": f"10.0.0.{i}"},
            ).status_code
            for i in range(5)
        ]
    assert codes == [201, 429, 429, 429, 429]
    assert len(app.state.rate_limiter) == 1


def test_forwarded_for_honoured_when_proxy_trusted():
    app = create_app(
        settings=_settings(create_rate_limit=1, trust_proxy_headers=True), repository=MemoryRepository()
    )
    with TestClient(app) as c:
        body = {"author": "A", "content": "hi"}
        assert c.post("/api/discussions", json=body, headers={"X-Forwarded-For": "10.0.0.1"}).status_code == 201
        assert c.post("/api/discussions", json=body, headers={"X-Forwarded-For": "10.0.0.1"}).status_code == 429
        assert c.post("/api/discussions", json=body, headers={"X-Forwarded-For": "10.0.0.2"}).status_code == 201


def test_each_app_keeps_its_own_limiter():
    first = create_app(settings=_settings(create_rate_limit=1), repository=MemoryRepository())
    body = {"author": "A", "content": "hi"}
    with TestClient(first) as c:
        assert c.post("/api/discussions", json=body).status_code == 201
        create_app(settings=_settings(create_rate_limit=1), repository=MemoryRepository())
        assert c.post("/api/discussions", json=body).status_code == 429
