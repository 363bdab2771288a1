"""
Tests for the HTTP layer (routers/jobs.py, routers/notifications.py).

The real RequestAuthAdapter is used so the acting-user headers flow through
to the store; the remote tier is down and the cache lives in memory.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from jobboard.adapters.logging_notification_adapter import LoggingNotificationAdapter
from jobboard.adapters.memory_cache_adapter import InMemoryCacheAdapter
from jobboard.adapters.request_auth_adapter import RequestAuthAdapter
from jobboard.dependencies import get_job_store, get_notifier
from jobboard.services.job_loader import JobLoader
from jobboard.services.job_store import JobStore
from jobboard.sources.cache_snapshot_adapter import CacheSnapshotSource
from jobboard.sources.seed_adapter import SeedSource
from main import app

from conftest import CACHE_KEY, FIXED_NOW, UnavailableSource

ALICE = {"X-User-Id": "U", "X-User-Name": "Alice"}
BOB = {"X-User-Id": "B", "X-User-Name": "Bob", "X-User-Photo": "https://example.com/bob.png"}


@pytest.fixture
def notifier():
    return LoggingNotificationAdapter(history=10)


@pytest.fixture
def api_store(notifier):
    cache = InMemoryCacheAdapter()
    store = JobStore(
        loader=JobLoader(
            [UnavailableSource(), CacheSnapshotSource(cache, CACHE_KEY), SeedSource(clock=lambda: FIXED_NOW)]
        ),
        cache=cache,
        auth=RequestAuthAdapter(),
        notifier=notifier,
        cache_key=CACHE_KEY,
    )
    asyncio.run(store.load())
    return store


@pytest.fixture
def client(api_store, notifier):
    app.dependency_overrides[get_job_store] = lambda: api_store
    app.dependency_overrides[get_notifier] = lambda: notifier
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestListing:
    def test_health(self, client):
        assert client.get("/").json()["status"] == "ok"

    def test_list_jobs(self, client):
        resp = client.get("/jobs")

        assert resp.status_code == 200
        body = resp.json()
        assert [j["id"] for j in body["jobs"]] == ["1", "2", "3", "4", "5"]
        assert body["isLoading"] is False
        assert body["error"] is None
        assert "likedBy" in body["jobs"][0]

    def test_get_job(self, client):
        resp = client.get("/jobs/3")

        assert resp.status_code == 200
        assert resp.json()["status"] == "in-progress"

    def test_get_unknown_job_is_404(self, client):
        assert client.get("/jobs/nope").status_code == 404

    def test_refresh(self, client):
        resp = client.post("/jobs/refresh")

        assert resp.status_code == 200
        assert len(resp.json()["jobs"]) == 5


class TestCrudEndpoints:
    def test_create_update_delete(self, client):
        created = client.post(
            "/jobs",
            json={
                "title": "Landing page",
                "description": "One page site",
                "budget": 300,
                "category": "Web Development",
                "skills": ["HTML"],
                "userId": "U",
                "userName": "Alice",
            },
        )
        assert created.status_code == 201
        job_id = created.json()["id"]
        assert client.get("/jobs").json()["jobs"][0]["id"] == job_id

        updated = client.patch(f"/jobs/{job_id}", json={"status": "completed"})
        assert updated.status_code == 200
        assert updated.json()["status"] == "completed"
        assert updated.json()["title"] == "Landing page"

        assert client.delete(f"/jobs/{job_id}").status_code == 204
        assert client.get(f"/jobs/{job_id}").status_code == 404

    def test_create_validates_body(self, client):
        resp = client.post("/jobs", json={"title": "x"})
        assert resp.status_code == 422

    def test_update_unknown_is_404(self, client):
        assert client.patch("/jobs/nope", json={"title": "Whatever"}).status_code == 404

    def test_delete_unknown_is_404(self, client):
        assert client.delete("/jobs/nope").status_code == 404


class TestSocialEndpoints:
    def test_like_requires_user(self, client):
        assert client.post("/jobs/2/like").status_code == 401

    def test_like_toggles(self, client):
        first = client.post("/jobs/2/like", headers=ALICE)
        assert first.json() == {"jobId": "2", "liked": True, "likesCount": 1}

        client.post("/jobs/2/like", headers=BOB)
        second = client.post("/jobs/2/like", headers=ALICE)
        assert second.json() == {"jobId": "2", "liked": False, "likesCount": 1}

        assert client.get("/jobs/2").json()["likedBy"] == ["B"]

    def test_save_and_saved_view(self, client):
        resp = client.post("/jobs/4/save", headers=ALICE)
        assert resp.json() == {"jobId": "4", "saved": True}

        assert [j["id"] for j in client.get("/jobs/saved", headers=ALICE).json()] == ["4"]
        assert client.get("/jobs/saved", headers=BOB).json() == []
        assert client.get("/jobs/saved").json() == []

    def test_comment_and_reply(self, client):
        resp = client.post("/jobs/2/comments", json={"content": "Interested!"}, headers=BOB)
        assert resp.status_code == 201
        comment = resp.json()["comments"][0]
        assert comment["content"] == "Interested!"
        assert comment["userPhoto"] == "https://example.com/bob.png"

        resp = client.post(
            f"/jobs/2/comments/{comment['id']}/replies",
            json={"content": "Thanks"},
            headers=ALICE,
        )
        assert resp.status_code == 201
        replies = resp.json()["comments"][0]["replies"]
        assert [r["content"] for r in replies] == ["Thanks"]
        assert replies[0]["userName"] == "Alice"

    def test_comment_requires_user(self, client):
        assert client.post("/jobs/2/comments", json={"content": "hi"}).status_code == 401

    def test_empty_comment_is_422(self, client):
        resp = client.post("/jobs/2/comments", json={"content": ""}, headers=ALICE)
        assert resp.status_code == 422

    def test_reply_to_unknown_comment_is_404(self, client):
        resp = client.post("/jobs/1/comments/nope/replies", json={"content": "hi"}, headers=ALICE)
        assert resp.status_code == 404


class TestNotificationsEndpoint:
    def test_lists_recent_notifications(self, client):
        client.post("/jobs/2/save", headers=ALICE)

        body = client.get("/notifications").json()

        assert body[-1]["title"] == "Proposal saved"
        assert body[-1]["variant"] == "default"
