"""
Shared fixtures and fakes for the job store tests.

Every port gets a small in-process fake so the store can be exercised
without a network, a disk or an authentication service.
"""

import asyncio
import itertools

import pytest

from jobboard.adapters.memory_cache_adapter import InMemoryCacheAdapter
from jobboard.domain.errors import SourceUnavailableError
from jobboard.domain.models import ActingUser, Job, Notification
from jobboard.ports.auth_port import AuthPort
from jobboard.ports.cache_port import CachePort
from jobboard.ports.notification_port import NotificationPort
from jobboard.services.job_loader import JobLoader
from jobboard.services.job_store import JobStore
from jobboard.sources.cache_snapshot_adapter import CacheSnapshotSource
from jobboard.sources.seed_adapter import SeedSource
from jobboard.sources.source_port import JobSourcePort

CACHE_KEY = "wfc_jobs"
FIXED_NOW = 1_700_000_000_000


# ===== FAKES =====


class FakeAuth(AuthPort):
    def __init__(self, user: ActingUser | None = None) -> None:
        self.user = user

    def get_current_user(self) -> ActingUser | None:
        return self.user


class RecordingNotifier(NotificationPort):
    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    async def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def last(self) -> Notification:
        return self.notifications[-1]


class YieldingCache(InMemoryCacheAdapter):
    """Suspends on every write, like a real I/O boundary would."""

    def __init__(self) -> None:
        super().__init__()
        self.writes = 0

    async def set(self, key: str, value: str) -> None:
        await asyncio.sleep(0)
        self.writes += 1
        await super().set(key, value)


class FailingCache(CachePort):
    async def get(self, key: str) -> str | None:
        raise OSError("disk unavailable")

    async def set(self, key: str, value: str) -> None:
        raise OSError("disk full")


class UnavailableSource(JobSourcePort):
    SOURCE_NAME = "down"

    def __init__(self) -> None:
        self.calls = 0

    async def load_jobs(self) -> list[Job]:
        self.calls += 1
        raise SourceUnavailableError("connection refused")


class StaticSource(JobSourcePort):
    SOURCE_NAME = "static"

    def __init__(self, jobs: list[Job]) -> None:
        self.jobs = jobs
        self.calls = 0

    async def load_jobs(self) -> list[Job]:
        self.calls += 1
        return list(self.jobs)


class BrokenSource(JobSourcePort):
    SOURCE_NAME = "broken"

    async def load_jobs(self) -> list[Job]:
        raise ValueError("corrupt snapshot")


def make_job(job_id: str, **overrides) -> Job:
    data = {
        "id": job_id,
        "title": f"Job {job_id}",
        "description": "Something to build",
        "budget": 100,
        "category": "Web Development",
        "skills": ["Python"],
        "user_id": "owner",
        "user_name": "Owner",
        "timestamp": FIXED_NOW,
    }
    data.update(overrides)
    return Job(**data)


# ===== FIXTURES =====


@pytest.fixture
def alice() -> ActingUser:
    return ActingUser(id="U", name="Alice", photo_url="https://example.com/alice.png")


@pytest.fixture
def bob() -> ActingUser:
    return ActingUser(id="B", name="Bob")


@pytest.fixture
def auth(alice) -> FakeAuth:
    return FakeAuth(alice)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def cache() -> InMemoryCacheAdapter:
    return InMemoryCacheAdapter()


@pytest.fixture
def remote() -> UnavailableSource:
    return UnavailableSource()


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def store(remote, cache, auth, notifier, id_factory) -> JobStore:
    """A store whose remote tier is down: falls back to cache, then seed."""
    loader = JobLoader(
        [
            remote,
            CacheSnapshotSource(cache, CACHE_KEY),
            SeedSource(clock=lambda: FIXED_NOW),
        ]
    )
    return JobStore(
        loader=loader,
        cache=cache,
        auth=auth,
        notifier=notifier,
        cache_key=CACHE_KEY,
        id_factory=id_factory,
        clock=lambda: FIXED_NOW,
    )
