"""
Dependency Injection container.

Wires abstract ports → concrete adapters and assembles the JobStore.
To swap a tier (e.g. file cache → memory cache), change the adapter
instantiation here. Nothing else in the codebase changes.
"""

from functools import lru_cache

from jobboard.adapters.json_file_cache_adapter import JsonFileCacheAdapter
from jobboard.adapters.logging_notification_adapter import LoggingNotificationAdapter
from jobboard.adapters.memory_cache_adapter import InMemoryCacheAdapter
from jobboard.adapters.request_auth_adapter import RequestAuthAdapter
from jobboard.config import settings
from jobboard.ports.auth_port import AuthPort
from jobboard.ports.cache_port import CachePort
from jobboard.services.job_loader import JobLoader
from jobboard.services.job_store import JobStore
from jobboard.sources.cache_snapshot_adapter import CacheSnapshotSource
from jobboard.sources.remote_api_adapter import RemoteApiSource
from jobboard.sources.seed_adapter import SeedSource


# ── Singletons (cached) ──────────────────────────────────────


@lru_cache(maxsize=1)
def _get_cache_adapter() -> CachePort:
    if settings.cache_backend == "memory":
        return InMemoryCacheAdapter()
    return JsonFileCacheAdapter(settings.cache_path)


@lru_cache(maxsize=1)
def _get_auth_adapter() -> RequestAuthAdapter:
    return RequestAuthAdapter()


@lru_cache(maxsize=1)
def _get_notification_adapter() -> LoggingNotificationAdapter:
    return LoggingNotificationAdapter(history=settings.notification_history)


def build_job_loader(cache: CachePort) -> JobLoader:
    """Remote API first, then the cached snapshot, then the seed dataset."""
    return JobLoader(
        [
            RemoteApiSource(settings.jobs_api_url, timeout=settings.jobs_api_timeout),
            CacheSnapshotSource(cache, settings.cache_key),
            SeedSource(),
        ]
    )


@lru_cache(maxsize=1)
def _get_job_store() -> JobStore:
    cache = _get_cache_adapter()
    return JobStore(
        loader=build_job_loader(cache),
        cache=cache,
        auth=_get_auth_adapter(),
        notifier=_get_notification_adapter(),
        cache_key=settings.cache_key,
    )


# ── FastAPI Dependencies ──────────────────────────────────────


def get_job_store() -> JobStore:
    """Inject the shared job store."""
    return _get_job_store()


def get_auth() -> AuthPort:
    """Inject the request-scoped auth adapter."""
    return _get_auth_adapter()


def get_notifier() -> LoggingNotificationAdapter:
    """Inject the notification adapter (exposes the recent history)."""
    return _get_notification_adapter()
