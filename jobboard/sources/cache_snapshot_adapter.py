"""
Local cache tier — the last snapshot of the job list written by the store.
"""

import logging

from pydantic import TypeAdapter

from jobboard.domain.errors import SourceUnavailableError
from jobboard.domain.models import Job
from jobboard.ports.cache_port import CachePort
from jobboard.sources.source_port import JobSourcePort

logger = logging.getLogger(__name__)

_JOB_LIST = TypeAdapter(list[Job])


def dump_snapshot(jobs: list[Job]) -> str:
    """Serialise the full job list to the cache wire format (camelCase JSON)."""
    return _JOB_LIST.dump_json(jobs, by_alias=True).decode("utf-8")


def parse_snapshot(raw: str) -> list[Job]:
    """Inverse of dump_snapshot. Raises ValidationError on a corrupt snapshot."""
    return _JOB_LIST.validate_json(raw)


class CacheSnapshotSource(JobSourcePort):
    """Reads the persisted snapshot. A missing key means 'try the next tier'."""

    SOURCE_NAME = "local-cache"

    def __init__(self, cache: CachePort, key: str) -> None:
        self._cache = cache
        self._key = key

    async def load_jobs(self) -> list[Job]:
        raw = await self._cache.get(self._key)
        if raw is None:
            raise SourceUnavailableError(f"No cached snapshot under '{self._key}'")

        # a corrupt snapshot fails the chain instead of falling through
        jobs = parse_snapshot(raw)
        logger.debug("Read %d jobs from cache key '%s'", len(jobs), self._key)
        return jobs
