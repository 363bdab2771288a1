"""
Job loader — tries each data tier in priority order.
Single Responsibility: only decides *where* the job list comes from.

Typical chain: remote API → local cache snapshot → seed dataset.
The first tier that returns a list wins; a tier raising
SourceUnavailableError hands over to the next one.
"""

import logging
from dataclasses import dataclass

from jobboard.domain.errors import JobLoadError, SourceUnavailableError
from jobboard.domain.models import Job
from jobboard.sources.source_port import JobSourcePort

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    jobs: list[Job]
    source_name: str


class JobLoader:
    """Ordered list of data-source strategies, first success short-circuits."""

    def __init__(self, sources: list[JobSourcePort]) -> None:
        if not sources:
            raise ValueError("JobLoader needs at least one source")
        self._sources = list(sources)

    @property
    def source_names(self) -> list[str]:
        return [s.SOURCE_NAME for s in self._sources]

    async def load(self) -> LoadResult:
        """
        Walk the chain and return the first available job list.

        Raises:
            JobLoadError: every tier was unavailable.
            Exception: a tier failed hard (e.g. corrupt cache); propagated
                as-is so the caller can flag it.
        """
        for source in self._sources:
            try:
                jobs = await source.load_jobs()
            except SourceUnavailableError as exc:
                logger.warning("Source %s unavailable: %s", source.SOURCE_NAME, exc)
                continue

            logger.info("Loaded %d jobs from %s", len(jobs), source.SOURCE_NAME)
            return LoadResult(jobs=jobs, source_name=source.SOURCE_NAME)

        raise JobLoadError(f"No source could provide jobs (tried: {', '.join(self.source_names)})")
