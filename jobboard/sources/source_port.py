"""
Abstract interface for the tiers the job list can be loaded from.
Each tier (remote API, local cache, seed data) implements this port.
"""

from abc import ABC, abstractmethod

from jobboard.domain.models import Job


class JobSourcePort(ABC):
    """Port for fetching the full job list from one data tier."""

    SOURCE_NAME: str = "unknown"

    @abstractmethod
    async def load_jobs(self) -> list[Job]:
        """
        Load the complete job list from this tier.

        Raises:
            SourceUnavailableError: the tier has nothing to offer and the
                next one should be tried (network down, key missing...).
            Exception: any other error is a hard failure of the chain.
        """
        ...
