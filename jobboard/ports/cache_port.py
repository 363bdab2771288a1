"""
Abstract interface for the local key-value cache.
"""

from abc import ABC, abstractmethod


class CachePort(ABC):
    """Port for a client-side string store (one key per snapshot)."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key was never written."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, overwriting any previous value."""
        ...
