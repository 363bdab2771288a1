"""
Concrete implementation of CachePort held in process memory.
Used for ephemeral deployments (CACHE_BACKEND=memory) and in tests.
"""

from jobboard.ports.cache_port import CachePort


class InMemoryCacheAdapter(CachePort):
    """Dict-backed key-value store; contents are lost on restart."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
