"""
Concrete implementation of CachePort backed by a single JSON file.

Production hardening:
  - File I/O offloaded to threadpool via asyncio.to_thread()
  - Writes go to a temp file first and are swapped in with os.replace(),
    so a crash mid-write never leaves a truncated cache behind.
"""

import asyncio
import json
import os
import tempfile
from pathlib import Path

from jobboard.ports.cache_port import CachePort


class JsonFileCacheAdapter(CachePort):
    """Stores every key in one JSON object on disk. Last writer wins."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    async def get(self, key: str) -> str | None:
        return (await asyncio.to_thread(self._read_all)).get(key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write_key, key, value)

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        with open(self._path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Cache file {self._path} does not hold a JSON object")
        return data

    def _write_key(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self._path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
