"""
Remote job list — the REST endpoint that is the source of truth when reachable.

The endpoint returns `{"jobs": [...]}` where `likedBy` / `savedBy` hold rich
user objects rather than bare ids; records are projected down to the store's
shape here.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any

import requests
from pydantic import ValidationError

from jobboard.domain.errors import SourceUnavailableError
from jobboard.domain.models import Comment, Job
from jobboard.sources.source_port import JobSourcePort

logger = logging.getLogger(__name__)

# per-record failures: skip the record, keep the rest of the payload
_RECORD_ERRORS = (ValidationError, ValueError, TypeError, AttributeError, OverflowError)


def _project_user_ids(users: list[Any] | None) -> list[str]:
    """Reduce a list of user objects (or bare ids) to unique ids, first occurrence wins."""
    ids: list[str] = []
    for user in users or []:
        user_id = user.get("id") if isinstance(user, dict) else user
        if user_id is None:
            continue
        user_id = str(user_id)
        if user_id not in ids:
            ids.append(user_id)
    return ids


def _timestamp_ms(record: dict[str, Any]) -> int:
    if record.get("timestamp") is not None:
        return int(record["timestamp"])
    created_at = record.get("createdAt")
    if created_at:
        parsed = datetime.fromisoformat(str(created_at).replace("Z", "+00:00"))
        return int(parsed.timestamp() * 1000)
    return 0


def _normalize_remote_post(record: dict[str, Any]) -> dict[str, Any]:
    """Fill the author/timestamp fields the server's comment rows do not carry."""
    user_id = str(record.get("userId", ""))
    return {
        **record,
        "id": str(record.get("id", "")),
        "userId": user_id,
        "userName": record.get("userName") or user_id,
        "userPhoto": record.get("userPhoto") or "",
        "timestamp": _timestamp_ms(record),
    }


def _normalize_remote_comments(records: list[Any] | None) -> list[Comment]:
    """Normalise comments and their replies; a malformed comment is dropped, never the job."""
    comments: list[Comment] = []
    for record in records or []:
        try:
            data = _normalize_remote_post(record)
            data["replies"] = [
                _normalize_remote_post(reply) for reply in record.get("replies") or []
            ]
            comments.append(Comment.model_validate(data))
        except _RECORD_ERRORS as exc:
            logger.warning(
                "Skipping malformed remote comment %r: %s",
                record.get("id") if isinstance(record, dict) else record,
                exc,
            )
    return comments


def normalize_remote_job(record: dict[str, Any]) -> Job:
    """
    Convert one remote record into a Job.

    - missing `comments` → []; comment rows get `userName`, `userPhoto`,
      `timestamp` and `replies` filled in
    - `likedBy` / `savedBy` → lists of user ids
    - `likesCount` → number of likers
    - missing `timestamp` → derived from `createdAt` when present

    Raises ValidationError when required fields are missing.
    """
    liked_by = _project_user_ids(record.get("likedBy"))
    data = {
        **record,
        "id": str(record.get("id", "")),
        "comments": _normalize_remote_comments(record.get("comments")),
        "likedBy": liked_by,
        "savedBy": _project_user_ids(record.get("savedBy")),
        "likesCount": len(liked_by),
        "timestamp": _timestamp_ms(record),
    }
    return Job.model_validate(data)


class RemoteApiSource(JobSourcePort):
    """Fetches the job list from the remote REST API."""

    SOURCE_NAME = "remote-api"

    def __init__(self, url: str, timeout: float = 10.0) -> None:
        self._url = url
        self._timeout = timeout

    async def load_jobs(self) -> list[Job]:
        # requests is blocking, keep it off the event loop
        payload = await asyncio.to_thread(self._fetch)

        records = payload.get("jobs") if isinstance(payload, dict) else None
        if not isinstance(records, list):
            raise SourceUnavailableError("Remote API response has no 'jobs' list")

        jobs: list[Job] = []
        for record in records:
            try:
                jobs.append(normalize_remote_job(record))
            except _RECORD_ERRORS as exc:
                logger.warning(
                    "Skipping malformed remote job %r: %s",
                    record.get("id") if isinstance(record, dict) else record,
                    exc,
                )

        logger.debug("Fetched %d jobs from %s", len(jobs), self._url)
        return jobs

    def _fetch(self) -> Any:
        try:
            resp = requests.get(
                self._url,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise SourceUnavailableError(f"Remote API unreachable: {exc}") from exc

        if not resp.ok:
            raise SourceUnavailableError(f"Remote API returned {resp.status_code}")

        try:
            return resp.json()
        except ValueError as exc:
            raise SourceUnavailableError(f"Remote API returned invalid JSON: {exc}") from exc
