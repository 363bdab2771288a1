"""
Job store — sole owner of the in-memory job collection.
Handles CRUD, comments/replies and like/save toggles for the job board.

Production hardening:
  - Every mutation is a pure transition of the current list, applied under a
    single-writer asyncio.Lock, so two rapid toggles never lose an update and
    `likes_count` can never drift from `len(liked_by)`.
  - The full list is written through to the local cache after each change,
    inside the same lock, so snapshots land in mutation order.
"""

import asyncio
import logging
import time
import uuid
from typing import Callable

from jobboard.domain.enums import NotificationVariant
from jobboard.domain.models import (
    ActingUser,
    Comment,
    Job,
    JobCreate,
    JobUpdate,
    Notification,
    Reply,
)
from jobboard.ports.auth_port import AuthPort
from jobboard.ports.cache_port import CachePort
from jobboard.ports.notification_port import NotificationPort
from jobboard.services.job_loader import JobLoader
from jobboard.sources.cache_snapshot_adapter import dump_snapshot

logger = logging.getLogger(__name__)

Transition = Callable[[list[Job]], list[Job]]


def _new_id() -> str:
    return uuid.uuid4().hex


def _now_ms() -> int:
    return int(time.time() * 1000)


class _Rejected(Exception):
    """Operation-level rejection: reported to the user, never to the caller."""

    def __init__(self, title: str, description: str) -> None:
        super().__init__(description)
        self.title = title
        self.description = description


def _job_not_found(job_id: str) -> _Rejected:
    return _Rejected("Job not found", f"No job exists with id '{job_id}'")


def _replace_job(jobs: list[Job], job_id: str, change: Callable[[Job], Job]) -> list[Job]:
    """Return a new list with `change` applied to the matching job."""
    updated: list[Job] = []
    found = False
    for job in jobs:
        if job.id == job_id:
            updated.append(change(job))
            found = True
        else:
            updated.append(job)
    if not found:
        raise _job_not_found(job_id)
    return updated


def _toggle_member(members: list[str], user_id: str) -> list[str]:
    if user_id in members:
        return [m for m in members if m != user_id]
    return [*members, user_id]


class JobStore:
    """
    Owns the job list and mediates between the data tiers and consumers.

    Collaborators are injected: the loader (remote → cache → seed chain), the
    cache used as write-through mirror, the auth port supplying the acting user
    and the notification port for user-visible notices.
    """

    def __init__(
        self,
        loader: JobLoader,
        cache: CachePort,
        auth: AuthPort,
        notifier: NotificationPort,
        cache_key: str = "wfc_jobs",
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._loader = loader
        self._cache = cache
        self._auth = auth
        self._notifier = notifier
        self._cache_key = cache_key
        self._id_factory = id_factory
        self._clock = clock

        self._jobs: list[Job] = []
        self._lock = asyncio.Lock()

        self.is_loading = False
        self.error: str | None = None

    # ── Views (treat returned models as read-only) ────────────

    @property
    def jobs(self) -> list[Job]:
        return list(self._jobs)

    @property
    def saved_jobs(self) -> list[Job]:
        """Jobs saved by the acting user, in main-list order. Empty when signed out."""
        user = self._auth.get_current_user()
        if user is None:
            return []
        return [job for job in self._jobs if user.id in job.saved_by]

    # ── Loading ───────────────────────────────────────────────

    async def load(self) -> None:
        """
        Replace the in-memory list with the first tier that answers.

        Failure of the whole chain (e.g. a corrupt cache after the API is
        down) only sets `error`; the current list is kept.
        """
        self.is_loading = True
        try:
            try:
                result = await self._loader.load()
            except Exception as exc:
                logger.error("Failed to load jobs from every source: %s", exc)
                self.error = "Jobs could not be loaded"
                return

            async with self._lock:
                self._jobs = result.jobs
                try:
                    await self._persist()
                except Exception as exc:
                    logger.error("Failed to cache jobs loaded from %s: %s", result.source_name, exc)
                    self.error = "Jobs could not be cached"
                    return
            self.error = None
        finally:
            self.is_loading = False

    async def refresh(self) -> None:
        await self.load()

    # ── Lookups ───────────────────────────────────────────────

    def get_job(self, job_id: str) -> Job | None:
        return next((job for job in self._jobs if job.id == job_id), None)

    def is_job_liked_by_current_user(self, job_id: str) -> bool:
        user = self._auth.get_current_user()
        job = self.get_job(job_id)
        if user is None or job is None:
            return False
        return user.id in job.liked_by

    def is_job_saved_by_current_user(self, job_id: str) -> bool:
        user = self._auth.get_current_user()
        job = self.get_job(job_id)
        if user is None or job is None:
            return False
        return user.id in job.saved_by

    def get_likes_count(self, job_id: str) -> int:
        job = self.get_job(job_id)
        return job.likes_count if job else 0

    # ── CRUD ──────────────────────────────────────────────────

    async def add_job(self, new_job: JobCreate) -> str:
        """Create a job at the head of the list and return its id."""
        job = Job(
            **new_job.model_dump(),
            id=self._id_factory(),
            timestamp=self._clock(),
        )

        await self._mutate(lambda jobs: [job, *jobs], failure="Could not create the job")
        await self._notify("Job created", "The job was created successfully")
        return job.id

    async def update_job(self, job_id: str, updates: JobUpdate) -> None:
        # user_photo is the only field that may be cleared
        changes = {
            field: value
            for field, value in updates.model_dump(exclude_unset=True).items()
            if value is not None or field == "user_photo"
        }

        applied = await self._mutate(
            lambda jobs: _replace_job(jobs, job_id, lambda job: job.model_copy(update=changes)),
            failure="Could not update the job",
        )
        if applied:
            await self._notify("Job updated", "The job was updated successfully")

    async def delete_job(self, job_id: str) -> None:
        def transition(jobs: list[Job]) -> list[Job]:
            remaining = [job for job in jobs if job.id != job_id]
            if len(remaining) == len(jobs):
                raise _job_not_found(job_id)
            return remaining

        applied = await self._mutate(transition, failure="Could not delete the job")
        if applied:
            await self._notify("Job deleted", "The job was deleted successfully")

    # ── Comments ──────────────────────────────────────────────

    async def add_comment_to_job(
        self, job_id: str, content: str, user: ActingUser | None = None
    ) -> None:
        """Prepend a comment (newest first). Falls back to the acting user."""
        author = user or self._auth.get_current_user()
        if author is None:
            await self._reject("Error", "You must be signed in to comment")
            return
        if not content.strip():
            await self._reject("Error", "A comment cannot be empty")
            return

        comment = Comment(
            id=self._id_factory(),
            content=content,
            user_id=author.id,
            user_name=author.name,
            user_photo=author.photo_url or "",
            timestamp=self._clock(),
        )

        applied = await self._mutate(
            lambda jobs: _replace_job(
                jobs,
                job_id,
                lambda job: job.model_copy(update={"comments": [comment, *job.comments]}),
            ),
            failure="Could not add the comment",
        )
        if applied:
            await self._notify("Comment added", "Your comment has been posted")

    async def add_reply_to_comment(
        self, job_id: str, comment_id: str, content: str, user: ActingUser | None = None
    ) -> None:
        """Append a reply (oldest first) to one comment of a job."""
        author = user or self._auth.get_current_user()
        if author is None:
            await self._reject("Error", "You must be signed in to reply")
            return
        if not content.strip():
            await self._reject("Error", "A reply cannot be empty")
            return

        reply = Reply(
            id=self._id_factory(),
            content=content,
            user_id=author.id,
            user_name=author.name,
            user_photo=author.photo_url or "",
            timestamp=self._clock(),
        )

        def add_reply(job: Job) -> Job:
            if job.find_comment(comment_id) is None:
                raise _Rejected("Comment not found", f"No comment exists with id '{comment_id}'")
            comments = [
                c.model_copy(update={"replies": [*c.replies, reply]}) if c.id == comment_id else c
                for c in job.comments
            ]
            return job.model_copy(update={"comments": comments})

        applied = await self._mutate(
            lambda jobs: _replace_job(jobs, job_id, add_reply),
            failure="Could not add the reply",
        )
        if applied:
            await self._notify("Reply added", "Your reply has been posted")

    # ── Likes & saves ─────────────────────────────────────────

    async def toggle_job_like(self, job_id: str) -> None:
        user = self._auth.get_current_user()
        if user is None:
            await self._reject("Error", "You must be signed in to like a job")
            return

        outcome: dict[str, bool] = {}

        def flip_like(job: Job) -> Job:
            liked_by = _toggle_member(job.liked_by, user.id)
            outcome["liked"] = user.id in liked_by
            # set and counter change together in one transition
            return job.model_copy(
                update={"liked_by": liked_by, "likes_count": len(liked_by)}
            )

        applied = await self._mutate(
            lambda jobs: _replace_job(jobs, job_id, flip_like),
            failure="Could not process the like",
        )
        if not applied:
            return
        if outcome["liked"]:
            await self._notify("Like added", "You liked this proposal")
        else:
            await self._notify("Like removed", "You removed your like from this proposal")

    async def toggle_save_job(self, job_id: str) -> None:
        user = self._auth.get_current_user()
        if user is None:
            await self._reject("Error", "You must be signed in to save proposals")
            return

        outcome: dict[str, bool] = {}

        def flip_save(job: Job) -> Job:
            saved_by = _toggle_member(job.saved_by, user.id)
            outcome["saved"] = user.id in saved_by
            return job.model_copy(update={"saved_by": saved_by})

        applied = await self._mutate(
            lambda jobs: _replace_job(jobs, job_id, flip_save),
            failure="Could not process the save",
        )
        if not applied:
            return
        if outcome["saved"]:
            await self._notify("Proposal saved", "You saved this proposal")
        else:
            await self._notify("Proposal removed", "You removed this proposal from your saved list")

    # ── Internals ─────────────────────────────────────────────

    async def _mutate(self, transition: Transition, *, failure: str) -> bool:
        """
        Apply `transition` to the current list atomically and write through.

        Returns False when the transition rejected the operation (unknown
        job/comment); the list is then untouched. Unexpected errors set
        `error`, notify the user and are re-raised.
        """
        try:
            async with self._lock:
                self._jobs = transition(self._jobs)
                await self._persist()
        except _Rejected as rejection:
            await self._reject(rejection.title, rejection.description)
            return False
        except Exception as exc:
            logger.error("%s: %s", failure, exc)
            self.error = failure
            await self._notifier.notify(
                Notification(title="Error", description=failure, variant=NotificationVariant.DESTRUCTIVE)
            )
            raise
        return True

    async def _persist(self) -> None:
        """Full-collection write-through. An empty list is never written."""
        if not self._jobs:
            return
        await self._cache.set(self._cache_key, dump_snapshot(self._jobs))
        logger.debug("Cached %d jobs under '%s'", len(self._jobs), self._cache_key)

    async def _notify(self, title: str, description: str) -> None:
        await self._notifier.notify(Notification(title=title, description=description))

    async def _reject(self, title: str, description: str) -> None:
        logger.info("Rejected: %s", description)
        await self._notifier.notify(
            Notification(title=title, description=description, variant=NotificationVariant.DESTRUCTIVE)
        )
