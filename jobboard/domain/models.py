"""
Pydantic models for jobs, comments, requests and responses.
Pure data — no I/O, no side effects.

Every model serialises with camelCase aliases (likedBy, likesCount, userId...)
so the cache snapshot, the remote payload and the HTTP responses share a
single wire format.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jobboard.domain.enums import JobStatus, NotificationVariant


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Acting user ───────────────────────────────────────────────


class ActingUser(_CamelModel):
    """The authenticated user performing an operation."""

    id: str = Field(..., min_length=1)
    name: str
    photo_url: str = ""


# ── Comments ──────────────────────────────────────────────────


class Reply(_CamelModel):
    """A reply under a comment. Replies do not nest further."""

    id: str
    content: str
    user_id: str
    user_name: str
    user_photo: str = ""
    timestamp: int


class Comment(_CamelModel):
    """A comment on a job. Replies are kept oldest-first."""

    id: str
    content: str
    user_id: str
    user_name: str
    user_photo: str = ""
    timestamp: int
    replies: list[Reply] = Field(default_factory=list)


class CommentCreate(_CamelModel):
    """Request body for POST /jobs/{id}/comments and replies."""

    content: str = Field(..., min_length=1, max_length=5000)


# ── Job ───────────────────────────────────────────────────────


class Job(_CamelModel):
    """A posted freelance proposal with its social state."""

    id: str
    title: str
    description: str
    budget: float = Field(..., ge=0)
    category: str
    skills: list[str] = Field(default_factory=list)
    user_id: str
    user_name: str
    user_photo: str | None = None
    status: JobStatus = JobStatus.OPEN
    timestamp: int
    comments: list[Comment] = Field(default_factory=list)   # newest first
    liked_by: list[str] = Field(default_factory=list)
    likes_count: int = Field(0, ge=0)
    saved_by: list[str] = Field(default_factory=list)

    def find_comment(self, comment_id: str) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)


class JobCreate(_CamelModel):
    """Request body for POST /jobs."""

    title: str = Field(..., min_length=3, max_length=200)
    description: str = Field(..., min_length=1)
    budget: float = Field(..., ge=0)
    category: str
    skills: list[str] = Field(default_factory=list)
    user_id: str
    user_name: str
    user_photo: str | None = None
    status: JobStatus = JobStatus.OPEN


class JobUpdate(_CamelModel):
    """Partial update for PATCH /jobs/{id}. Only fields explicitly set are merged."""

    title: str | None = Field(None, min_length=3, max_length=200)
    description: str | None = None
    budget: float | None = Field(None, ge=0)
    category: str | None = None
    skills: list[str] | None = None
    status: JobStatus | None = None
    user_photo: str | None = None


class JobCreateResponse(_CamelModel):
    """Response after job creation."""

    id: str


class JobListResponse(_CamelModel):
    """Response for GET /jobs."""

    jobs: list[Job]
    is_loading: bool = False
    error: str | None = None


class LikeState(_CamelModel):
    """Response for POST /jobs/{id}/like."""

    job_id: str
    liked: bool
    likes_count: int


class SaveState(_CamelModel):
    """Response for POST /jobs/{id}/save."""

    job_id: str
    saved: bool


# ── Notifications ─────────────────────────────────────────────


class Notification(_CamelModel):
    """A user-visible success or failure notice (title + description)."""

    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT
