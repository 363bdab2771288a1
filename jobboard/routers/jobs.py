"""
Job endpoints — listing, CRUD, comments, likes and saves.
All logic delegated to the JobStore.
"""

from fastapi import APIRouter, Depends, Header, HTTPException, Response, status

from jobboard.adapters.request_auth_adapter import RequestAuthAdapter
from jobboard.dependencies import get_job_store
from jobboard.domain.models import (
    ActingUser,
    CommentCreate,
    Job,
    JobCreate,
    JobCreateResponse,
    JobListResponse,
    JobUpdate,
    LikeState,
    SaveState,
)
from jobboard.services.job_store import JobStore


async def get_acting_user(
    x_user_id: str | None = Header(None),
    x_user_name: str | None = Header(None),
    x_user_photo: str | None = Header(None),
) -> ActingUser | None:
    """
    Resolve the acting user from the gateway-provided headers and bind it
    for the JobStore. Authentication itself happens upstream.
    """
    user = None
    if x_user_id:
        user = ActingUser(
            id=x_user_id,
            name=x_user_name or x_user_id,
            photo_url=x_user_photo or "",
        )
    RequestAuthAdapter.bind(user)
    return user


async def require_user(user: ActingUser | None = Depends(get_acting_user)) -> ActingUser:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user


def _get_job_or_404(store: JobStore, job_id: str) -> Job:
    job = store.get_job(job_id)
    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found",
        )
    return job


router = APIRouter(
    prefix="/jobs",
    tags=["Jobs"],
    dependencies=[Depends(get_acting_user)],
)


@router.get("", response_model=JobListResponse)
async def list_jobs(store: JobStore = Depends(get_job_store)):
    """All jobs, newest first, plus the store's loading/error flags."""
    return JobListResponse(jobs=store.jobs, is_loading=store.is_loading, error=store.error)


@router.get("/saved", response_model=list[Job])
async def list_saved_jobs(store: JobStore = Depends(get_job_store)):
    """Jobs saved by the acting user (empty when signed out)."""
    return store.saved_jobs


@router.post("/refresh", response_model=JobListResponse)
async def refresh_jobs(store: JobStore = Depends(get_job_store)):
    """Re-run the remote → cache → seed load sequence."""
    await store.refresh()
    return JobListResponse(jobs=store.jobs, is_loading=store.is_loading, error=store.error)


@router.get("/{job_id}", response_model=Job)
async def get_job(job_id: str, store: JobStore = Depends(get_job_store)):
    return _get_job_or_404(store, job_id)


@router.post("", response_model=JobCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_job(body: JobCreate, store: JobStore = Depends(get_job_store)):
    job_id = await store.add_job(body)
    return JobCreateResponse(id=job_id)


@router.patch("/{job_id}", response_model=Job)
async def update_job(job_id: str, body: JobUpdate, store: JobStore = Depends(get_job_store)):
    _get_job_or_404(store, job_id)
    await store.update_job(job_id, body)
    return _get_job_or_404(store, job_id)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(job_id: str, store: JobStore = Depends(get_job_store)):
    _get_job_or_404(store, job_id)
    await store.delete_job(job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Comments ──────────────────────────────────────────────────


@router.post("/{job_id}/comments", response_model=Job, status_code=status.HTTP_201_CREATED)
async def add_comment(
    job_id: str,
    body: CommentCreate,
    user: ActingUser = Depends(require_user),
    store: JobStore = Depends(get_job_store),
):
    """Post a comment; it becomes the first comment of the job."""
    _get_job_or_404(store, job_id)
    await store.add_comment_to_job(job_id, body.content, user)
    return _get_job_or_404(store, job_id)


@router.post(
    "/{job_id}/comments/{comment_id}/replies",
    response_model=Job,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    job_id: str,
    comment_id: str,
    body: CommentCreate,
    user: ActingUser = Depends(require_user),
    store: JobStore = Depends(get_job_store),
):
    """Reply to a comment; replies stay in posting order."""
    job = _get_job_or_404(store, job_id)
    if job.find_comment(comment_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    await store.add_reply_to_comment(job_id, comment_id, body.content, user)
    return _get_job_or_404(store, job_id)


# ── Likes & saves ─────────────────────────────────────────────


@router.post("/{job_id}/like", response_model=LikeState)
async def toggle_like(
    job_id: str,
    user: ActingUser = Depends(require_user),
    store: JobStore = Depends(get_job_store),
):
    _get_job_or_404(store, job_id)
    await store.toggle_job_like(job_id)
    return LikeState(
        job_id=job_id,
        liked=store.is_job_liked_by_current_user(job_id),
        likes_count=store.get_likes_count(job_id),
    )


@router.post("/{job_id}/save", response_model=SaveState)
async def toggle_save(
    job_id: str,
    user: ActingUser = Depends(require_user),
    store: JobStore = Depends(get_job_store),
):
    _get_job_or_404(store, job_id)
    await store.toggle_save_job(job_id)
    return SaveState(job_id=job_id, saved=store.is_job_saved_by_current_user(job_id))
