"""Seed dataset used when neither the remote API nor the cache has jobs."""

import logging
import time
from typing import Callable

from jobboard.domain.enums import JobStatus
from jobboard.domain.models import Comment, Job, Reply
from jobboard.sources.source_port import JobSourcePort

logger = logging.getLogger(__name__)

_HOUR_MS = 3_600_000
_DAY_MS = 24 * _HOUR_MS

_CARLOS_PHOTO = "https://randomuser.me/api/portraits/men/1.jpg"


def _now_ms() -> int:
    return int(time.time() * 1000)


def build_seed_jobs(now: int) -> list[Job]:
    """The fixed five example jobs, timestamped relative to `now` (epoch ms)."""
    return [
        Job(
            id="1",
            title="Web application development with React",
            description=(
                "I need a developer to build a complete web application with React, "
                "Node.js and MongoDB. It must include authentication, user management "
                "and an admin dashboard."
            ),
            budget=2500,
            category="Web Development",
            skills=["React", "Node.js", "MongoDB", "Express"],
            user_id="user1",
            user_name="Carlos Martínez",
            user_photo=_CARLOS_PHOTO,
            status=JobStatus.OPEN,
            timestamp=now - 2 * _DAY_MS,
            comments=[
                Comment(
                    id="c1",
                    content="I'm interested in this project. I have experience with similar ones.",
                    user_id="user2",
                    user_name="Laura Gómez",
                    user_photo="https://randomuser.me/api/portraits/women/2.jpg",
                    timestamp=now - 12 * _HOUR_MS,
                    replies=[
                        Reply(
                            id="r1",
                            content="Thanks for your interest, please message me to discuss the details.",
                            user_id="user1",
                            user_name="Carlos Martínez",
                            user_photo=_CARLOS_PHOTO,
                            timestamp=now - 10 * _HOUR_MS,
                        )
                    ],
                )
            ],
        ),
        Job(
            id="2",
            title="Logo design for a tech startup",
            description=(
                "We are a technology startup looking for a modern, professional logo "
                "that reflects our brand. Minimalist but striking."
            ),
            budget=500,
            category="Graphic Design",
            skills=["Illustrator", "Photoshop", "Logo Design", "Branding"],
            user_id="user3",
            user_name="Ana Rodríguez",
            user_photo="https://randomuser.me/api/portraits/women/3.jpg",
            status=JobStatus.OPEN,
            timestamp=now - _DAY_MS,
        ),
        Job(
            id="3",
            title="English-Spanish translation of technical documents",
            description=(
                "Translate engineering manuals from English to Spanish. Roughly 200 "
                "pages of specialised terminology."
            ),
            budget=800,
            category="Translation",
            skills=["English", "Spanish", "Technical Translation"],
            user_id="user4",
            user_name="Roberto Sánchez",
            user_photo="https://randomuser.me/api/portraits/men/4.jpg",
            status=JobStatus.IN_PROGRESS,
            timestamp=now - 5 * _DAY_MS,
        ),
        Job(
            id="4",
            title="Mobile app development for Android and iOS",
            description=(
                "Looking for a React Native developer to build a mobile app for both "
                "Android and iOS, with geolocation and push notifications."
            ),
            budget=3000,
            category="Mobile Development",
            skills=["React Native", "Android", "iOS", "Firebase"],
            user_id="user5",
            user_name="Elena Torres",
            user_photo="https://randomuser.me/api/portraits/women/5.jpg",
            status=JobStatus.OPEN,
            timestamp=now - 3 * _DAY_MS,
        ),
        Job(
            id="5",
            title="Corporate video editing and post-production",
            description=(
                "We have footage for a 5-minute corporate video and need a professional "
                "for editing and post-production. After Effects experience required."
            ),
            budget=1200,
            category="Video & Animation",
            skills=["Premiere Pro", "After Effects", "Video Editing", "Post-production"],
            user_id="user1",
            user_name="Carlos Martínez",
            user_photo=_CARLOS_PHOTO,
            status=JobStatus.COMPLETED,
            timestamp=now - 10 * _DAY_MS,
        ),
    ]


class SeedSource(JobSourcePort):
    """Always available — the last tier of the chain."""

    SOURCE_NAME = "seed"

    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock

    async def load_jobs(self) -> list[Job]:
        logger.info("Using seed dataset")
        return build_seed_jobs(self._clock())
