"""Enums shared across the domain layer."""

from enum import Enum


class JobStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    # rendered as an error toast by clients
    DESTRUCTIVE = "destructive"
