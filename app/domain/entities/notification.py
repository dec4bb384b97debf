"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_TYPE_INTERVIEW_SCHEDULED = "interview_scheduled"
NOTIFICATION_TYPE_INTERVIEW_RESPONSE = "interview_response"
NOTIFICATION_TYPE_INTERVIEW_REMINDER = "interview_reminder"
NOTIFICATION_TYPE_GENERAL = "general"

NOTIFICATION_TYPES = (
    NOTIFICATION_TYPE_INTERVIEW_SCHEDULED,
    NOTIFICATION_TYPE_INTERVIEW_RESPONSE,
    NOTIFICATION_TYPE_INTERVIEW_REMINDER,
    NOTIFICATION_TYPE_GENERAL,
)

NOTIFICATION_STATUS_PENDING = "pending"
NOTIFICATION_STATUS_SENT = "sent"
NOTIFICATION_STATUS_READ = "read"
NOTIFICATION_STATUS_DISMISSED = "dismissed"

NOTIFICATION_STATUSES = (
    NOTIFICATION_STATUS_PENDING,
    NOTIFICATION_STATUS_SENT,
    NOTIFICATION_STATUS_READ,
    NOTIFICATION_STATUS_DISMISSED,
)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    recipient_id: int
    type: str
    status: str
    title: str
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)
    read_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class NotificationDraft:
    """Notification waiting to be persisted alongside a state change."""

    recipient_id: int
    type: str
    title: str
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)


__all__ = [
    "NOTIFICATION_TYPE_INTERVIEW_SCHEDULED",
    "NOTIFICATION_TYPE_INTERVIEW_RESPONSE",
    "NOTIFICATION_TYPE_INTERVIEW_REMINDER",
    "NOTIFICATION_TYPE_GENERAL",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_STATUS_PENDING",
    "NOTIFICATION_STATUS_SENT",
    "NOTIFICATION_STATUS_READ",
    "NOTIFICATION_STATUS_DISMISSED",
    "NOTIFICATION_STATUSES",
    "Notification",
    "NotificationDraft",
]
