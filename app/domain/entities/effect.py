"""Cross-entity side effects produced by workflow planners."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from .notification import NotificationDraft


@dataclass(frozen=True)
class ApplicationStatusUpdate:
    """Compare-and-set of an application status.

    ``expected_status`` is the status the planner observed; the update only
    applies if the stored application still has it.
    """

    application_id: int
    expected_status: str
    target_status: str
    reviewed_at: datetime | None = None
    reviewer_notes: str | None = None
    submitted_at: datetime | None = None

    @property
    def changes_status(self) -> bool:
        return self.expected_status != self.target_status


@dataclass
class WorkflowEffect:
    """Status update and notifications to commit with the primary change."""

    application_update: ApplicationStatusUpdate | None = None
    notifications: list[NotificationDraft] = field(default_factory=list)

    def notify(self, draft: NotificationDraft) -> "WorkflowEffect":
        self.notifications.append(draft)
        return self

    def bind_metadata(self, **metadata: Any) -> "WorkflowEffect":
        """Return a copy whose notifications also reference ``metadata``.

        Used once the primary entity has been flushed and its id is known.
        """

        notifications = [
            replace(draft, metadata={**draft.metadata, **metadata})
            for draft in self.notifications
        ]
        return WorkflowEffect(
            application_update=self.application_update, notifications=notifications
        )


__all__ = ["ApplicationStatusUpdate", "WorkflowEffect"]
