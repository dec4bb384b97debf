"""Use cases for creating and managing user notifications."""

from .list_notifications import list_notifications
from .notify import dispatch_notifications, notify
from .send_interview_reminders import send_interview_reminders
from .update_notification import dismiss_notification, mark_notification_read

__all__ = [
    "dispatch_notifications",
    "notify",
    "list_notifications",
    "mark_notification_read",
    "dismiss_notification",
    "send_interview_reminders",
]
