"""Aggregate application use cases."""

from .applications import (
    get_application,
    list_applications,
    review_application,
    save_draft,
    submit_application,
    withdraw_application,
)
from .interviews import (
    cancel_interview,
    get_availability,
    get_interview,
    list_interviews,
    reschedule_interview,
    respond_to_interview,
    schedule_interview,
    update_interview_status,
)
from .notifications import (
    dismiss_notification,
    list_notifications,
    mark_notification_read,
    notify,
    send_interview_reminders,
)

__all__ = [
    "get_application",
    "list_applications",
    "review_application",
    "save_draft",
    "submit_application",
    "withdraw_application",
    "cancel_interview",
    "get_availability",
    "get_interview",
    "list_interviews",
    "reschedule_interview",
    "respond_to_interview",
    "schedule_interview",
    "update_interview_status",
    "dismiss_notification",
    "list_notifications",
    "mark_notification_read",
    "notify",
    "send_interview_reminders",
]
