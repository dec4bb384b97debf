"""Domain entities exposed by the application."""

from .application import (
    APPLICATION_STATUS_APPROVED,
    APPLICATION_STATUS_DRAFT,
    APPLICATION_STATUS_HOME_VISIT_SCHEDULED,
    APPLICATION_STATUS_INTERVIEW_SCHEDULED,
    APPLICATION_STATUS_MEET_GREET_SCHEDULED,
    APPLICATION_STATUS_PENDING_APPROVAL,
    APPLICATION_STATUS_REJECTED,
    APPLICATION_STATUS_SUBMITTED,
    APPLICATION_STATUS_UNDER_REVIEW,
    APPLICATION_STATUS_WITHDRAWN,
    APPLICATION_STATUSES,
    REQUIRED_PROFILE_FIELDS,
    SCHEDULED_APPLICATION_STATUSES,
    TERMINAL_APPLICATION_STATUSES,
    ApplicantProfile,
    Application,
)
from .caller import ROLE_ADMIN, ROLE_ADOPTER, ROLE_SHELTER, ROLES, Caller
from .catalog import (
    PET_STATUS_ADOPTED,
    PET_STATUS_AVAILABLE,
    PET_STATUS_PENDING,
    PET_STATUSES,
    Pet,
    Shelter,
)
from .effect import ApplicationStatusUpdate, WorkflowEffect
from .interview import (
    ACTIVE_INTERVIEW_STATUSES,
    INTERVIEW_STATUS_CANCELLED,
    INTERVIEW_STATUS_COMPLETED,
    INTERVIEW_STATUS_CONFIRMED,
    INTERVIEW_STATUS_RESCHEDULED,
    INTERVIEW_STATUS_SCHEDULED,
    INTERVIEW_STATUS_TRANSITIONS,
    INTERVIEW_STATUSES,
    INTERVIEW_TYPE_HOME_VISIT,
    INTERVIEW_TYPE_INTERVIEW,
    INTERVIEW_TYPE_MEET_GREET,
    Interview,
)
from .notification import (
    NOTIFICATION_STATUS_DISMISSED,
    NOTIFICATION_STATUS_PENDING,
    NOTIFICATION_STATUS_READ,
    NOTIFICATION_STATUS_SENT,
    NOTIFICATION_STATUSES,
    NOTIFICATION_TYPE_GENERAL,
    NOTIFICATION_TYPE_INTERVIEW_REMINDER,
    NOTIFICATION_TYPE_INTERVIEW_RESPONSE,
    NOTIFICATION_TYPE_INTERVIEW_SCHEDULED,
    NOTIFICATION_TYPES,
    Notification,
    NotificationDraft,
)

__all__ = [
    "APPLICATION_STATUS_APPROVED",
    "APPLICATION_STATUS_DRAFT",
    "APPLICATION_STATUS_HOME_VISIT_SCHEDULED",
    "APPLICATION_STATUS_INTERVIEW_SCHEDULED",
    "APPLICATION_STATUS_MEET_GREET_SCHEDULED",
    "APPLICATION_STATUS_PENDING_APPROVAL",
    "APPLICATION_STATUS_REJECTED",
    "APPLICATION_STATUS_SUBMITTED",
    "APPLICATION_STATUS_UNDER_REVIEW",
    "APPLICATION_STATUS_WITHDRAWN",
    "APPLICATION_STATUSES",
    "REQUIRED_PROFILE_FIELDS",
    "SCHEDULED_APPLICATION_STATUSES",
    "TERMINAL_APPLICATION_STATUSES",
    "ApplicantProfile",
    "Application",
    "ROLE_ADMIN",
    "ROLE_ADOPTER",
    "ROLE_SHELTER",
    "ROLES",
    "Caller",
    "PET_STATUS_ADOPTED",
    "PET_STATUS_AVAILABLE",
    "PET_STATUS_PENDING",
    "PET_STATUSES",
    "Pet",
    "Shelter",
    "ApplicationStatusUpdate",
    "WorkflowEffect",
    "ACTIVE_INTERVIEW_STATUSES",
    "INTERVIEW_STATUS_CANCELLED",
    "INTERVIEW_STATUS_COMPLETED",
    "INTERVIEW_STATUS_CONFIRMED",
    "INTERVIEW_STATUS_RESCHEDULED",
    "INTERVIEW_STATUS_SCHEDULED",
    "INTERVIEW_STATUS_TRANSITIONS",
    "INTERVIEW_STATUSES",
    "INTERVIEW_TYPE_HOME_VISIT",
    "INTERVIEW_TYPE_INTERVIEW",
    "INTERVIEW_TYPE_MEET_GREET",
    "Interview",
    "NOTIFICATION_STATUS_DISMISSED",
    "NOTIFICATION_STATUS_PENDING",
    "NOTIFICATION_STATUS_READ",
    "NOTIFICATION_STATUS_SENT",
    "NOTIFICATION_STATUSES",
    "NOTIFICATION_TYPE_GENERAL",
    "NOTIFICATION_TYPE_INTERVIEW_REMINDER",
    "NOTIFICATION_TYPE_INTERVIEW_RESPONSE",
    "NOTIFICATION_TYPE_INTERVIEW_SCHEDULED",
    "NOTIFICATION_TYPES",
    "Notification",
    "NotificationDraft",
]
