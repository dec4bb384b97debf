from .application import (
    ApplicantProfileFields,
    ApplicationRead,
    ApplicationReview,
    ApplicationSubmit,
)
from .interview import (
    AvailabilityRead,
    ConflictRead,
    InterviewCancel,
    InterviewCreate,
    InterviewRead,
    InterviewReschedule,
    InterviewRespond,
    InterviewStatusUpdate,
    TimeSlotRead,
)
from .notification import NotificationRead

__all__ = [
    "ApplicantProfileFields",
    "ApplicationRead",
    "ApplicationReview",
    "ApplicationSubmit",
    "AvailabilityRead",
    "ConflictRead",
    "InterviewCancel",
    "InterviewCreate",
    "InterviewRead",
    "InterviewReschedule",
    "InterviewRespond",
    "InterviewStatusUpdate",
    "TimeSlotRead",
    "NotificationRead",
]
