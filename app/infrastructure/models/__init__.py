"""ORM models used by the application infrastructure."""

from .shelter import PetModel, ShelterModel
from .application import ApplicationModel
from .interview import InterviewModel
from .notification import NotificationModel
from .calendar_lock import ShelterCalendarLockModel

__all__ = [
    "ShelterModel",
    "PetModel",
    "ApplicationModel",
    "InterviewModel",
    "NotificationModel",
    "ShelterCalendarLockModel",
]
