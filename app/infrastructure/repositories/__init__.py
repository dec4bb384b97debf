"""Repository implementations for infrastructure layer."""

from .application_repository import ApplicationRepository
from .catalog_repository import PetRepository, ShelterRepository
from .interview_repository import InterviewRepository
from .notification_repository import NotificationRepository

__all__ = [
    "ApplicationRepository",
    "InterviewRepository",
    "NotificationRepository",
    "PetRepository",
    "ShelterRepository",
]
