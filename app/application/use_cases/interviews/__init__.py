"""Use cases for the shelter interview calendar."""

from .get_availability import get_availability
from .list_interviews import get_interview, list_interviews
from .reschedule_interview import reschedule_interview
from .respond_to_interview import respond_to_interview
from .schedule_interview import schedule_interview
from .update_interview_status import cancel_interview, update_interview_status

__all__ = [
    "get_availability",
    "get_interview",
    "list_interviews",
    "reschedule_interview",
    "respond_to_interview",
    "schedule_interview",
    "cancel_interview",
    "update_interview_status",
]
