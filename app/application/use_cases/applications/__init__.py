"""Use cases for adoption applications."""

from .get_application import get_application
from .list_applications import list_applications
from .review_application import review_application
from .save_draft import save_draft
from .submit_application import submit_application
from .withdraw_application import withdraw_application

__all__ = [
    "get_application",
    "list_applications",
    "review_application",
    "save_draft",
    "submit_application",
    "withdraw_application",
]
