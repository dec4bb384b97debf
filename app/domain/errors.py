"""Business-rule failures raised by the adoption workflow.

All errors derive from :class:`ValueError` so callers that only care about
"the request was rejected" can keep catching that, while the API layer maps
each subclass to its own status code.
"""

from __future__ import annotations

from typing import Any


class AdoptionWorkflowError(ValueError):
    """Base class for user-visible workflow failures."""

    code = "workflow_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class InvalidTransition(AdoptionWorkflowError):
    code = "invalid_transition"

    def __init__(
        self,
        message: str,
        *,
        current_status: str | None = None,
        target_status: str | None = None,
    ) -> None:
        super().__init__(message)
        self.current_status = current_status
        self.target_status = target_status

    def to_detail(self) -> dict[str, Any]:
        detail = super().to_detail()
        detail["current_status"] = self.current_status
        detail["target_status"] = self.target_status
        return detail


class DuplicateApplication(AdoptionWorkflowError):
    code = "duplicate_application"


class ApplicationIncomplete(AdoptionWorkflowError):
    code = "application_incomplete"

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(
            "Missing required personal information: " + ", ".join(missing_fields)
        )
        self.missing_fields = missing_fields

    def to_detail(self) -> dict[str, Any]:
        detail = super().to_detail()
        detail["missing_fields"] = list(self.missing_fields)
        return detail


class PetUnavailable(AdoptionWorkflowError):
    code = "pet_unavailable"


class SlotConflict(AdoptionWorkflowError):
    """The requested interval overlaps active interviews of the shelter."""

    code = "slot_conflict"

    def __init__(self, conflicts: list[Any]) -> None:
        super().__init__(
            "This time slot conflicts with existing appointments. "
            "Please choose a different time."
        )
        self.conflicts = list(conflicts)

    def to_detail(self) -> dict[str, Any]:
        detail = super().to_detail()
        detail["conflicts"] = [conflict.as_dict() for conflict in self.conflicts]
        return detail


class NotPending(AdoptionWorkflowError):
    code = "not_pending"


class Forbidden(AdoptionWorkflowError):
    code = "forbidden"


class NotFound(AdoptionWorkflowError):
    code = "not_found"


__all__ = [
    "AdoptionWorkflowError",
    "ApplicationIncomplete",
    "DuplicateApplication",
    "Forbidden",
    "InvalidTransition",
    "NotFound",
    "NotPending",
    "PetUnavailable",
    "SlotConflict",
]
