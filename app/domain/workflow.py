"""Adoption application lifecycle.

The transition table is the single source of truth for which status an
application may move to next. Actor checks (adopter vs. shelter) live in the
use cases; this module only answers "is this move legal".
"""

from __future__ import annotations

from app.domain.entities import (
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
    SCHEDULED_APPLICATION_STATUSES,
    TERMINAL_APPLICATION_STATUSES,
)
from app.domain.errors import InvalidTransition

INITIAL_STATUS = APPLICATION_STATUS_DRAFT

# Booking another engagement while one is already scheduled moves the
# application between the ``*_scheduled`` states (including staying put).
TRANSITIONS: dict[str, frozenset[str]] = {
    APPLICATION_STATUS_DRAFT: frozenset(
        {APPLICATION_STATUS_SUBMITTED, APPLICATION_STATUS_WITHDRAWN}
    ),
    APPLICATION_STATUS_SUBMITTED: frozenset(
        {APPLICATION_STATUS_UNDER_REVIEW, APPLICATION_STATUS_WITHDRAWN}
    ),
    APPLICATION_STATUS_UNDER_REVIEW: SCHEDULED_APPLICATION_STATUSES
    | {APPLICATION_STATUS_PENDING_APPROVAL, APPLICATION_STATUS_WITHDRAWN},
    APPLICATION_STATUS_INTERVIEW_SCHEDULED: SCHEDULED_APPLICATION_STATUSES
    | {
        APPLICATION_STATUS_UNDER_REVIEW,
        APPLICATION_STATUS_PENDING_APPROVAL,
        APPLICATION_STATUS_WITHDRAWN,
    },
    APPLICATION_STATUS_MEET_GREET_SCHEDULED: SCHEDULED_APPLICATION_STATUSES
    | {
        APPLICATION_STATUS_UNDER_REVIEW,
        APPLICATION_STATUS_PENDING_APPROVAL,
        APPLICATION_STATUS_WITHDRAWN,
    },
    APPLICATION_STATUS_HOME_VISIT_SCHEDULED: SCHEDULED_APPLICATION_STATUSES
    | {
        APPLICATION_STATUS_UNDER_REVIEW,
        APPLICATION_STATUS_PENDING_APPROVAL,
        APPLICATION_STATUS_WITHDRAWN,
    },
    APPLICATION_STATUS_PENDING_APPROVAL: frozenset(
        {
            APPLICATION_STATUS_APPROVED,
            APPLICATION_STATUS_REJECTED,
            APPLICATION_STATUS_WITHDRAWN,
        }
    ),
    APPLICATION_STATUS_APPROVED: frozenset(),
    APPLICATION_STATUS_REJECTED: frozenset(),
    APPLICATION_STATUS_WITHDRAWN: frozenset(),
}

# Targets a shelter may request through ``ReviewApplication``. The
# ``*_scheduled`` states are only entered by booking an interview.
REVIEW_TARGETS = frozenset(
    {
        APPLICATION_STATUS_UNDER_REVIEW,
        APPLICATION_STATUS_PENDING_APPROVAL,
        APPLICATION_STATUS_APPROVED,
        APPLICATION_STATUS_REJECTED,
    }
)
DECISION_STATUSES = frozenset({APPLICATION_STATUS_APPROVED, APPLICATION_STATUS_REJECTED})

# Statuses from which an application still blocks a new one for the same pair.
BLOCKING_STATUSES = frozenset(APPLICATION_STATUSES) - TERMINAL_APPLICATION_STATUSES


def is_terminal(status: str) -> bool:
    return status in TERMINAL_APPLICATION_STATUSES


def allowed_transitions(status: str) -> frozenset[str]:
    """Return the statuses reachable in one step from ``status``."""

    try:
        return TRANSITIONS[status]
    except KeyError as exc:
        raise InvalidTransition(
            f"Unknown application status '{status}'", current_status=status
        ) from exc


def can_transition(current: str, target: str) -> bool:
    if current not in TRANSITIONS or target not in TRANSITIONS:
        return False
    return target in TRANSITIONS[current]


def ensure_transition(current: str, target: str) -> None:
    """Raise :class:`InvalidTransition` unless ``current -> target`` is allowed."""

    if target not in TRANSITIONS:
        raise InvalidTransition(
            f"Unknown application status '{target}'",
            current_status=current,
            target_status=target,
        )
    if is_terminal(current):
        raise InvalidTransition(
            f"Application is already {current} and can no longer change",
            current_status=current,
            target_status=target,
        )
    if target not in allowed_transitions(current):
        raise InvalidTransition(
            f"Cannot move application from {current} to {target}",
            current_status=current,
            target_status=target,
        )


def status_after_decline(current: str) -> str | None:
    """Return the status an application falls back to after a declined interview.

    Only applications still in review or at an interview stage go back to
    ``under_review``. For any other status ``None`` is returned and the
    application is left as it is.
    """

    if current == APPLICATION_STATUS_UNDER_REVIEW or current in SCHEDULED_APPLICATION_STATUSES:
        return APPLICATION_STATUS_UNDER_REVIEW
    return None


__all__ = [
    "INITIAL_STATUS",
    "TRANSITIONS",
    "REVIEW_TARGETS",
    "DECISION_STATUSES",
    "BLOCKING_STATUSES",
    "is_terminal",
    "allowed_transitions",
    "can_transition",
    "ensure_transition",
    "status_after_decline",
]
