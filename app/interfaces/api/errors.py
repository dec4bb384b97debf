"""Translate workflow errors into HTTP responses."""

from __future__ import annotations

from fastapi import HTTPException, status

from app.domain.errors import (
    AdoptionWorkflowError,
    ApplicationIncomplete,
    DuplicateApplication,
    Forbidden,
    InvalidTransition,
    NotFound,
    NotPending,
    PetUnavailable,
    SlotConflict,
)

_STATUS_BY_ERROR: tuple[tuple[type[AdoptionWorkflowError], int], ...] = (
    (NotFound, status.HTTP_404_NOT_FOUND),
    (Forbidden, status.HTTP_403_FORBIDDEN),
    (InvalidTransition, status.HTTP_409_CONFLICT),
    (DuplicateApplication, status.HTTP_409_CONFLICT),
    (SlotConflict, status.HTTP_409_CONFLICT),
    (NotPending, status.HTTP_409_CONFLICT),
    (PetUnavailable, status.HTTP_409_CONFLICT),
    (ApplicationIncomplete, status.HTTP_400_BAD_REQUEST),
)


def to_http_exception(exc: ValueError) -> HTTPException:
    """Return the ``HTTPException`` matching ``exc``.

    Plain ``ValueError`` from input parsing becomes a 400.
    """

    if isinstance(exc, AdoptionWorkflowError):
        for error_type, status_code in _STATUS_BY_ERROR:
            if isinstance(exc, error_type):
                return HTTPException(status_code=status_code, detail=exc.to_detail())
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.to_detail())
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"code": "invalid_request", "message": str(exc)},
    )


__all__ = ["to_http_exception"]
