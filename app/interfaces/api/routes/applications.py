"""Routes for adoption applications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.applications import (
    get_application as get_application_uc,
    list_applications as list_applications_uc,
    review_application as review_application_uc,
    save_draft as save_draft_uc,
    submit_application as submit_application_uc,
    withdraw_application as withdraw_application_uc,
)
from app.domain.entities import Caller
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_caller
from app.interfaces.api.errors import to_http_exception
from app.interfaces.api.schemas import ApplicationRead, ApplicationReview, ApplicationSubmit

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("/draft", response_model=ApplicationRead)
def save_draft(
    payload: ApplicationSubmit,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> ApplicationRead:
    """Create or update the caller's draft for a pet."""

    try:
        application = save_draft_uc(
            db, caller, pet_id=payload.pet_id, profile=payload.profile_updates()
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ApplicationRead.from_entity(application)


@router.post("/", response_model=ApplicationRead, status_code=status.HTTP_201_CREATED)
def submit_application(
    payload: ApplicationSubmit,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> ApplicationRead:
    """Submit an application, promoting the caller's draft when there is one."""

    try:
        application = submit_application_uc(
            db, caller, pet_id=payload.pet_id, profile=payload.profile_updates()
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ApplicationRead.from_entity(application)


@router.get("/", response_model=list[ApplicationRead])
def list_applications(
    status_filter: str | None = Query(default=None, alias="status"),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=500),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> list[ApplicationRead]:
    applications = list_applications_uc(
        db, caller, status=status_filter, skip=skip, limit=limit
    )
    return [ApplicationRead.from_entity(application) for application in applications]


@router.get("/{application_id}", response_model=ApplicationRead)
def read_application(
    application_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> ApplicationRead:
    try:
        application = get_application_uc(db, caller, application_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ApplicationRead.from_entity(application)


@router.patch("/{application_id}", response_model=ApplicationRead)
def review_application(
    application_id: int,
    payload: ApplicationReview,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> ApplicationRead:
    """Shelter review step: start review, request approval, approve or reject."""

    try:
        application = review_application_uc(
            db,
            caller,
            application_id,
            status=payload.status,
            reviewer_notes=payload.reviewer_notes,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ApplicationRead.from_entity(application)


@router.post("/{application_id}/withdraw", response_model=ApplicationRead)
def withdraw_application(
    application_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> ApplicationRead:
    try:
        application = withdraw_application_uc(db, caller, application_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ApplicationRead.from_entity(application)
