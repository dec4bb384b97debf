"""Persistence layer for adoption applications."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.domain.entities import ApplicantProfile, Application
from app.infrastructure.models import ApplicationModel, PetModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_naive_datetime


class ApplicationRepository:
    """Provide CRUD operations for :class:`Application` objects.

    Methods flush but never commit; the calling use case owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, application_id: int) -> Application | None:
        model = self.session.get(ApplicationModel, application_id)
        if model is None:
            return None
        return self._to_entity(model)

    def get_open_for_pair(self, *, pet_id: int, adopter_id: int) -> Application | None:
        """Return the non-terminal application for the pair, if any."""

        model = (
            self.session.query(ApplicationModel)
            .filter(ApplicationModel.pet_id == pet_id)
            .filter(ApplicationModel.adopter_id == adopter_id)
            .filter(ApplicationModel.status.notin_(("withdrawn", "approved", "rejected")))
            .order_by(ApplicationModel.id.desc())
            .first()
        )
        if model is None:
            return None
        return self._to_entity(model)

    def list(
        self,
        *,
        adopter_id: int | None = None,
        shelter_id: int | None = None,
        status: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Sequence[Application]:
        query = self.session.query(ApplicationModel)
        if shelter_id is not None:
            query = query.join(PetModel, PetModel.id == ApplicationModel.pet_id).filter(
                PetModel.shelter_id == shelter_id
            )
        if adopter_id is not None:
            query = query.filter(ApplicationModel.adopter_id == adopter_id)
        if status is not None:
            query = query.filter(ApplicationModel.status == status)
        query = query.order_by(ApplicationModel.created_at.desc(), ApplicationModel.id.desc())
        return [self._to_entity(model) for model in query.offset(skip).limit(limit).all()]

    def create(self, application: Application) -> Application:
        model = ApplicationModel(
            pet_id=application.pet_id,
            adopter_id=application.adopter_id,
        )
        self._apply_entity_to_model(model, application)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def update_profile(self, application_id: int, profile: ApplicantProfile) -> Application:
        model = self.session.get(ApplicationModel, application_id)
        if model is None:
            raise ValueError(f"Application with id {application_id} not found")
        self._apply_profile_to_model(model, profile)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def transition_status(
        self,
        application_id: int,
        *,
        expected_status: str,
        target_status: str,
        reviewed_at: datetime | None = None,
        reviewer_notes: str | None = None,
        submitted_at: datetime | None = None,
    ) -> bool:
        """Move the application to ``target_status`` only if it is still ``expected_status``.

        Returns ``False`` when another writer changed the status first.
        """

        values: dict = {
            "status": target_status,
            "updated_at": now_in_app_naive_datetime(),
        }
        if reviewed_at is not None:
            values["reviewed_at"] = ensure_app_naive_datetime(reviewed_at)
        if reviewer_notes is not None:
            values["reviewer_notes"] = reviewer_notes
        if submitted_at is not None:
            values["submitted_at"] = ensure_app_naive_datetime(submitted_at)

        result = self.session.execute(
            update(ApplicationModel)
            .where(ApplicationModel.id == application_id)
            .where(ApplicationModel.status == expected_status)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        self.session.expire_all()
        return result.rowcount == 1

    @staticmethod
    def _apply_profile_to_model(model: ApplicationModel, profile: ApplicantProfile) -> None:
        for name in ApplicantProfile.field_names():
            value = getattr(profile, name)
            if name == "agreements":
                value = list(value or [])
            setattr(model, name, value)

    @classmethod
    def _apply_entity_to_model(cls, model: ApplicationModel, application: Application) -> None:
        model.status = application.status
        cls._apply_profile_to_model(model, application.profile)
        model.submitted_at = ensure_app_naive_datetime(application.submitted_at)
        model.reviewed_at = ensure_app_naive_datetime(application.reviewed_at)
        model.reviewer_notes = application.reviewer_notes

    @staticmethod
    def _to_entity(model: ApplicationModel) -> Application:
        profile_values = {
            name: getattr(model, name) for name in ApplicantProfile.field_names()
        }
        profile_values["agreements"] = list(model.agreements or [])
        return Application(
            id=model.id,
            pet_id=model.pet_id,
            adopter_id=model.adopter_id,
            status=model.status,
            profile=ApplicantProfile(**profile_values),
            submitted_at=ensure_app_timezone(model.submitted_at),
            reviewed_at=ensure_app_timezone(model.reviewed_at),
            reviewer_notes=model.reviewer_notes,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ApplicationRepository"]
