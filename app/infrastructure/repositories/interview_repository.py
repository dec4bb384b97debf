"""Persistence layer for interviews."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from sqlalchemy.orm import Session

from app.domain.entities import ACTIVE_INTERVIEW_STATUSES, Interview
from app.infrastructure.models import InterviewModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class InterviewRepository:
    """Provide CRUD operations for :class:`Interview` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, interview_id: int) -> Interview | None:
        model = self.session.get(InterviewModel, interview_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list_active_for_shelter_on(self, shelter_id: int, day: date) -> Sequence[Interview]:
        """Return the active interviews occupying ``day`` on the shelter calendar."""

        query = (
            self.session.query(InterviewModel)
            .filter(InterviewModel.shelter_id == shelter_id)
            .filter(InterviewModel.scheduled_date == day)
            .filter(InterviewModel.status.in_(tuple(ACTIVE_INTERVIEW_STATUSES)))
            .order_by(InterviewModel.scheduled_time.asc(), InterviewModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list(
        self,
        *,
        shelter_id: int | None = None,
        adopter_id: int | None = None,
        application_id: int | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        statuses: Sequence[str] | None = None,
        interview_type: str | None = None,
    ) -> Sequence[Interview]:
        query = self.session.query(InterviewModel)
        if shelter_id is not None:
            query = query.filter(InterviewModel.shelter_id == shelter_id)
        if adopter_id is not None:
            query = query.filter(InterviewModel.adopter_id == adopter_id)
        if application_id is not None:
            query = query.filter(InterviewModel.application_id == application_id)
        if start_date is not None:
            query = query.filter(InterviewModel.scheduled_date >= start_date)
        if end_date is not None:
            query = query.filter(InterviewModel.scheduled_date <= end_date)
        if statuses:
            query = query.filter(InterviewModel.status.in_(tuple(statuses)))
        if interview_type is not None:
            query = query.filter(InterviewModel.type == interview_type)
        query = query.order_by(
            InterviewModel.scheduled_date.asc(),
            InterviewModel.scheduled_time.asc(),
            InterviewModel.id.asc(),
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, interview: Interview) -> Interview:
        model = InterviewModel()
        self._apply_entity_to_model(model, interview)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def update(self, interview: Interview) -> Interview:
        if interview.id is None:
            raise ValueError("Interview id is required for updates")
        model = self.session.get(InterviewModel, interview.id)
        if model is None:
            raise ValueError(f"Interview with id {interview.id} not found")
        self._apply_entity_to_model(model, interview)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: InterviewModel, interview: Interview) -> None:
        model.application_id = interview.application_id
        model.shelter_id = interview.shelter_id
        model.adopter_id = interview.adopter_id
        model.type = interview.type
        model.status = interview.status
        model.scheduled_date = interview.scheduled_date
        model.scheduled_time = interview.scheduled_time
        model.duration_minutes = interview.duration_minutes
        model.location = interview.location
        model.notes = interview.notes
        model.shelter_notes = interview.shelter_notes
        model.adopter_response = interview.adopter_response
        model.adopter_response_notes = interview.adopter_response_notes
        model.responded_at = ensure_app_naive_datetime(interview.responded_at)

    @staticmethod
    def _to_entity(model: InterviewModel) -> Interview:
        return Interview(
            id=model.id,
            application_id=model.application_id,
            shelter_id=model.shelter_id,
            adopter_id=model.adopter_id,
            type=model.type,
            status=model.status,
            scheduled_date=model.scheduled_date,
            scheduled_time=model.scheduled_time,
            duration_minutes=model.duration_minutes,
            location=model.location,
            notes=model.notes,
            shelter_notes=model.shelter_notes,
            adopter_response=model.adopter_response,
            adopter_response_notes=model.adopter_response_notes,
            responded_at=ensure_app_timezone(model.responded_at),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["InterviewRepository"]
