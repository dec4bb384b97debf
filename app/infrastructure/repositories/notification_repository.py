"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import (
    NOTIFICATION_STATUS_PENDING,
    Notification,
    NotificationDraft,
)
from app.infrastructure.models import NotificationModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list_for_user(
        self,
        user_id: int,
        *,
        status: str | None = None,
        notification_type: str | None = None,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.recipient_id == user_id)
        if status is not None:
            query = query.filter(NotificationModel.status == status)
        if notification_type is not None:
            query = query.filter(NotificationModel.type == notification_type)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, draft: NotificationDraft) -> Notification:
        model = NotificationModel(
            recipient_id=draft.recipient_id,
            type=draft.type,
            status=NOTIFICATION_STATUS_PENDING,
            title=draft.title,
            message=draft.message,
            payload=dict(draft.metadata or {}),
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def update_status(
        self,
        notification_id: int,
        status: str,
        *,
        read_at: datetime | None = None,
    ) -> Notification:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            msg = f"Notification with id {notification_id} not found"
            raise ValueError(msg)
        model.status = status
        if read_at is not None and model.read_at is None:
            model.read_at = ensure_app_naive_datetime(read_at)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def exists_for_interview(
        self, *, user_id: int, interview_id: int, notification_type: str
    ) -> bool:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.recipient_id == user_id)
            .filter(NotificationModel.type == notification_type)
        )
        for model in query.all():
            payload = model.payload or {}
            try:
                payload_interview_id = int(payload.get("interview_id"))
            except (TypeError, ValueError):
                continue
            if payload_interview_id == interview_id:
                return True
        return False

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            type=model.type,
            status=model.status,
            title=model.title,
            message=model.message,
            metadata=dict(model.payload or {}),
            read_at=ensure_app_timezone(model.read_at),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationRepository"]
