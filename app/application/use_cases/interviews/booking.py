"""Transaction scope shared by every interview mutation."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from app.infrastructure.database import transaction
from app.infrastructure.locking import shelter_booking_lock, touch_shelter_calendar


@contextmanager
def locked_calendar(session: Session, shelter_id: int) -> Iterator[Session]:
    """Serialize changes to ``shelter_id``'s calendar.

    Inside the block the shelter calendar is locked, previously loaded rows
    are expired so reads see committed state, and everything is committed
    on exit before the lock is released.
    """

    with shelter_booking_lock(shelter_id):
        with transaction(session):
            touch_shelter_calendar(session, shelter_id)
            session.expire_all()
            yield session


__all__ = ["locked_calendar"]
