"""Per-shelter serialization of interview bookings.

Two layers are combined. A process-local :class:`threading.Lock` per shelter
keeps request threads of one worker from interleaving; a lock lives only
while some booking holds or waits on it. Inside the booking transaction
:func:`touch_shelter_calendar` bumps the shelter's row in
``shelter_calendar_lock``, which makes concurrent transactions from other
workers wait on the database until the first one commits.
"""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.infrastructure.models import ShelterCalendarLockModel

logger = logging.getLogger(__name__)

_registry_guard = threading.Lock()
_shelter_locks: weakref.WeakValueDictionary[int, threading.Lock] = (
    weakref.WeakValueDictionary()
)


def _lock_for(shelter_id: int) -> threading.Lock:
    with _registry_guard:
        lock = _shelter_locks.get(shelter_id)
        if lock is None:
            lock = threading.Lock()
            _shelter_locks[shelter_id] = lock
        return lock


@contextmanager
def shelter_booking_lock(shelter_id: int) -> Iterator[None]:
    """Hold the in-process booking lock of ``shelter_id``.

    The booking transaction must be opened and committed inside this block.
    """

    lock = _lock_for(shelter_id)
    if not lock.acquire(blocking=False):
        logger.debug("Waiting for booking lock of shelter %s", shelter_id)
        lock.acquire()
    try:
        yield
    finally:
        lock.release()


def touch_shelter_calendar(session: Session, shelter_id: int) -> None:
    """Write-lock the shelter calendar row for the rest of the transaction."""

    result = session.execute(
        update(ShelterCalendarLockModel)
        .where(ShelterCalendarLockModel.shelter_id == shelter_id)
        .values(version=ShelterCalendarLockModel.version + 1)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount:
        return

    try:
        with session.begin_nested():
            session.add(ShelterCalendarLockModel(shelter_id=shelter_id, version=1))
    except IntegrityError:
        # Another worker created the row first; queue behind it.
        logger.debug("Calendar lock row for shelter %s created concurrently", shelter_id)
        session.execute(
            update(ShelterCalendarLockModel)
            .where(ShelterCalendarLockModel.shelter_id == shelter_id)
            .values(version=ShelterCalendarLockModel.version + 1)
            .execution_options(synchronize_session=False)
        )


__all__ = ["shelter_booking_lock", "touch_shelter_calendar"]
