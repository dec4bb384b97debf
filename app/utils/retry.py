"""Bounded retries for idempotent reads against the store."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, TypeVar

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def retry_read(func: Callable[..., T]) -> Callable[..., T]:
    """Retry ``func`` when the store is temporarily unavailable.

    The wrapped callable must take the SQLAlchemy session as its first
    positional argument; the session is rolled back between attempts. Only
    apply this to read-only use cases.
    """

    @wraps(func)
    def wrapper(session: Session, *args, **kwargs) -> T:
        settings = get_settings()
        attempts = settings.read_retry_attempts
        delay = settings.read_retry_delay_seconds

        for attempt in range(1, attempts + 1):
            try:
                return func(session, *args, **kwargs)
            except OperationalError as exc:
                session.rollback()
                if attempt >= attempts:
                    logger.error(
                        "%s failed after %s attempts: %s", func.__name__, attempts, exc
                    )
                    raise
                logger.warning(
                    "%s attempt %s/%s failed: %s. Retrying in %ss",
                    func.__name__,
                    attempt,
                    attempts,
                    exc,
                    delay,
                )
                if delay:
                    time.sleep(delay)
        raise RuntimeError("unreachable")  # pragma: no cover

    return wrapper


__all__ = ["retry_read"]
