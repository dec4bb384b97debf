"""Tests for the per-shelter booking lock."""

from __future__ import annotations

import gc
import threading

from app.infrastructure import locking


def test_booking_lock_is_released_after_use() -> None:
    with locking.shelter_booking_lock(4242):
        assert 4242 in locking._shelter_locks

    gc.collect()

    assert 4242 not in locking._shelter_locks


def test_waiting_threads_share_one_lock() -> None:
    entered = threading.Event()
    release = threading.Event()
    order: list[str] = []

    def holder() -> None:
        with locking.shelter_booking_lock(7):
            entered.set()
            release.wait(timeout=5)
            order.append("holder")

    def waiter() -> None:
        entered.wait(timeout=5)
        with locking.shelter_booking_lock(7):
            order.append("waiter")

    threads = [threading.Thread(target=holder), threading.Thread(target=waiter)]
    for thread in threads:
        thread.start()
    entered.wait(timeout=5)
    release.set()
    for thread in threads:
        thread.join(timeout=10)

    assert order == ["holder", "waiter"]
