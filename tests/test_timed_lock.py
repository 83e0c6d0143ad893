import threading
from datetime import timedelta

import pytest

from isokf.timed_lock import TimedLockGuard


def test_try_lock_on_free_lock_succeeds_and_exit_releases():
    lock = threading.Lock()
    guard = TimedLockGuard(lock, 10)
    assert guard.try_lock() is True
    assert lock.locked()
    guard.__exit__(None, None, None)
    assert not lock.locked()
    assert guard.locked is False


def test_try_lock_on_held_lock_times_out():
    lock = threading.Lock()
    lock.acquire()
    try:
        guard = TimedLockGuard(lock, 5)
        assert guard.try_lock() is False
        assert guard.locked is False
    finally:
        lock.release()


def test_context_manager_holds_and_releases():
    lock = threading.Lock()
    with TimedLockGuard(lock, timedelta(milliseconds=10)) as guard:
        assert lock.locked()
        assert guard.locked is True
    assert not lock.locked()


def test_context_manager_raises_when_lock_busy():
    lock = threading.Lock()
    lock.acquire()
    try:
        with pytest.raises(TimeoutError):
            with TimedLockGuard(lock, 5):
                pass
        assert lock.locked()
    finally:
        lock.release()


def test_failed_guard_does_not_release_foreign_lock():
    lock = threading.Lock()
    lock.acquire()
    guard = TimedLockGuard(lock, 1)
    guard.try_lock()
    guard.__exit__(None, None, None)
    assert lock.locked()
    lock.release()


def test_negative_timeout_rejected():
    with pytest.raises(ValueError):
        TimedLockGuard(threading.Lock(), -1)