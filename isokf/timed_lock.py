"""Scoped lock acquisition with a timeout."""

from __future__ import annotations

from datetime import timedelta


class TimedLockGuard:
    """Acquires a lock within a timeout and releases it when the scope ends.

    ``mutex`` is any object with ``acquire(timeout=...)`` and ``release()``,
    such as :class:`threading.Lock` or :class:`threading.RLock`.
    """

    def __init__(self, mutex, timeout_ms):
        if isinstance(timeout_ms, timedelta):
            timeout_ms = timeout_ms.total_seconds() * 1000.0
        if timeout_ms < 0:
            raise ValueError("timeout must not be negative")
        self._mutex = mutex
        self._timeout_s = float(timeout_ms) / 1000.0
        self._held = False

    @property
    def locked(self) -> bool:
        """Whether this guard currently holds the lock."""
        return self._held

    def try_lock(self) -> bool:
        """Try to acquire the lock within the timeout; return whether it succeeded."""
        if self._mutex.acquire(timeout=self._timeout_s):
            self._held = True
        return self._held

    def _release(self) -> None:
        if self._held:
            self._held = False
            self._mutex.release()

    def __enter__(self) -> "TimedLockGuard":
        if not self._held and not self.try_lock():
            raise TimeoutError("could not acquire the lock within the timeout")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._release()