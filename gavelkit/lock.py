"""Mutual-exclusion locks with take/give and context-manager use."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod


class Lock(ABC):
    """A lock that is taken and given back; ``with`` does both."""

    @abstractmethod
    def take(self) -> None:
        """Block until the lock is held."""

    @abstractmethod
    def give(self) -> None:
        """Release the lock."""

    def __enter__(self) -> "Lock":
        self.take()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.give()


class Mutex(Lock):
    """Non-recursive mutex."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def take(self) -> None:
        self._lock.acquire()

    def give(self) -> None:
        """Release; raises RuntimeError if the mutex is not held."""
        self._lock.release()


class SemLock(Lock):
    """Binary semaphore starting with one permit."""

    def __init__(self) -> None:
        self._sem = threading.BoundedSemaphore(1)

    def take(self) -> None:
        self._sem.acquire()

    def give(self) -> None:
        """Release; raises RuntimeError if the permit is already available."""
        try:
            self._sem.release()
        except ValueError as exc:
            raise RuntimeError("semaphore released more often than taken") from exc