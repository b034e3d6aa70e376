"""Thread-safe bounded FIFO queues."""

from __future__ import annotations

from typing import Any

from gavelkit.datastructure import ClassicQueue
from gavelkit.lock import Lock, Mutex, SemLock


class MutexQueue:
    """A ClassicQueue whose every operation runs under a mutex."""

    _lock_type: type = Mutex

    def __init__(self, capacity: int) -> None:
        self._lock: Lock = self._lock_type()
        self._queue = ClassicQueue(capacity)

    def push(self, element: Any) -> None:
        with self._lock:
            self._queue.push(element)

    def pop(self) -> Any:
        with self._lock:
            return self._queue.pop()

    def get(self, index: int) -> Any:
        with self._lock:
            return self._queue.get(index)

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)

    def high_water_mark(self) -> int:
        with self._lock:
            return self._queue.high_water_mark()

    def clear(self) -> None:
        with self._lock:
            self._queue.clear()

    def error(self) -> bool:
        with self._lock:
            return self._queue.error()

    def full(self) -> bool:
        with self._lock:
            return self._queue.full()

    def empty(self) -> bool:
        with self._lock:
            return self._queue.empty()


class SemQueue(MutexQueue):
    """A ClassicQueue guarded by a binary semaphore instead of a mutex."""

    _lock_type = SemLock