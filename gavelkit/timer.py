"""Periodic timer driven by an unsigned microsecond clock."""

from __future__ import annotations

from time import perf_counter_ns
from typing import Callable, Optional

_ULONG_MASK = (1 << 64) - 1
_MAX_TIME_REMAINING = 1_000_000
_MAX_RETURN_COUNT = 1000


def _micros() -> int:
    return (perf_counter_ns() // 1000) & _ULONG_MASK


class Timer:
    """Counts how many refresh periods have passed since the last expiry.

    A timeout of zero makes every check report one expiry.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or _micros
        self._refresh = self._now()
        self._timeout = 100_000
        self._run = True

    def _now(self) -> int:
        return self._clock() & _ULONG_MASK

    def set_refresh_seconds(self, seconds: int) -> None:
        self._timeout = (seconds * 1_000_000) & _ULONG_MASK

    def set_refresh_milli(self, millis: int) -> None:
        self._timeout = (millis * 1000) & _ULONG_MASK

    def set_refresh_micro(self, micros: int) -> None:
        self._timeout = micros & _ULONG_MASK

    @property
    def refresh_seconds(self) -> int:
        return self._timeout // 1_000_000

    @property
    def refresh_milli(self) -> int:
        return self._timeout // 1000

    @property
    def refresh_micro(self) -> int:
        return self._timeout

    def run_timer(self, run: bool, refresh: Optional[int] = None) -> None:
        """Start or stop the timer and restart its period."""
        self._run = bool(run)
        self.reset(refresh)

    @property
    def running(self) -> bool:
        return self._run

    def expired(self) -> bool:
        """True if at least one period elapsed; catches the timer up."""
        return self.expired_micro(self._now()) > 0

    def expired_milli(self, timestamp: int) -> int:
        return self.expired_micro(timestamp * 1000)

    def expired_micro(self, timestamp: int) -> int:
        """Number of whole periods elapsed by ``timestamp``, advancing past them.

        After more than 1000 periods the timer restarts from ``timestamp``.
        """
        timestamp &= _ULONG_MASK
        if self._timeout == 0:
            return 1
        count = 0
        while self._run and ((timestamp - self._refresh) & _ULONG_MASK) >= self._timeout:
            self._refresh = (self._refresh + self._timeout) & _ULONG_MASK
            count += 1
            if count > _MAX_RETURN_COUNT:
                self.reset(timestamp)
        return count

    def time_remaining_second(self) -> int:
        return self.time_remaining_milli() // 1000

    def time_remaining_milli(self) -> int:
        return self.time_remaining_micro() // 1000

    def time_remaining_micro(self) -> int:
        """Microseconds to the next expiry, capped at one second."""
        now = self._now()
        remaining = _MAX_TIME_REMAINING
        if self._run:
            pending = (self._timeout - ((now - self._refresh) & _ULONG_MASK)) & _ULONG_MASK
            remaining = min(remaining, pending)
        return remaining

    def reset(self, refresh: Optional[int] = None) -> None:
        self._refresh = self._now() if refresh is None else refresh & _ULONG_MASK

    @property
    def last_expired(self) -> int:
        return self._refresh