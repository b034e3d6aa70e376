"""Microsecond stopwatches, plain and averaging."""

from __future__ import annotations

from time import perf_counter_ns
from typing import Callable, Optional

from gavelkit.average import Average

_ULONG_MASK = (1 << 64) - 1
_LWM_UNSET = 0xFFFFFFFF


def _micros() -> int:
    return (perf_counter_ns() // 1000) & _ULONG_MASK


class StopWatch:
    """Measures the time between ``start`` and ``stop``.

    Times are unsigned microsecond counts; the difference wraps like one.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or _micros
        self._start_time = 0
        self._finish_time = 0

    def start(self, time: Optional[int] = None) -> None:
        self._start_time = (self._clock() if time is None else time) & _ULONG_MASK

    def stop(self, time: Optional[int] = None) -> None:
        self._finish_time = (self._clock() if time is None else time) & _ULONG_MASK

    @property
    def elapsed(self) -> int:
        """Microseconds between the last start and stop."""
        return (self._finish_time - self._start_time) & _ULONG_MASK


class AvgStopWatch(StopWatch):
    """Stopwatch that keeps a running average and low/high water marks."""

    def __init__(self, factor: int = 20, clock: Optional[Callable[[], int]] = None) -> None:
        super().__init__(clock)
        self._average = Average()
        self._average.set_window_size(factor)
        self._lwm = _LWM_UNSET
        self._hwm = 0

    def stop(self, time: Optional[int] = None) -> None:
        super().stop(time)
        measured = super().elapsed
        self._lwm = min(measured, self._lwm)
        self._hwm = max(measured, self._hwm)
        self._average.sample(measured)

    @property
    def elapsed(self) -> int:
        """The averaged measurement."""
        return self._average.value

    def low_water_mark(self) -> int:
        """Shortest measurement since the last call (0 if none), then reset."""
        lowest = 0 if self._lwm == _LWM_UNSET else self._lwm
        self._lwm = _LWM_UNSET
        return lowest

    def high_water_mark(self) -> int:
        """Longest measurement since the last call, then reset."""
        highest = self._hwm
        self._hwm = 0
        return highest