"""A list of zero-argument callables fired together."""

from __future__ import annotations

from typing import Callable


class Callback:
    """Holds callables and invokes them in the order they were added."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], object]] = []

    def add_callback(self, cb: Callable[[], object]) -> None:
        """Register a function or lambda taking no arguments."""
        if not callable(cb):
            raise TypeError("callback must be callable")
        self._callbacks.append(cb)

    def trigger(self) -> None:
        """Call every registered callback in registration order."""
        for cb in self._callbacks:
            cb()

    def clear_callbacks(self) -> None:
        """Forget every registered callback."""
        self._callbacks.clear()

    def __len__(self) -> int:
        return len(self._callbacks)