"""Utilities for polling loops: bounded containers, locks, timers, stopwatches, callbacks and string helpers."""

__version__ = "0.1.0"

__all__ = [
    "average",
    "callback",
    "communication",
    "datastructure",
    "identity",
    "imemory",
    "lock",
    "parameter",
    "stopwatch",
    "stringbuilder",
    "stringutils",
    "timer",
]