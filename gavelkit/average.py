"""Exponential moving average in Q15 fixed point."""

from __future__ import annotations

import struct

_Q15_ONE = 32768
_U32_MASK = 0xFFFFFFFF


def _f32(x: float) -> float:
    return struct.unpack("<f", struct.pack("<f", x))[0]


def _i32(x: int) -> int:
    x &= _U32_MASK
    return x - (1 << 32) if x & 0x80000000 else x


class Average:
    """Running average with smoothing factor 2 / (window_size + 1)."""

    def __init__(self, window_size: int = 1000) -> None:
        self._avg = 0
        self._alpha_q15 = 0
        self.set_window_size(window_size)

    def sample(self, value: int) -> None:
        """Fold ``value`` into the average."""
        weighted = _i32(self._alpha_q15 * _i32(value))
        carried = _i32((_Q15_ONE - self._alpha_q15) * self._avg)
        self._avg = _i32(weighted + carried) >> 15

    @property
    def value(self) -> int:
        """The current average as an unsigned 32-bit value."""
        return self._avg & _U32_MASK

    def set_window_size(self, window_size: int) -> None:
        """Change the smoothing window; zero is treated as one."""
        window_size &= _U32_MASK
        if window_size == 0:
            window_size = 1
        alpha = _f32(2.0 / _f32(_f32(float(window_size)) + 1.0))
        self._alpha_q15 = int(_f32(alpha * 32768.0))

    def reset(self) -> None:
        self._avg = 0