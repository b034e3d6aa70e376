"""Abstract byte-addressable memory block shared between producer and consumers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from gavelkit.identity import Identifiable


class IMemory(Identifiable, ABC):
    """A fixed-size block of bytes with a flag signalling internal updates."""

    def __init__(self) -> None:
        super().__init__()
        self._updated_internal = False

    @abstractmethod
    def __getitem__(self, index: int) -> int:
        """Return the byte at ``index``."""

    @abstractmethod
    def __setitem__(self, index: int, value: int) -> None:
        """Store ``value`` as the byte at ``index``."""

    @abstractmethod
    def __len__(self) -> int:
        """Total number of bytes."""

    @abstractmethod
    def init_memory(self) -> None:
        """Fill the block with its initial contents."""

    @abstractmethod
    def print_data(self, terminal) -> None:
        """Write a description of the contents to ``terminal``."""

    @abstractmethod
    def update_external(self) -> None:
        """Push the contents to whatever consumes them."""

    @property
    def internal(self) -> bool:
        """True when the owner has updated the memory since the flag was cleared."""
        return self._updated_internal

    @internal.setter
    def internal(self, updated: bool) -> None:
        self._updated_internal = bool(updated)