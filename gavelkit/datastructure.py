"""Bounded queue, stack and sortable list with sticky error flags."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from functools import cmp_to_key
from typing import Any, Callable, MutableSequence, Optional

Comparator = Callable[[Any, Any], int]


class ListFullError(Exception):
    """Raised when pushing onto a list that is at capacity."""


class ListEmptyError(IndexError):
    """Raised when popping from an empty list."""


class ClassicList(ABC):
    """A container of fixed capacity.

    Every failed operation raises and also sets an error flag that stays set
    until ``clear`` is called.
    """

    def __init__(self, capacity: int, items: MutableSequence[Any]) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items = items
        self._hwm = 0
        self._list_error = False

    def _fail(self, exc: Exception) -> Exception:
        self._list_error = True
        return exc

    def push(self, element: Any) -> None:
        """Add ``element``; raises ListFullError when at capacity."""
        if self.full():
            raise self._fail(ListFullError("list is full"))
        self._items.append(element)
        self._hwm = max(self._hwm, len(self._items))

    def pop(self) -> Any:
        """Remove and return the next element; raises ListEmptyError when empty."""
        if self.empty():
            raise self._fail(ListEmptyError("list is empty"))
        return self._take()

    @abstractmethod
    def _take(self) -> Any:
        """Remove and return the element this kind of list hands out next."""

    def get(self, index: int) -> Any:
        """Return the element at ``index`` without removing it."""
        if not 0 <= index < len(self._items):
            raise self._fail(IndexError(f"index {index} out of range"))
        return self._items[index]

    def clear(self) -> None:
        """Remove all elements and reset the high water mark and error flag."""
        self._items.clear()
        self._hwm = 0
        self._list_error = False

    def __len__(self) -> int:
        return len(self._items)

    def high_water_mark(self) -> int:
        """Largest element count since the last call; reading resets it."""
        highest = self._hwm
        self._hwm = 0
        return highest

    def full(self) -> bool:
        return len(self._items) == self._capacity

    def empty(self) -> bool:
        return len(self._items) == 0

    def error(self) -> bool:
        """True if any operation has failed since the last ``clear``."""
        return self._list_error


class ClassicQueue(ClassicList):
    """First-in, first-out list; index 0 is the oldest element."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity, deque())

    def _take(self) -> Any:
        return self._items.popleft()


class ClassicStack(ClassicList):
    """Last-in, first-out list; index 0 is the oldest element."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity, [])

    def _take(self) -> Any:
        return self._items.pop()


class ClassicSortList(ClassicStack):
    """Stack that can be sorted in place with a three-way comparator."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._cmp: Optional[Comparator] = None

    def set_sort_function(self, cmp: Optional[Comparator]) -> None:
        """Store the comparator used by ``sort`` when none is given."""
        if cmp is None:
            raise self._fail(ValueError("comparator must not be None"))
        self._cmp = cmp

    def sort(self, cmp: Optional[Comparator] = None) -> None:
        """Sort with ``cmp``, or with the stored comparator if ``cmp`` is None."""
        comparator = cmp if cmp is not None else self._cmp
        if comparator is None:
            raise self._fail(ValueError("no comparator set"))
        if len(self._items) <= 1:
            return
        self._items.sort(key=cmp_to_key(comparator))

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at positions ``i`` and ``j``."""
        count = len(self._items)
        if not (0 <= i < count and 0 <= j < count):
            raise self._fail(IndexError(f"cannot swap {i} and {j} in a list of {count}"))
        if i != j:
            self._items[i], self._items[j] = self._items[j], self._items[i]