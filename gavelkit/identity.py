"""Process-wide numeric identifiers for objects."""

from __future__ import annotations

import itertools
import threading

_ID_START = 6000
_ID_MASK = 0xFFFF

_id_lock = threading.Lock()
_id_counter = itertools.count(_ID_START)


def generate_id() -> int:
    """Return the next 16-bit identifier; the sequence starts at 6000."""
    with _id_lock:
        return next(_id_counter) & _ID_MASK


class Identifiable:
    """Base for objects that receive a unique id on creation.

    Instances cannot be copied, so an id is never shared by two objects.
    """

    def __init__(self) -> None:
        self._id = generate_id()

    @property
    def id(self) -> int:
        return self._id

    def override_id(self, new_id: int) -> None:
        """Replace the generated id with a chosen 16-bit value."""
        self._id = new_id & _ID_MASK

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")