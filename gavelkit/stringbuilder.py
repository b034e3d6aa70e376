"""Fixed-capacity string builder that silently truncates."""

from __future__ import annotations

from typing import Union

from gavelkit.stringutils import num_to_a

_INT_BUFFER = 32
_FLOAT_BUFFER = 64

Appendable = Union["StringBuilder", str, bytes, bytearray, bool, int, float, None]


class StringBuilder:
    """Accumulates text up to CAPACITY characters; anything beyond is dropped.

    Values are rendered as follows: booleans as ``true``/``false``, integers in
    decimal, floats with one decimal place, and each byte of a ``bytes`` value as
    its decimal code (the way a single character is rendered). Text stops at the
    first NUL.
    """

    STRINGBUILDER_MAX = 120
    CAPACITY = STRINGBUILDER_MAX - 1

    def __init__(self, value: Appendable = None) -> None:
        self._text = ""
        if value is not None:
            self.assign(value)

    @staticmethod
    def _render(value: Appendable) -> str:
        if value is None:
            return ""
        if isinstance(value, StringBuilder):
            return value._text
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            return "".join(str(b) for b in value)
        if isinstance(value, int):
            return num_to_a(value, _INT_BUFFER)
        if isinstance(value, float):
            return num_to_a(value, _FLOAT_BUFFER)
        raise TypeError(f"cannot append {type(value).__name__}")

    def assign(self, value: Appendable) -> "StringBuilder":
        """Replace the contents with ``value``."""
        rendered = self._render(value)
        self.clear()
        return self._append_raw(rendered)

    def append(self, value: Appendable) -> "StringBuilder":
        """Add ``value`` to the end, as far as capacity allows."""
        return self._append_raw(self._render(value))

    def _append_raw(self, text: str) -> "StringBuilder":
        text = text.split("\0", 1)[0]
        self._text += text[: self.remaining]
        return self

    def __iadd__(self, value: Appendable) -> "StringBuilder":
        return self.append(value)

    def __add__(self, value: Appendable) -> "StringBuilder":
        """Append in place and return this builder, so calls can be chained."""
        return self.append(value)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"StringBuilder({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringBuilder):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def clear(self) -> None:
        self._text = ""

    @property
    def capacity(self) -> int:
        return self.CAPACITY

    @property
    def remaining(self) -> int:
        return self.CAPACITY - len(self._text)