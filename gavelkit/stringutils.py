"""Bounded string helpers with C-string semantics: text ends at the first NUL."""

from __future__ import annotations

from typing import Optional, Sequence, Union

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

MAX_TAB_LENGTH = 32
_C_WHITESPACE = " \t\n\v\f\r"
_ULONG_MASK = (1 << 64) - 1

Text = Union[str, bytes]


def _c_str(text: str) -> str:
    """The part of ``text`` before the first NUL."""
    return text.split("\0", 1)[0]


def is_valid_c_string(data: Optional[Text], max_len: int = 256) -> bool:
    """True if ``data`` ends (at a NUL or at its end) within ``max_len`` characters."""
    if data is None:
        return False
    nul = "\0" if isinstance(data, str) else b"\0"
    end = data.find(nul)
    if end < 0:
        end = len(data)
    return end < max_len


def safe_compare(string1: Optional[str], string2: Optional[str]) -> int:
    """Compare two strings: negative, zero or positive.

    An invalid first string gives INT_MAX; an invalid second one gives INT_MIN.
    """
    if not is_valid_c_string(string1):
        return INT_MAX
    if not is_valid_c_string(string2):
        return INT_MIN
    a, b = _c_str(string1), _c_str(string2)
    return (a > b) - (a < b)


def safe_append(dest: Optional[str], src: Optional[str], dest_size: int) -> Optional[str]:
    """Append ``src`` to ``dest`` so the result fits a buffer of ``dest_size`` (NUL included)."""
    if dest is None or src is None or dest_size == 0:
        return dest
    if dest_size < 0:
        raise ValueError("dest_size must not be negative")
    dest = _c_str(dest)
    if len(dest) >= dest_size:
        dest = dest[: dest_size - 1]
    space_left = dest_size - len(dest) - 1
    if space_left > 0:
        dest += _c_str(src)[:space_left]
    return dest


def tab(tab_length: int, text: Optional[str], size: int) -> Optional[str]:
    """Pad ``text`` with spaces to the next multiple of ``tab_length``.

    The tab width is capped at MAX_TAB_LENGTH and the result fits a buffer of ``size``.
    """
    if text is None or tab_length <= 0 or size <= 0:
        return text
    tab_len = min(tab_length, MAX_TAB_LENGTH)
    text = _c_str(text)
    if len(text) >= size:
        text = text[: size - 1]
    cur_len = len(text)
    remainder = cur_len % tab_len
    spaces = 0 if remainder == 0 else tab_len - remainder
    if spaces + cur_len >= size:
        spaces = size - cur_len - 1
    spaces = max(spaces, 0)
    return text + " " * spaces


def hex_byte_string(value: int) -> str:
    """Two upper-case hex digits for a byte."""
    return f"{value & 0xFF:02X}"


def dec_byte_string(value: int) -> str:
    """Two decimal digits for a byte, capped at 99."""
    return f"{min(value & 0xFF, 99):02d}"


def mac_string(mac: Sequence[int]) -> str:
    """Colon-separated hex form of the first six bytes of ``mac``."""
    if mac is None or len(mac) < 6:
        raise ValueError("a MAC address needs six bytes")
    return ":".join(hex_byte_string(b) for b in mac[:6])


def ip_string(ip: Sequence[int]) -> str:
    """Dotted decimal form of the first four bytes of ``ip``."""
    if ip is None or len(ip) < 4:
        raise ValueError("an IPv4 address needs four bytes")
    return ".".join(str(b & 0xFF) for b in ip[:4])


def time_string(seconds: int) -> str:
    """Format a second count as H:MM:SS."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    seconds &= _ULONG_MASK
    hours = seconds // 3600
    minutes = dec_byte_string((seconds // 60) % 60)
    secs = dec_byte_string(seconds % 60)
    return f"{hours}:{minutes}:{secs}"


def trim_whitespace(text: Optional[str]) -> Optional[str]:
    """Strip leading and trailing C whitespace."""
    if text is None:
        return None
    return _c_str(text).strip(_C_WHITESPACE)


def num_to_a(n: Union[int, float], size: Optional[int] = None) -> str:
    """Decimal text for ``n``; floats get one decimal place.

    With ``size`` the text is cut to fit a buffer of that many bytes, NUL included.
    """
    if isinstance(n, float):
        text = "%0.1f" % n
    elif isinstance(n, int):
        text = "%d" % n
    else:
        raise TypeError(f"cannot format {type(n).__name__} as a number")
    if size is None:
        return text
    if size <= 0:
        return ""
    return text[: size - 1]