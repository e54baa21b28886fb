"""String helpers and C-locale character classification."""

from __future__ import annotations

__all__ = [
    "streq",
    "strstarts",
    "strends",
    "strcount",
    "str_max_chars",
    "cisalnum",
    "cisalpha",
    "cisascii",
    "cisblank",
    "ciscntrl",
    "cisdigit",
    "cisgraph",
    "cislower",
    "cisprint",
    "cispunct",
    "cisspace",
    "cisupper",
    "cisxdigit",
]

_CHAR_BIT = 8


def streq(a: str, b: str) -> bool:
    """Return whether two strings are equal."""
    return a == b


def strstarts(s: str, prefix: str) -> bool:
    """Return whether ``s`` begins with ``prefix``."""
    return s.startswith(prefix)


def strends(s: str, postfix: str) -> bool:
    """Return whether ``s`` ends with ``postfix``."""
    return s.endswith(postfix)


def strcount(haystack: str, needle: str) -> int:
    """Count the non-overlapping occurrences of ``needle`` in ``haystack``."""
    if not needle:
        raise ValueError("needle must not be empty")
    return haystack.count(needle)


def str_max_chars(nbytes: int) -> int:
    """Return a buffer size large enough for any number of an ``nbytes``-wide type.

    The size includes the terminator and leaves room for a sign or hex form.
    """
    if nbytes <= 0:
        raise ValueError("type size must be positive")
    return (nbytes * _CHAR_BIT + 8) // 9 * 3 + 2


def _byte(c: str | bytes | bytearray | int) -> int:
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single byte, got {len(c)}")
        return c[0]
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        code = ord(c)
        if code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in a byte")
        return code
    if isinstance(c, int):
        return c & 0xFF
    raise TypeError(f"expected a character or byte value, got {type(c).__name__}")


def _isupper(b: int) -> bool:
    return 0x41 <= b <= 0x5A


def _islower(b: int) -> bool:
    return 0x61 <= b <= 0x7A


def _isdigit(b: int) -> bool:
    return 0x30 <= b <= 0x39


def _isgraph(b: int) -> bool:
    return 0x21 <= b <= 0x7E


def cisalnum(c) -> bool:
    """Letter or digit."""
    b = _byte(c)
    return _isupper(b) or _islower(b) or _isdigit(b)


def cisalpha(c) -> bool:
    """ASCII letter."""
    b = _byte(c)
    return _isupper(b) or _islower(b)


def cisascii(c) -> bool:
    """Seven-bit value."""
    return _byte(c) < 0x80


def cisblank(c) -> bool:
    """Space or horizontal tab."""
    return _byte(c) in (0x20, 0x09)


def ciscntrl(c) -> bool:
    """Control character."""
    b = _byte(c)
    return b < 0x20 or b == 0x7F


def cisdigit(c) -> bool:
    """Decimal digit."""
    return _isdigit(_byte(c))


def cisgraph(c) -> bool:
    """Printable character other than space."""
    return _isgraph(_byte(c))


def cislower(c) -> bool:
    """Lower-case letter."""
    return _islower(_byte(c))


def cisprint(c) -> bool:
    """Printable character, space included."""
    return 0x20 <= _byte(c) <= 0x7E


def cispunct(c) -> bool:
    """Printable character that is neither a space nor alphanumeric."""
    b = _byte(c)
    return _isgraph(b) and not (_isupper(b) or _islower(b) or _isdigit(b))


def cisspace(c) -> bool:
    """White space: space, tab, newline, vertical tab, form feed, carriage return."""
    b = _byte(c)
    return b == 0x20 or 0x09 <= b <= 0x0D


def cisupper(c) -> bool:
    """Upper-case letter."""
    return _isupper(_byte(c))


def cisxdigit(c) -> bool:
    """Hexadecimal digit."""
    b = _byte(c)
    return _isdigit(b) or 0x41 <= b <= 0x46 or 0x61 <= b <= 0x66