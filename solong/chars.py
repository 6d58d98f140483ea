"""ASCII character classification, case conversion and integer/text conversion."""

from __future__ import annotations

import operator

_INT32_RANGE = 1 << 32
_INT32_MAX = (1 << 31) - 1
_SPACE_CODES = frozenset({9, 10, 11, 12, 13, 32})


def _code(c: int | str) -> int:
    """Return the character code of ``c``, a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _like(original: int | str, code: int) -> int | str:
    """Return ``code`` in the same form (str or int) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def _is_lower(code: int) -> bool:
    return 97 <= code <= 122


def _is_upper(code: int) -> bool:
    return 65 <= code <= 90


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; leave anything else as is."""
    code = _code(c)
    return _like(c, code + 32) if _is_upper(code) else c


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; leave anything else as is."""
    code = _code(c)
    return _like(c, code - 32) if _is_lower(code) else c


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps to a signed 32-bit integer.
    """
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _SPACE_CODES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and is_digit(text[pos]):
        result = result * 10 + (ord(text[pos]) - 48)
        pos += 1
    value = (sign * result) % _INT32_RANGE
    return value - _INT32_RANGE if value > _INT32_MAX else value


def itoa(n: int) -> str:
    """Return the decimal text of the integer ``n``."""
    return str(operator.index(n))