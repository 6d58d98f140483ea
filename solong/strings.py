"""String helpers with the bounded and character-oriented semantics of the C library."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional

_NUL = "\0"


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")
    return c


def _check_non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def find_char(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``; NUL finds the end; None if absent."""
    _check_char(c)
    if c == _NUL:
        stop = text.find(_NUL)
        return len(text) if stop == -1 else stop
    index = text.find(c)
    return None if index == -1 else index


def rfind_char(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``; NUL finds the end; None if absent."""
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index == -1 else index


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly in the first ``length`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index == -1 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch.

    The end of a string compares as a NUL character, so a shorter string
    sorts before a longer one that it prefixes.
    """
    _check_non_negative("n", n)
    for count, (a, b) in enumerate(zip_longest(s1, s2, fillvalue=_NUL)):
        if count >= n:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def copy_bounded(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``, so a result
    length at least ``size`` tells that the copy was truncated.
    """
    _check_non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def concat_bounded(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the new text and the length the full concatenation would need,
    counted from ``dst`` capped at ``size``.
    """
    _check_non_negative("size", size)
    dst_len = min(len(dst), size)
    if dst_len < size:
        room = size - dst_len - 1
        dst = dst + src[:room]
    return dst, dst_len + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]