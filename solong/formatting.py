"""printf-style formatting with a small set of conversions, and stream writers."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_UINT32_MASK = (1 << 32) - 1
_UINT64_MASK = (1 << 64) - 1
_INT32_SIGN = 1 << 31


def _stream_or_stdout(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def _as_int32(value: Any) -> int:
    wrapped = operator.index(value) & _UINT32_MASK
    return wrapped - (1 << 32) if wrapped & _INT32_SIGN else wrapped


def _as_uint32(value: Any) -> int:
    return operator.index(value) & _UINT32_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) & _UINT64_MASK
    return "0x" + format(address, "x") if address else "(nil)"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    value = _next_arg(args, spec)
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_as_int32(value))
    if spec == "u":
        return str(_as_uint32(value))
    return format(_as_uint32(value), spec)


def sprintf(template: str, *args: Any) -> str:
    """Format ``template`` with the conversions %c %s %p %d %i %u %x %X and %%.

    An unknown conversion character produces nothing and takes no argument.
    A lone ``%`` at the end of the template ends the output. Integers are
    taken as 32-bit values, pointers as 64-bit addresses.
    """
    parts: list[str] = []
    values = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(template, *args)
    _stream_or_stdout(stream).write(text)
    return len(text)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is None:
        return
    _stream_or_stdout(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is None:
        return
    _stream_or_stdout(stream).write(text + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of the integer ``n``."""
    _stream_or_stdout(stream).write(str(operator.index(n)))