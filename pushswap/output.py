"""Formatted and plain text output to streams."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional, TextIO, Union

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_SIZE_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised when a format string or its arguments cannot be rendered."""


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise FormatError(f"%{spec} expects an int, got {type(value).__name__}")
    return int(value)


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _in_base(value: int, digits: str) -> str:
    if value < 0:
        return "-" + _in_base(-value, digits)
    base = len(digits)
    if value < base:
        return digits[value]
    return _in_base(value // base, digits) + digits[value % base]


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise FormatError(f"%s expects a string, got {type(value).__name__}")
    return value


def _signed(value: Any) -> str:
    return _in_base(_to_int32(_require_int(value, "d")), _LOWER_DIGITS[:10])


def _unsigned(value: Any) -> str:
    return _in_base(_require_int(value, "u") & _UINT_MASK, _LOWER_DIGITS[:10])


def _hex_lower(value: Any) -> str:
    return _in_base(_require_int(value, "x") & _UINT_MASK, _LOWER_DIGITS)


def _hex_upper(value: Any) -> str:
    return _in_base(_require_int(value, "X") & _UINT_MASK, _UPPER_DIGITS)


def _pointer(value: Any) -> str:
    address = 0 if value is None else _require_int(value, "p") & _SIZE_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _in_base(address, _LOWER_DIGITS)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def format_printf(fmt: Optional[str], *args: Any) -> str:
    """Render ``fmt`` with the conversions c, s, d, i, u, x, X, p and %%.

    Integers are treated as 32-bit values the way the conversions read
    them; an unknown conversion is dropped without consuming an argument.
    Raises FormatError for a missing format, a trailing lone ``%`` or too
    few arguments.
    """
    if fmt is None:
        raise FormatError("no format given")
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, out: Optional[TextIO] = None) -> int:
    """Write the rendered format to ``out`` and return the characters written."""
    text = format_printf(fmt, *args)
    _stream(out).write(text)
    return len(text)


def put_char(c: Union[str, int], out: Optional[TextIO] = None) -> int:
    """Write one character to ``out``."""
    ch = _char(c)
    _stream(out).write(ch)
    return 1


def put_str(s: Optional[str], out: Optional[TextIO] = None) -> int:
    """Write ``s`` to ``out``; a missing string writes nothing."""
    if s is None:
        return 0
    _stream(out).write(s)
    return len(s)


def put_endl(s: Optional[str], out: Optional[TextIO] = None) -> int:
    """Write ``s`` and a newline to ``out``; a missing string writes nothing."""
    if s is None:
        return 0
    _stream(out).write(s + "\n")
    return len(s) + 1


def put_nbr(n: int, out: Optional[TextIO] = None) -> int:
    """Write the decimal text of the 32-bit integer ``n`` to ``out``."""
    text = _signed(n)
    _stream(out).write(text)
    return len(text)