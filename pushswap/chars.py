"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. The case converters return a value of the same kind
they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of a character or code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code between 0 and 127 inclusive."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Convert an upper-case ASCII letter to lower case; leave others alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + _CASE_OFFSET)
    return c


def toupper(c: CharLike) -> CharLike:
    """Convert a lower-case ASCII letter to upper case; leave others alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - _CASE_OFFSET)
    return c