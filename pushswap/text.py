"""String helpers with C library semantics: conversion, search, splitting."""

from __future__ import annotations

from typing import List, Optional

_WHITESPACE = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Convert the leading integer of ``text``.

    Leading whitespace is skipped, one optional sign is read, then the
    run of decimal digits. Anything after that run is ignored; text with
    no digits converts to 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(s: str, c: str) -> Optional[str]:
    """Return the tail of ``s`` from the first ``c``, or ``None``.

    Searching for ``"\\0"`` finds the terminator and returns ``""``.
    """
    _check_char(c)
    if c == "\0":
        head, _, _ = s.partition("\0")
        return s[len(head):] if "\0" in s else ""
    index = s.find(c)
    return None if index < 0 else s[index:]


def strrchr(s: str, c: str) -> Optional[str]:
    """Return the tail of ``s`` from the last ``c``, or ``None``.

    Searching for ``"\\0"`` finds the terminator and returns ``""``.
    """
    _check_char(c)
    if c == "\0":
        return ""
    index = s.rfind(c)
    return None if index < 0 else s[index:]


def strtrim(s: Optional[str], charset: Optional[str]) -> str:
    """Remove characters of ``charset`` from both ends of ``s``.

    A missing string or character set gives an empty result.
    """
    if s is None or charset is None:
        return ""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start beyond the end of ``s`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return s1 + s2