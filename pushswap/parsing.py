"""Parsing of command-line arguments into the numbers to sort."""

from __future__ import annotations

from typing import List, Optional, Sequence

from pushswap.chars import isdigit
from pushswap.text import atoi, split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of numbers."""


def atol(text: str) -> int:
    """Convert the leading integer of ``text`` without range limits."""
    return atoi(text)


def is_valid_number(token: str) -> bool:
    """True when ``token`` is an optional sign followed only by digits."""
    if not token:
        return False
    first = token[0]
    if first in "+-":
        if len(token) < 2 or not isdigit(token[1]):
            return False
    elif not isdigit(first):
        return False
    return all(isdigit(ch) for ch in token[1:])


def is_empty_split(tokens: Optional[Sequence[str]]) -> bool:
    """True when ``tokens`` is missing or holds only empty strings."""
    if tokens is None:
        return True
    return not any(tokens)


def parse_number(token: str) -> int:
    """Parse one token as a 32-bit signed integer.

    Raises InputError for bad syntax or an out-of-range value.
    """
    if not is_valid_number(token):
        raise InputError(f"not a number: {token!r}")
    value = atol(token)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {token!r}")
    return value


def split_arguments(argv: Sequence[str]) -> List[str]:
    """Turn the arguments into number tokens.

    A single argument is split on spaces; several arguments are taken as
    they are. No arguments give no tokens. A single empty or blank
    argument raises InputError.
    """
    if not argv:
        return []
    if len(argv) == 1:
        if not argv[0]:
            raise InputError("empty argument")
        tokens = split(argv[0], " ")
        if is_empty_split(tokens):
            raise InputError("no numbers in argument")
        return tokens
    return list(argv)


def parse_arguments(argv: Sequence[str]) -> List[int]:
    """Parse the arguments into a list of distinct 32-bit integers.

    Raises InputError on bad syntax, out-of-range values or duplicates.
    """
    numbers: List[int] = []
    seen = set()
    for token in split_arguments(argv):
        value = parse_number(token)
        if value in seen:
            raise InputError(f"duplicate number: {value}")
        seen.add(value)
        numbers.append(value)
    return numbers