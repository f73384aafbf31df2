"""Size-bounded string operations with C library semantics."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, which lets a
    caller detect truncation by comparing it with ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had
    without truncation. When ``dst`` already fills the buffer it is
    returned unchanged together with ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def _as_bytes(s: Union[str, bytes]) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


def strncmp(s1: Union[str, bytes], s2: Union[str, bytes], n: int) -> int:
    """Compare at most ``n`` bytes, stopping at the first NUL.

    Returns the difference of the first differing bytes, negative, zero
    or positive.
    """
    if n == 0:
        return 0
    a = _as_bytes(s1) + b"\0"
    b = _as_bytes(s2) + b"\0"
    i = 0
    while a[i] and b[i] and i < n - 1 and a[i] == b[i]:
        i += 1
    return a[i] - b[i]


def strnstr(big: str, little: str, length: int) -> Optional[str]:
    """Find ``little`` within the first ``length`` characters of ``big``.

    Returns the tail of ``big`` starting at the match, ``big`` itself when
    ``little`` is empty, and ``None`` when there is no match.
    """
    if not little:
        return big
    for start in range(min(length, len(big))):
        if start + len(little) > length:
            break
        if big.startswith(little, start):
            return big[start:]
    return None


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call ``f(index, item)`` on every item of ``s`` in place.

    Where ``f`` returns something other than ``None``, that value replaces
    the item.
    """
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement