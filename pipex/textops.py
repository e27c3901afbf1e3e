"""Small string helpers with C-library style semantics.

Strings are handled as Python ``str`` values; functions that in C would
write into a caller's buffer return the resulting text instead.
"""

from __future__ import annotations

from typing import Optional

_WHITESPACE = " \n\t\v\f\r"


def _check_separator(sep: str) -> None:
    if len(sep) > 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    An optional sign may precede the digits; a sign not followed by a digit,
    or text without leading digits, yields 0. Parsing stops at the first
    character that is not a digit.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
        if not stripped[:1].isascii() or not stripped[:1].isdigit():
            return 0
    digits = []
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split on a single character, dropping empty pieces."""
    _check_separator(sep)
    if not sep:
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start beyond the end of the text gives an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    Returns the index of the first match, or None. An empty needle matches
    at index 0.
    """
    _check_non_negative(limit, "limit")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters.

    Returns zero when equal, otherwise the difference of the code points of
    the first differing characters (a missing character counts as 0).
    """
    _check_non_negative(limit, "limit")
    for a, b in zip(first[:limit], second[:limit]):
        if a != b:
            return ord(a) - ord(b)
    compared = min(len(first), len(second), limit)
    if compared == limit:
        return 0
    return _code_at(first, compared) - _code_at(second, compared)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters (terminator included).

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``. A size of 0 copies nothing.
    """
    _check_non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would need.
    """
    _check_non_negative(size, "size")
    if size == 0:
        return dst, len(src)
    room = max(0, size - 1 - len(dst))
    result = dst + src[:room]
    if len(dst) > size:
        return result, len(src) + size
    return result, len(src) + len(dst)