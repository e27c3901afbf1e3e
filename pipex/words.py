"""Splitting command lines and search paths into words."""

from __future__ import annotations

from collections.abc import Iterator


def _iter_words(text: str, sep: str) -> Iterator[str]:
    if len(sep) > 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if not sep:
        if text:
            yield text
        return
    for piece in text.split(sep):
        if piece:
            yield piece


def count_words(text: str, sep: str) -> int:
    """Count the runs of non-separator characters in ``text``."""
    return sum(1 for _ in _iter_words(text, sep))


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, ignoring leading, trailing and repeated separators."""
    return list(_iter_words(text, sep))