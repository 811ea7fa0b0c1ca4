"""Palindrome checks by comparing characters from both ends."""

from __future__ import annotations


def first_mismatch(text: str) -> tuple[int, int] | None:
    """Return the indices of the first differing mirrored pair, or None."""
    for i in range(len(text) // 2):
        j = len(text) - 1 - i
        if text[i] != text[j]:
            return i, j
    return None


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards."""
    return first_mismatch(text) is None