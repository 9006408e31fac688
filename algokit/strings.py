"""Elementary string operations."""

from __future__ import annotations

__all__ = ["is_palindrome", "string_copy", "reverse_string", "string_length"]


def _until_nul(text: str) -> str:
    end = text.find("\0")
    return text if end < 0 else text[:end]


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    return all(a == b for a, b in zip(text, reversed(text)))


def string_copy(text: str) -> str:
    """Return a copy of ``text`` up to its first NUL character."""
    return "".join(_until_nul(text))


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def string_length(text: str) -> int:
    """Count the characters of ``text`` before its first NUL character."""
    return len(_until_nul(text))