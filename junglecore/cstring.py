"""C-style string comparison and case helpers.

Strings stop at the first NUL character, as C strings do. Case folding is
ASCII only: characters outside ``A-Z``/``a-z`` are left untouched.
"""

from __future__ import annotations

import string
from itertools import zip_longest

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _terminated(text: str) -> str:
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _sign(first: str, second: str) -> int:
    return (first > second) - (first < second)


def _difference(first: str, second: str) -> int:
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings: -1, 0 or 1 as ``first`` sorts before, equal to or after ``second``."""
    return _sign(_terminated(first), _terminated(second))


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` leading characters; -1, 0 or 1."""
    return _sign(_terminated(first)[:count], _terminated(second)[:count])


def stricmp(first: str, second: str) -> int:
    """Compare ignoring ASCII case.

    Returns the difference between the first pair of differing lower-cased
    characters, or zero when the strings are equal.
    """
    return _difference(strlwr(_terminated(first)), strlwr(_terminated(second)))


def strnicmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` leading characters ignoring ASCII case."""
    return _difference(
        strlwr(_terminated(first)[:count]),
        strlwr(_terminated(second)[:count]),
    )


def strupr(text: str) -> str:
    """Return ``text`` with ASCII letters in upper case."""
    return text.translate(_TO_UPPER)


def strlwr(text: str) -> str:
    """Return ``text`` with ASCII letters in lower case."""
    return text.translate(_TO_LOWER)