"""String search, comparison and number conversion helpers."""

from __future__ import annotations

import math
import re
import struct
from enum import Enum

from junglecore.cstring import strlwr
from junglecore.mathutil import clamp

INDEX_NONE = -1


class SearchCase(Enum):
    """Case sensitivity of a comparison."""

    CASE_SENSITIVE = 0
    IGNORE_CASE = 1


class SearchDir(Enum):
    """Direction of a search."""

    FROM_START = 0
    FROM_END = 1


_FLOAT_PREFIX = re.compile(
    r"""[ \t\n\v\f\r]*
    (
        [+-]?
        (?:
            0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?
          | (?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?
          | inf(?:inity)?
          | nan
        )
    )""",
    re.IGNORECASE | re.VERBOSE,
)


def _fold(text: str, search_case: SearchCase) -> str:
    return strlwr(text) if search_case is SearchCase.IGNORE_CASE else text


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def equals(text: str, other: str, search_case: SearchCase = SearchCase.CASE_SENSITIVE) -> bool:
    """Whether two strings are equal, optionally ignoring ASCII case."""
    if len(text) != len(other):
        return False
    return _fold(text, search_case) == _fold(other, search_case)


def find(
    text: str,
    substring: str,
    search_case: SearchCase = SearchCase.IGNORE_CASE,
    search_dir: SearchDir = SearchDir.FROM_START,
    start_position: int = INDEX_NONE,
) -> int:
    """Index of ``substring`` in ``text``, or ``INDEX_NONE`` when absent.

    Searching from the start begins at ``start_position`` clamped into the
    string. Searching from the end looks at matches starting no later than
    ``start_position``; ``INDEX_NONE`` there means the whole string.
    """
    if not substring or not text:
        return INDEX_NONE
    last = len(text) - len(substring)
    if last < 0:
        return INDEX_NONE

    haystack = _fold(text, search_case)
    needle = _fold(substring, search_case)

    if search_dir is SearchDir.FROM_START:
        return haystack.find(needle, clamp(start_position, 0, last))

    start = last if start_position == INDEX_NONE else min(start_position, last)
    if start < 0:
        return INDEX_NONE
    return haystack.rfind(needle, 0, start + len(needle))


def contains(
    text: str,
    substring: str,
    search_case: SearchCase = SearchCase.IGNORE_CASE,
    search_dir: SearchDir = SearchDir.FROM_START,
) -> bool:
    """Whether ``substring`` occurs anywhere in ``text``."""
    return find(text, substring, search_case, search_dir) != INDEX_NONE


def from_int(number) -> str:
    """Decimal text of a number; floats get six decimal places."""
    if isinstance(number, float):
        return sanitize_float(number)
    return str(int(number))


def sanitize_float(value: float) -> str:
    """Single-precision value written with six decimal places."""
    try:
        value = _to_float32(value)
    except OverflowError:
        pass
    return f"{value:f}"


def to_float(text: str) -> float:
    """Parse the leading number of ``text`` as a single-precision float.

    Leading whitespace is skipped and trailing characters are ignored.
    Raises ValueError when no number can be read and OverflowError when it
    does not fit a single-precision float.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no float could be parsed from {text!r}")
    token = match.group(1)
    unsigned = token.lstrip("+-")
    if unsigned[:2].lower() == "0x":
        number = float.fromhex(token)
    else:
        number = float(token)

    if math.isinf(number) and not unsigned[:1].lower() == "i":
        raise OverflowError(f"{token!r} is out of range for a float")
    try:
        return _to_float32(number)
    except OverflowError:
        raise OverflowError(f"{token!r} is out of range for a float") from None