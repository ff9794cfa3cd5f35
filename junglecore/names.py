"""Interned, case-insensitively comparable names backed by a hash pool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from junglecore.cstring import strlwr

NAME_SIZE = 256
"""Names this long or longer cannot be stored and become the none name."""

_HASH_SEED = 5381
_HASH_MASK = 0xFFFFFFFF
_NONE_TEXT = "None"


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def hash_string(text: str) -> int:
    """32-bit djb2 hash of ``text`` up to its first NUL character."""
    value = _HASH_SEED
    for char in _terminated(text):
        value = ((value << 5) + value + ord(char)) & _HASH_MASK
    return value


def hash_string_lower(text: str) -> int:
    """djb2 hash of ``text`` with ASCII letters folded to lower case."""
    return hash_string(strlwr(text))


@dataclass(frozen=True, slots=True)
class NameEntry:
    """A stored name together with the id of its case-insensitive entry."""

    comparison_id: int
    name: str
    is_wide: bool = False


class NamePool:
    """Maps name hashes to stored names.

    The display table is keyed by the case-sensitive hash, the comparison
    table by the case-insensitive one. A hash seen before keeps the entry
    stored first.
    """

    def __init__(self) -> None:
        self._display: dict[int, NameEntry] = {}
        self._comparison: dict[int, NameEntry] = {}

    def __len__(self) -> int:
        return len(self._display)

    def find_or_store(self, text: str) -> int:
        """Store ``text`` unless already present; return its display hash."""
        display_hash = hash_string(text)
        if display_hash in self._display:
            return display_hash

        comparison_hash = hash_string_lower(text)
        if comparison_hash not in self._comparison:
            self._comparison[comparison_hash] = NameEntry(0, text)

        self._display[display_hash] = NameEntry(comparison_hash, text)
        return display_hash

    def resolve(self, display_id: int) -> NameEntry:
        """The entry stored under ``display_id``; KeyError if there is none."""
        try:
            return self._display[display_id]
        except KeyError:
            raise KeyError(f"no name stored under id {display_id}") from None


_default_pool = NamePool()


class Name:
    """A lightweight handle to a pooled string.

    Names compare equal when their texts match ignoring ASCII case; the
    original spelling is kept for display. With no text, or a text of
    ``NAME_SIZE`` characters or more, the result is the none name.
    """

    __slots__ = ("_display_index", "_comparison_index", "_pool")

    def __init__(self, text: Optional[str] = None, *, pool: Optional[NamePool] = None) -> None:
        self._pool = _default_pool if pool is None else pool
        self._display_index = 0
        self._comparison_index = 0
        if text is None:
            return
        text = _terminated(text)
        if len(text) >= NAME_SIZE:
            return
        display_id = self._pool.find_or_store(text)
        self._display_index = display_id
        if display_id:
            self._comparison_index = self._pool.resolve(display_id).comparison_id

    @property
    def display_index(self) -> int:
        """Hash of the name as spelled."""
        return self._display_index

    @property
    def comparison_index(self) -> int:
        """Hash used for comparisons, ignoring case."""
        return self._comparison_index

    def is_none(self) -> bool:
        """Whether this is the none name."""
        return self._display_index == 0 and self._comparison_index == 0

    def to_string(self) -> str:
        """The stored text, or ``"None"`` for the none name."""
        if self.is_none():
            return _NONE_TEXT
        return self._pool.resolve(self._display_index).name

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Name({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._comparison_index == other._comparison_index

    def __hash__(self) -> int:
        return hash(self._comparison_index)