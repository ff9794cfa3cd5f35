"""Tracking of heap allocations by category."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AllocationType(Enum):
    """Category an allocation is counted under."""

    OBJECT = 0
    CONTAINER = 1


@dataclass
class _Stats:
    bytes: int = 0
    count: int = 0


class AllocationTracker:
    """Hands out zeroed memory blocks and counts live bytes and blocks per category."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._stats = {kind: _Stats() for kind in AllocationType}

    def allocate(self, kind: AllocationType, size: int) -> bytearray:
        """Return a zeroed block of ``size`` bytes, counted under ``kind``."""
        if size < 0:
            raise ValueError(f"allocation size must not be negative, got {size}")
        stats = self._stats[AllocationType(kind)]
        block = bytearray(size)
        with self._lock:
            stats.bytes += size
            stats.count += 1
        return block

    def free(self, kind: AllocationType, block: Optional[bytearray]) -> None:
        """Release a block previously allocated under ``kind``; ``None`` is ignored."""
        if block is None:
            return
        stats = self._stats[AllocationType(kind)]
        with self._lock:
            stats.bytes -= len(block)
            stats.count -= 1

    def allocation_bytes(self, kind: AllocationType) -> int:
        """Bytes currently allocated under ``kind``."""
        with self._lock:
            return self._stats[AllocationType(kind)].bytes

    def allocation_count(self, kind: AllocationType) -> int:
        """Blocks currently allocated under ``kind``."""
        with self._lock:
            return self._stats[AllocationType(kind)].count