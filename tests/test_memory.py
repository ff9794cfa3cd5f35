import threading

import pytest

from junglecore.memory import AllocationTracker, AllocationType


@pytest.fixture
def tracker():
    return AllocationTracker()


def test_new_tracker_is_empty(tracker):
    for kind in AllocationType:
        assert tracker.allocation_bytes(kind) == 0
        assert tracker.allocation_count(kind) == 0


def test_allocate_returns_zeroed_block(tracker):
    block = tracker.allocate(AllocationType.OBJECT, 16)
    assert len(block) == 16
    assert all(byte == 0 for byte in block)


def test_allocate_counts_bytes_and_blocks(tracker):
    tracker.allocate(AllocationType.CONTAINER, 16)
    tracker.allocate(AllocationType.CONTAINER, 8)
    assert tracker.allocation_bytes(AllocationType.CONTAINER) == 16 + 8
    assert tracker.allocation_count(AllocationType.CONTAINER) == 2


def test_free_restores_counters(tracker):
    block = tracker.allocate(AllocationType.OBJECT, 32)
    tracker.free(AllocationType.OBJECT, block)
    assert tracker.allocation_bytes(AllocationType.OBJECT) == 0
    assert tracker.allocation_count(AllocationType.OBJECT) == 0


def test_kinds_are_counted_separately(tracker):
    tracker.allocate(AllocationType.OBJECT, 10)
    assert tracker.allocation_bytes(AllocationType.CONTAINER) == 0
    assert tracker.allocation_count(AllocationType.CONTAINER) == 0
    assert tracker.allocation_bytes(AllocationType.OBJECT) == 10


def test_free_none_is_ignored(tracker):
    tracker.allocate(AllocationType.OBJECT, 4)
    tracker.free(AllocationType.OBJECT, None)
    assert tracker.allocation_count(AllocationType.OBJECT) == 1
    assert tracker.allocation_bytes(AllocationType.OBJECT) == 4


def test_zero_size_allocation_is_counted(tracker):
    block = tracker.allocate(AllocationType.CONTAINER, 0)
    assert len(block) == 0
    assert tracker.allocation_count(AllocationType.CONTAINER) == 1


def test_negative_size_is_rejected(tracker):
    with pytest.raises(ValueError):
        tracker.allocate(AllocationType.OBJECT, -1)
    assert tracker.allocation_count(AllocationType.OBJECT) == 0


def test_concurrent_allocations_are_all_counted(tracker):
    threads_n, per_thread, size = 8, 200, 3

    def work():
        for _ in range(per_thread):
            tracker.allocate(AllocationType.CONTAINER, size)

    threads = [threading.Thread(target=work) for _ in range(threads_n)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert tracker.allocation_count(AllocationType.CONTAINER) == threads_n * per_thread
    assert tracker.allocation_bytes(AllocationType.CONTAINER) == threads_n * per_thread * size