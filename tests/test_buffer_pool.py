import pytest

from triewebkit.buffer_pool import BufferPool

SIZE = 16


def test_pool_starts_full():
    pool = BufferPool(SIZE, 2)
    assert pool.pool_usage == 2
    assert pool.pool_limit == 2
    assert pool.total_allocated == 2
    assert pool.current_memory_usage == 2 * SIZE
    assert pool.max_memory == 0


def test_acquired_buffer_has_requested_size():
    pool = BufferPool(SIZE, 1)
    buffer = pool.acquire()
    assert len(buffer) == SIZE
    assert pool.pool_usage == 0


def test_acquire_beyond_pool_allocates():
    pool = BufferPool(SIZE, 1)
    first = pool.acquire()
    second = pool.acquire()
    assert first is not second
    assert pool.total_allocated == 2
    assert pool.current_memory_usage == pool.total_allocated * SIZE


def test_release_returns_buffer_for_reuse():
    pool = BufferPool(SIZE, 1)
    buffer = pool.acquire()
    pool.release(buffer)
    assert pool.pool_usage == 1
    assert pool.acquire() is buffer


def test_release_into_full_pool_drops_buffer():
    pool = BufferPool(SIZE, 1)
    first = pool.acquire()
    second = pool.acquire()
    pool.release(first)
    pool.release(second)
    assert pool.pool_usage == 1
    assert pool.total_allocated == 1


def test_memory_limit_blocks_new_allocation():
    pool = BufferPool(SIZE, 1, max_memory=SIZE)
    pool.acquire()
    with pytest.raises(MemoryError):
        pool.acquire()
    assert pool.total_allocated == 1


def test_raising_memory_limit_allows_allocation():
    pool = BufferPool(SIZE, 0, max_memory=SIZE - 1)
    with pytest.raises(MemoryError):
        pool.acquire()
    pool.max_memory = SIZE
    assert pool.max_memory == SIZE
    assert len(pool.acquire()) == SIZE


def test_total_allocated_never_negative():
    pool = BufferPool(SIZE, 0)
    pool.release(bytearray(SIZE))
    assert pool.total_allocated == 0
    assert pool.pool_usage == 0