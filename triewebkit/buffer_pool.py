"""A pool of reusable fixed-size byte buffers."""

from __future__ import annotations

import threading
from collections import deque


class BufferPool:
    """Keeps up to ``pool_size`` idle buffers of ``buffer_size`` bytes.

    ``max_memory`` caps the bytes held by all buffers handed out or pooled;
    0 means no cap. The pool starts full.
    """

    def __init__(self, buffer_size: int, pool_size: int, max_memory: int = 0):
        self.buffer_size = buffer_size
        self.pool_limit = pool_size
        self._max_memory = max_memory
        self._total_allocated = pool_size
        self._pool: deque[bytearray] = deque(bytearray(buffer_size) for _ in range(pool_size))
        self._lock = threading.Lock()

    def acquire(self) -> bytearray:
        """Take an idle buffer, or allocate a new one.

        Raises ``MemoryError`` when a new buffer would exceed ``max_memory``.
        """
        with self._lock:
            if self._pool:
                return self._pool.pop()
            needed = (self._total_allocated + 1) * self.buffer_size
            if self._max_memory > 0 and needed > self._max_memory:
                raise MemoryError("buffer pool memory limit exceeded")
            self._total_allocated += 1
            return bytearray(self.buffer_size)

    def release(self, buffer: bytearray) -> None:
        """Return a buffer; it is dropped if the pool is already full."""
        with self._lock:
            if len(self._pool) < self.pool_limit:
                self._pool.append(buffer)
            elif self._total_allocated > 0:
                self._total_allocated -= 1

    @property
    def pool_usage(self) -> int:
        """Number of idle buffers in the pool."""
        with self._lock:
            return len(self._pool)

    @property
    def total_allocated(self) -> int:
        """Number of buffers alive, pooled or handed out."""
        with self._lock:
            return self._total_allocated

    @property
    def current_memory_usage(self) -> int:
        """Bytes held by all live buffers."""
        with self._lock:
            return self._total_allocated * self.buffer_size

    @property
    def max_memory(self) -> int:
        """The memory cap in bytes; 0 means none."""
        with self._lock:
            return self._max_memory

    @max_memory.setter
    def max_memory(self, value: int) -> None:
        with self._lock:
            self._max_memory = value