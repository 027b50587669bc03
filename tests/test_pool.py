"""test_pool.py - Unit tests for BufferPool.

Covers:
    - get() returns an empty bytearray, put() retains it for reuse
    - Reused buffers are cleared before being handed out again
    - The pool never retains more than ``size`` idle buffers
    - acquire() returns the buffer even when the block raises
    - Concurrent checkouts never hand the same buffer to two threads
"""

import threading

import pytest

from gelflog.pool import BufferPool


# ---------------------------------------------------------------------------
# get() / put()
# ---------------------------------------------------------------------------


class TestBufferPoolBasic:
    def test_buffer_pool_initial_length_is_zero(self):
        """A new pool holds no idle buffers."""
        assert len(BufferPool(size=4)) == 0

    def test_buffer_pool_get_on_empty_pool_creates_buffer(self):
        """get() on an empty pool returns a fresh empty bytearray."""
        buf = BufferPool(size=4).get()
        assert isinstance(buf, bytearray)
        assert len(buf) == 0

    def test_buffer_pool_put_then_get_reuses_buffer(self):
        """A returned buffer is handed out again by the next get()."""
        pool = BufferPool(size=4)
        buf = pool.get()
        pool.put(buf)
        assert pool.get() is buf

    def test_buffer_pool_get_clears_reused_buffer(self):
        """A reused buffer carries nothing over from its previous user."""
        pool = BufferPool(size=4)
        buf = pool.get()
        buf += b"stale"
        pool.put(buf)
        assert pool.get() == bytearray()

    def test_buffer_pool_retains_at_most_size_buffers(self):
        """Surplus buffers beyond ``size`` are dropped on return."""
        pool = BufferPool(size=2)
        for _ in range(5):
            pool.put(bytearray())
        assert len(pool) == 2

    def test_buffer_pool_size_zero_retains_nothing(self):
        """With size=0 every put() is discarded."""
        pool = BufferPool(size=0)
        pool.put(bytearray())
        assert len(pool) == 0

    def test_buffer_pool_negative_size_raises(self):
        """A negative size is rejected."""
        with pytest.raises(ValueError):
            BufferPool(size=-1)


# ---------------------------------------------------------------------------
# acquire()
# ---------------------------------------------------------------------------


class TestBufferPoolAcquire:
    def test_buffer_pool_acquire_returns_buffer_on_exit(self):
        """The buffer is back in the pool after the with-block."""
        pool = BufferPool(size=2)
        with pool.acquire() as buf:
            buf += b"{}"
            assert len(pool) == 0
        assert len(pool) == 1

    def test_buffer_pool_acquire_returns_buffer_on_error(self):
        """The buffer is returned even when the with-block raises."""
        pool = BufferPool(size=2)
        with pytest.raises(RuntimeError):
            with pool.acquire():
                raise RuntimeError("boom")
        assert len(pool) == 1


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class TestBufferPoolConcurrency:
    def test_buffer_pool_concurrent_checkouts_are_exclusive(self):
        """Buffers held at the same time by different threads are distinct."""
        pool = BufferPool(size=4)
        held = {}
        barrier = threading.Barrier(8)

        def worker(n: int):
            with pool.acquire() as buf:
                held[n] = buf
                barrier.wait()

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({id(b) for b in held.values()}) == 8
        assert len(pool) == 4
