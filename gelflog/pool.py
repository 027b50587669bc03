"""pool.py - Reusable scratch buffers for record serialization.

Every formatted record is written into a ``bytearray`` drawn from a
BufferPool and copied out as ``bytes`` before the buffer goes back. Under
sustained logging load the same few buffers are reused instead of growing a
fresh one per record.

Design decisions:
    - ``collections.deque`` holds the idle buffers. ``pop()`` and ``append()``
      are atomic under CPython's GIL, so checkout and return need no lock even
      when many threads format records at once.
    - A checked-out buffer belongs to exactly one caller until it is returned.
      Two concurrent calls never write into the same buffer.
    - ``maxlen`` bounds the number of idle buffers. A burst of concurrent
      callers may create extra buffers; the surplus is dropped on return.
"""

from collections import deque
from contextlib import contextmanager
from typing import Iterator


class BufferPool:
    """Bounded pool of ``bytearray`` scratch buffers.

    Example:
        >>> pool = BufferPool(size=2)
        >>> with pool.acquire() as buf:
        ...     buf += b'{"version":"1.1"}'
        ...     data = bytes(buf)
        >>> len(pool)
        1
    """

    def __init__(self, size: int = 16) -> None:
        """Initialise an empty pool.

        Args:
            size: Maximum number of idle buffers retained. Defaults to 16.

        Raises:
            ValueError: If ``size`` is negative.
        """
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        self._idle: deque[bytearray] = deque(maxlen=size)

    def get(self) -> bytearray:
        """Check out an empty buffer, creating one if the pool is empty."""
        try:
            buf = self._idle.pop()
        except IndexError:
            return bytearray()
        buf.clear()
        return buf

    def put(self, buf: bytearray) -> None:
        """Return a buffer. The caller must not touch it afterwards."""
        if self._idle.maxlen:
            self._idle.append(buf)

    @contextmanager
    def acquire(self) -> Iterator[bytearray]:
        """Check out a buffer for the duration of a ``with`` block.

        The buffer is returned to the pool on exit, also when the block
        raises, so a failed serialization never leaks it.
        """
        buf = self.get()
        try:
            yield buf
        finally:
            self.put(buf)

    def __len__(self) -> int:
        """Return the number of idle buffers currently in the pool."""
        return len(self._idle)
