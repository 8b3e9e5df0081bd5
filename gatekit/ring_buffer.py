"""Fixed-size byte buffer with separate read and write positions.

When an append does not fit, the oldest bytes are dropped to make room,
so writing into the buffer never fails.
"""

from __future__ import annotations

import logging
import os

RING_QUEUE_SIZE = 4 * 1024
_SPILL_SIZE = 65535

log = logging.getLogger(__name__)


class RingBuffer:
    """A byte buffer that discards its oldest contents on overflow."""

    def __init__(self, size: int = RING_QUEUE_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"buffer size must be positive, got {size}")
        self.size = size
        self._data = bytearray(size)
        self._read_pos = 0
        self._write_pos = 0

    @property
    def read_pos(self) -> int:
        """Offset in storage where unread data begins."""
        return self._read_pos

    @property
    def write_pos(self) -> int:
        """Offset in storage where the next write lands."""
        return self._write_pos

    def readable_bytes(self) -> int:
        return self._write_pos - self._read_pos

    def writable_bytes(self) -> int:
        return self.size - self._write_pos

    def prependable_bytes(self) -> int:
        return self._read_pos

    def peek(self) -> bytes:
        """Return the unread data without consuming it."""
        return bytes(self._data[self._read_pos:self._write_pos])

    def retrieve(self, length: int) -> None:
        """Consume ``length`` bytes of unread data."""
        if length < 0 or length > self.readable_bytes():
            raise ValueError(
                f"cannot retrieve {length} bytes, {self.readable_bytes()} readable"
            )
        self._read_pos += length

    def retrieve_until(self, end: int) -> None:
        """Consume unread data up to the storage offset ``end``."""
        if end < self._read_pos:
            raise ValueError(f"end {end} lies before read position {self._read_pos}")
        self.retrieve(end - self._read_pos)

    def retrieve_all(self) -> None:
        """Drop all data and reset both positions."""
        self._data[:] = bytes(self.size)
        self._read_pos = 0
        self._write_pos = 0

    def retrieve_all_to_bytes(self) -> bytes:
        """Return all unread data and empty the buffer."""
        result = self.peek()
        self.retrieve_all()
        return result

    def has_written(self, length: int) -> None:
        """Advance the write position after data was placed in storage."""
        if length < 0 or length > self.writable_bytes():
            raise ValueError(
                f"cannot advance by {length} bytes, {self.writable_bytes()} writable"
            )
        self._write_pos += length

    def append(self, data: bytes) -> None:
        """Write ``data``, dropping the oldest stored bytes if space runs out."""
        data = bytes(data)
        if len(data) > self.size:
            log.warning("data larger than buffer, keeping last %d bytes", self.size)
            data = data[-self.size:]
        shortfall = len(data) - self.writable_bytes()
        if shortfall > 0:
            log.warning("no writable room, dropping %d old bytes", shortfall)
            self._data[: self.size - shortfall] = self._data[shortfall:]
            self._write_pos -= shortfall
            self._read_pos = min(self._read_pos, self._write_pos)
        end = self._write_pos + len(data)
        self._data[self._write_pos:end] = data
        self._write_pos = end

    def append_str(self, text: str) -> None:
        """Write ``text`` encoded as UTF-8."""
        self.append(text.encode("utf-8"))

    def clear(self) -> None:
        """Empty the buffer."""
        self.retrieve_all()

    def read_fd(self, fd: int) -> int:
        """Read from ``fd`` into the buffer and return the number of bytes read.

        Data beyond the free space is appended, evicting old bytes.
        """
        writable = self.writable_bytes()
        spill = bytearray(_SPILL_SIZE)
        view = memoryview(self._data)[self._write_pos:]
        try:
            count = os.readv(fd, [view, spill])
        finally:
            view.release()
        if count <= writable:
            self._write_pos += count
        else:
            self._write_pos = self.size
            self.append(spill[: count - writable])
        return count

    def write_fd(self, fd: int) -> int:
        """Write unread data to ``fd`` and consume what was written."""
        count = os.write(fd, self.peek())
        self._read_pos += count
        return count