"""A fixed-capacity, thread-safe FIFO ring buffer."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")

BUFFER_SIZE = 6


class BufferEmptyError(LookupError):
    """Raised when reading from an empty buffer."""


class BufferFullError(OverflowError):
    """Raised when writing to a full buffer."""


class CircularBuffer(Generic[T]):
    """Ring buffer with a reader tail and a writer head over a fixed set of slots."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._slots: list = [0] * capacity
        self._length = 0
        self._reader = 0
        self._writer = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def reader_index(self) -> int:
        return self._reader

    @property
    def writer_index(self) -> int:
        return self._writer

    def is_full(self) -> bool:
        return self._length == self._capacity

    def is_empty(self) -> bool:
        return self._length == 0

    def read(self) -> T:
        """Remove and return the oldest item."""
        with self._lock:
            if self.is_empty():
                raise BufferEmptyError("Buffer is empty. Unable to read.")
            item = self._slots[self._reader]
            self._reader = (self._reader + 1) % self._capacity
            self._length -= 1
            return item

    def write(self, item: T) -> None:
        """Append an item at the writer head."""
        with self._lock:
            if self.is_full():
                raise BufferFullError("Buffer is full. Unable to write.")
            self._slots[self._writer] = item
            self._writer = (self._writer + 1) % self._capacity
            self._length += 1

    def __len__(self) -> int:
        return self._length

    def describe(self) -> str:
        """Return a multi-line report of the buffer's state and raw slots."""
        indices = "".join(f"{i} " for i in range(self._capacity))
        items = "".join(f"{slot} " for slot in self._slots)
        return (
            f"Buffer size   : {self._capacity}\n"
            f"Buffer length : {self._length}\n"
            f"Reader index  : {self._reader}\n"
            f"Writer index  : {self._writer}\n"
            f"Indices       : {indices}\n"
            f"Items         : {items}\n"
        )


_DEMO_SEQUENCE = (
    None, 1, 2, None, 3, None, 4, 5, 6, None, 7, None,
    8, 9, 10, 11, None, 12, 13,
)


def main(argv=None) -> int:
    """Run a fixed sequence of reads and writes and print the buffer state."""
    buffer: CircularBuffer[int] = CircularBuffer()
    print(buffer.describe(), end="")
    for step in _DEMO_SEQUENCE:
        try:
            if step is None:
                buffer.read()
            else:
                buffer.write(step)
        except (BufferEmptyError, BufferFullError) as err:
            print(err)
    print(buffer.describe(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())