"""Fixed-capacity accumulator for partial blocks."""

from __future__ import annotations

from .errors import BufferCapacityError


class AccumulatorBuffer:
    """Append-only byte buffer with a fixed capacity.

    Storage is allocated once; the buffer never grows. Padding is built in
    place, so callers size the capacity to one or two blocks.
    """

    __slots__ = ("_data", "_size", "block_size")

    def __init__(self, capacity: int, block_size: int) -> None:
        if capacity <= 0 or capacity % block_size:
            raise ValueError("capacity must be a positive multiple of block_size")
        self._data = bytearray(capacity)
        self._size = 0
        self.block_size = block_size

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        """True when exactly one block is held."""
        return self._size == self.block_size

    def free(self) -> int:
        return len(self._data) - self._size

    def append(self, data: bytes | memoryview) -> None:
        """Append ``data`` after the held bytes."""
        n = len(data)
        if n > self.free():
            raise BufferCapacityError(
                f"cannot append {n} bytes: {self._size}/{len(self._data)} bytes held"
            )
        self._data[self._size:self._size + n] = data
        self._size += n

    def fill(self, value: int, count: int = 1) -> None:
        """Append ``count`` copies of the byte ``value``."""
        if count > self.free():
            raise BufferCapacityError(
                f"cannot fill {count} bytes: {self._size}/{len(self._data)} bytes held"
            )
        self._data[self._size:self._size + count] = bytes((value,)) * count
        self._size += count

    def assign(self, data: bytes | memoryview) -> None:
        """Replace the held bytes with ``data``."""
        self.clear()
        self.append(data)

    def __getitem__(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("buffer index out of range")
        return self._data[index]

    def __setitem__(self, index: int, value: int) -> None:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("buffer index out of range")
        self._data[index] = value

    def view(self) -> memoryview:
        """Read-only view over the held bytes."""
        return memoryview(self._data).toreadonly()[:self._size]

    def clear(self) -> None:
        self._data[:] = bytes(len(self._data))
        self._size = 0

    def copy(self) -> AccumulatorBuffer:
        other = AccumulatorBuffer(len(self._data), self.block_size)
        other._data[:] = self._data
        other._size = self._size
        return other
