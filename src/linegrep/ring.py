"""Fixed-capacity lookback buffer for before-context lines"""


class RingBuffer:
    """
    Circular buffer holding the most recent ``capacity`` lines.

    The backing list is allocated once; push() overwrites the oldest slot
    when the buffer is full. A capacity of 0 makes every operation a no-op.

    Attributes:
        capacity: Maximum number of lines retained
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f'capacity must be non-negative, got {capacity}')
        self.capacity = capacity
        self._data: list[str | None] = [None] * capacity
        self._index = 0
        self._full = False

    def __len__(self) -> int:
        return self.capacity if self._full else self._index

    def push(self, line: str) -> None:
        if self.capacity == 0:
            return
        self._data[self._index] = line
        self._index = (self._index + 1) % self.capacity
        if self._index == 0:
            self._full = True

    def contents(self) -> list[str]:
        """Return the buffered lines, oldest first."""
        if self.capacity == 0:
            return []
        if not self._full:
            return self._data[: self._index]
        return self._data[self._index :] + self._data[: self._index]
