"""Fixed-capacity FIFO over a pre-allocated ring buffer."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class QueueError(Exception):
    """Base error for queue operations."""

    pass


class AllocationError(QueueError):
    """Backing storage for a queue cannot be obtained."""

    pass


class QueueFull(QueueError):
    """Push attempted on a queue already at capacity."""

    pass


class BoundedCircularQueue(Generic[T]):
    """FIFO queue with a fixed capacity that never resizes.

    Logical index ``i`` lives at physical slot ``(offset + i) % capacity``.
    Reading past the end (``pop`` on an empty queue, ``peek`` beyond ``size``)
    returns ``None`` instead of raising, so callers can probe for depth
    without exception handling. Pushing onto a full queue raises ``QueueFull``.
    """

    def __init__(self, capacity: int) -> None:
        """Allocate an empty queue.

        Args:
            capacity: Number of slots in the ring buffer (must be >= 1)

        Raises:
            AllocationError: If capacity is not a positive integer.
        """
        if not isinstance(capacity, int) or capacity < 1:
            raise AllocationError(f"Cannot allocate queue with capacity {capacity!r}")

        self._buf: List[Optional[T]] = [None] * capacity
        self._capacity = capacity
        self._offset = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size >= self._capacity

    def _slot(self, index: int) -> int:
        return (self._offset + index) % self._capacity

    def push(self, item: T) -> None:
        """Append item at the logical back.

        Raises:
            QueueFull: If the queue already holds ``capacity`` items.
        """
        if self.is_full():
            raise QueueFull(f"Queue is full ({self._capacity} items)")

        self._buf[self._slot(self._size)] = item
        self._size += 1

    def pop(self) -> Optional[T]:
        """Remove and return the front item, or None if the queue is empty."""
        if self._size == 0:
            return None

        slot = self._offset
        item = self._buf[slot]
        self._buf[slot] = None
        self._offset = self._slot(1)
        self._size -= 1
        return item

    def peek(self, index: int) -> Optional[T]:
        """Return the item at logical offset ``index`` (0 = front) without removing it."""
        if index < 0 or index >= self._size:
            return None
        return self._buf[self._slot(index)]

    def front(self) -> Optional[T]:
        return self.peek(0)

    def for_each(self, visitor: Callable[[T, int], None]) -> None:
        """Call ``visitor(item, index)`` for each item, front to back."""
        for index, item in enumerate(self):
            visitor(item, index)

    def to_list(self) -> List[T]:
        return list(self)

    def __iter__(self) -> Iterator[T]:
        # Snapshot the bounds so a visitor cannot shift the traversal.
        offset, size = self._offset, self._size
        for i in range(size):
            yield self._buf[(offset + i) % self._capacity]  # type: ignore[misc]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BoundedCircularQueue(capacity={self._capacity}, items={self.to_list()!r})"
