"""
BoundedQueue - FIFO container with a fixed capacity.

Front is the oldest element still present; rear is the newest.
Dequeue on an empty queue returns None instead of raising (unlike
BoundedStack.pop, which raises Underflow).
"""
from collections import deque
from typing import Any, Iterator, Optional

from stackqueue.errors import Overflow, check_capacity


DEFAULT_QUEUE_CAPACITY = 50


class BoundedQueue:
    """
    Bounded FIFO queue of opaque display values.

    - enqueue raises Overflow when full
    - dequeue / front / rear return None when empty
    """

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY):
        capacity = check_capacity(capacity)
        self._items: deque = deque()
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, value: Any) -> bool:
        """
        Add value at the rear.

        Raises:
            Overflow: If the queue is at capacity
        """
        if len(self._items) >= self._capacity:
            raise Overflow(f"Queue overflow: maximum size is {self._capacity}")

        self._items.append(value)
        return True

    def dequeue(self) -> Optional[Any]:
        """Remove and return the front value, or None when empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def front(self) -> Optional[Any]:
        if not self._items:
            return None
        return self._items[0]

    def rear(self) -> Optional[Any]:
        if not self._items:
            return None
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def remaining_capacity(self) -> int:
        return self._capacity - len(self._items)

    def is_valid(self) -> bool:
        return self._capacity > 0 and len(self._items) <= self._capacity

    def contains(self, value: Any) -> bool:
        return value in self._items

    def search(self, value: Any) -> int:
        """Index of value from the front (0-based), or -1 if absent."""
        try:
            return self._items.index(value)
        except ValueError:
            return -1

    def set_capacity(self, capacity: int) -> None:
        """
        Change the maximum size.

        Shrinking below the current size drops elements from the front
        (the oldest), keeping the most recently enqueued `capacity` ones.

        Raises:
            InvalidCapacity: If capacity is not an int or is < 1
        """
        capacity = check_capacity(capacity)

        self._capacity = capacity
        while len(self._items) > capacity:
            self._items.popleft()

    def to_list(self) -> list[Any]:
        """Copy of the contents, front to rear."""
        return list(self._items)

    def stats(self) -> dict:
        return {
            "size": self.size(),
            "capacity": self._capacity,
            "is_empty": self.is_empty(),
            "is_full": self.is_full(),
            "remaining_capacity": self.remaining_capacity(),
            "front": self.front(),
            "rear": self.rear(),
        }

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __str__(self) -> str:
        if not self._items:
            return "Queue: []"
        return f"Queue: front -> [{', '.join(str(item) for item in self._items)}] <- rear"
