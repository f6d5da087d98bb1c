"""
BoundedStack - LIFO container with a fixed capacity.

Top is the most recently pushed element still present (list-end semantics):
push appends, pop and peek work on the same end.

Invariant: 0 <= len(items) <= capacity at all times.
"""
from typing import Any, Iterator, Optional

from stackqueue.errors import InvalidValue, Overflow, Underflow, check_capacity


DEFAULT_STACK_CAPACITY = 10


class BoundedStack:
    """
    Bounded LIFO stack of opaque display values.

    - push raises Overflow when full and InvalidValue for None / ""
    - pop raises Underflow when empty
    - peek never fails (returns None when empty)
    """

    def __init__(self, capacity: int = DEFAULT_STACK_CAPACITY):
        capacity = check_capacity(capacity)
        self._items: list[Any] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> bool:
        """
        Add value on top of the stack.

        Raises:
            Overflow: If the stack is at capacity
            InvalidValue: If value is None or an empty string
        """
        if len(self._items) >= self._capacity:
            raise Overflow(f"Stack overflow: maximum size {self._capacity} reached")

        if value is None or value == "":
            raise InvalidValue("Invalid element: cannot push empty value")

        self._items.append(value)
        return True

    def pop(self) -> Any:
        """
        Remove and return the top value.

        Raises:
            Underflow: If the stack is empty
        """
        if not self._items:
            raise Underflow("Stack underflow: cannot pop from empty stack")
        return self._items.pop()

    def peek(self) -> Optional[Any]:
        """Top value without removing it, or None when empty."""
        if not self._items:
            return None
        return self._items[-1]

    def clear(self) -> None:
        self._items = []

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def remaining_capacity(self) -> int:
        return self._capacity - len(self._items)

    def contains(self, value: Any) -> bool:
        return value in self._items

    def search(self, value: Any) -> int:
        """
        Distance of value from the top (0 = top), or -1 if absent.

        The occurrence closest to the top wins.
        """
        for distance, item in enumerate(reversed(self._items)):
            if item == value:
                return distance
        return -1

    def at(self, index: int) -> Optional[Any]:
        """
        Element at index (0 = bottom, -1 = top), or None if out of range.
        """
        try:
            return self._items[index]
        except IndexError:
            return None

    def set_capacity(self, capacity: int) -> None:
        """
        Change the maximum size.

        Shrinking below the current size discards the oldest (bottom)
        elements and keeps the most recent `capacity` ones, so the top is
        preserved.

        Raises:
            InvalidCapacity: If capacity is not an int or is < 1
        """
        capacity = check_capacity(capacity)

        self._capacity = capacity
        if len(self._items) > capacity:
            self._items = self._items[-capacity:]

    def to_list(self) -> list[Any]:
        """Copy of the contents, bottom to top."""
        return list(self._items)

    def clone(self) -> "BoundedStack":
        copy = BoundedStack(self._capacity)
        copy._items = list(self._items)
        return copy

    def reverse(self) -> None:
        self._items.reverse()

    def merge(self, other: "BoundedStack") -> "BoundedStack":
        """
        New stack holding this stack's elements with other's pushed on top.

        Elements of other that do not fit are dropped.
        """
        if not isinstance(other, BoundedStack):
            raise TypeError("merge expects a BoundedStack")

        merged = self.clone()
        for value in other.to_list():
            if merged.is_full():
                break
            merged.push(value)
        return merged

    def stats(self) -> dict:
        return {
            "size": self.size(),
            "capacity": self._capacity,
            "is_empty": self.is_empty(),
            "is_full": self.is_full(),
            "remaining_capacity": self.remaining_capacity(),
            "top": self.peek(),
            "bottom": self._items[0] if self._items else None,
        }

    def is_valid(self) -> bool:
        return self._capacity > 0 and len(self._items) <= self._capacity

    def to_dict(self) -> dict:
        return {
            "type": "Stack",
            "items": list(self._items),
            "capacity": self._capacity,
            "size": self.size(),
            "top": self.peek(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BoundedStack":
        """
        Rebuild a stack from to_dict() output.

        Items beyond capacity are truncated with the same keep-most-recent
        policy as set_capacity.

        Raises:
            ValueError: If data is not a Stack representation
        """
        if not data or data.get("type") != "Stack":
            raise ValueError("Invalid payload: not a Stack representation")

        stack = cls(data.get("capacity") or DEFAULT_STACK_CAPACITY)
        items = list(data.get("items") or [])
        stack._items = items[-stack.capacity:]
        return stack

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        # Top to bottom
        return reversed(list(self._items))

    def __str__(self) -> str:
        return " <- ".join(str(item) for item in self._items)
