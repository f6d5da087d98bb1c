"""
Tests for BoundedStack

Validates:
- LIFO order
- Overflow / Underflow / InvalidValue failures leave the stack unchanged
- peek never fails
- Capacity changes truncate to the most recent elements
- Query helpers (contains, search, at, stats) and serialization
"""
import pytest

from stackqueue.bounded_stack import DEFAULT_STACK_CAPACITY, BoundedStack
from stackqueue.errors import ContainerError, InvalidCapacity, InvalidValue, Overflow, Underflow


def test_default_capacity():
    """Test stack defaults to capacity 10."""
    stack = BoundedStack()
    assert stack.capacity == DEFAULT_STACK_CAPACITY == 10
    assert stack.is_empty()
    assert stack.size() == 0


def test_lifo_order():
    """Test pop returns values in reverse insertion order."""
    stack = BoundedStack(capacity=5)
    values = ["a", "b", "c", "d", "e"]
    for v in values:
        stack.push(v)

    popped = [stack.pop() for _ in values]

    assert popped == list(reversed(values))
    assert stack.is_empty()


def test_capacity_three_scenario():
    """Test the canonical capacity-3 push/overflow/pop/underflow sequence."""
    stack = BoundedStack(capacity=3)
    assert stack.push("A") is True
    assert stack.push("B") is True
    assert stack.push("C") is True

    with pytest.raises(Overflow):
        stack.push("D")
    assert stack.size() == 3

    assert stack.pop() == "C"
    assert stack.pop() == "B"
    assert stack.pop() == "A"

    with pytest.raises(Underflow):
        stack.pop()
    assert stack.size() == 0


@pytest.mark.parametrize("bad", [None, ""])
def test_push_rejects_empty_values(bad):
    """Test push of None or empty string raises InvalidValue."""
    stack = BoundedStack(capacity=3)
    with pytest.raises(InvalidValue):
        stack.push(bad)
    assert stack.is_empty()


def test_overflow_checked_before_value():
    """Test a full stack reports Overflow even for an invalid value."""
    stack = BoundedStack(capacity=1)
    stack.push("x")
    with pytest.raises(Overflow):
        stack.push("")


def test_errors_share_base_class():
    """Test all failures derive from ContainerError and carry a message."""
    stack = BoundedStack(capacity=1)
    with pytest.raises(ContainerError) as exc_info:
        stack.pop()
    assert "underflow" in exc_info.value.message.lower()


def test_peek_empty_returns_none():
    """Test peek on an empty stack returns None instead of raising."""
    stack = BoundedStack()
    assert stack.peek() is None


def test_peek_is_non_destructive():
    """Test peek returns the top without removing it."""
    stack = BoundedStack()
    stack.push("x")
    stack.push("y")
    assert stack.peek() == "y"
    assert stack.peek() == "y"
    assert stack.size() == 2


def test_clear_idempotent():
    """Test clear empties the stack and can be repeated."""
    stack = BoundedStack()
    stack.push("x")
    stack.clear()
    stack.clear()
    assert stack.size() == 0
    assert stack.is_empty()
    assert stack.peek() is None


def test_is_full_and_remaining_capacity():
    """Test fullness queries track occupancy."""
    stack = BoundedStack(capacity=2)
    assert stack.remaining_capacity() == 2
    stack.push("a")
    assert not stack.is_full()
    stack.push("b")
    assert stack.is_full()
    assert stack.remaining_capacity() == 0


def test_contains_and_search():
    """Test contains and search (distance from top)."""
    stack = BoundedStack()
    for v in ["a", "b", "c", "b"]:
        stack.push(v)

    assert stack.contains("a")
    assert not stack.contains("z")
    assert stack.search("b") == 0  # closest to top
    assert stack.search("c") == 1
    assert stack.search("a") == 3
    assert stack.search("z") == -1


def test_at_index():
    """Test at() indexes from bottom, negative from top."""
    stack = BoundedStack()
    for v in ["a", "b", "c"]:
        stack.push(v)
    assert stack.at(0) == "a"
    assert stack.at(-1) == "c"
    assert stack.at(5) is None


def test_set_capacity_rejects_below_one():
    """Test set_capacity(0) raises InvalidCapacity and keeps state."""
    stack = BoundedStack(capacity=3)
    stack.push("a")
    with pytest.raises(InvalidCapacity):
        stack.set_capacity(0)
    assert stack.capacity == 3
    assert stack.to_list() == ["a"]


@pytest.mark.parametrize("bad", [2.5, "2", True, None])
def test_set_capacity_rejects_non_integer(bad):
    """Test non-int capacities raise InvalidCapacity and keep state."""
    stack = BoundedStack(capacity=5)
    for value in ("A", "B", "C"):
        stack.push(value)

    with pytest.raises(InvalidCapacity):
        stack.set_capacity(bad)

    assert stack.capacity == 5
    assert stack.to_list() == ["A", "B", "C"]
    assert stack.is_valid()


def test_constructor_rejects_below_one():
    """Test constructing with capacity < 1 raises InvalidCapacity."""
    with pytest.raises(InvalidCapacity):
        BoundedStack(capacity=0)


def test_set_capacity_truncates_oldest():
    """Test shrinking keeps the most recent elements and the top."""
    stack = BoundedStack(capacity=5)
    for v in ["a", "b", "c", "d", "e"]:
        stack.push(v)
    top_before = stack.peek()

    stack.set_capacity(2)

    assert stack.to_list() == ["d", "e"]
    assert stack.peek() == top_before
    assert stack.capacity == 2
    assert stack.is_full()


def test_set_capacity_grow_keeps_items():
    """Test growing capacity keeps contents."""
    stack = BoundedStack(capacity=2)
    stack.push("a")
    stack.push("b")
    stack.set_capacity(4)
    assert stack.to_list() == ["a", "b"]
    assert not stack.is_full()


def test_iteration_top_to_bottom():
    """Test iterating yields top first."""
    stack = BoundedStack()
    for v in ["a", "b", "c"]:
        stack.push(v)
    assert list(stack) == ["c", "b", "a"]
    assert len(stack) == 3
    assert str(stack) == "a <- b <- c"


def test_clone_is_independent():
    """Test clone copies items and capacity without sharing state."""
    stack = BoundedStack(capacity=4)
    stack.push("a")
    copy = stack.clone()
    copy.push("b")

    assert stack.to_list() == ["a"]
    assert copy.to_list() == ["a", "b"]
    assert copy.capacity == 4


def test_reverse():
    """Test reverse flips the order."""
    stack = BoundedStack()
    for v in ["a", "b", "c"]:
        stack.push(v)
    stack.reverse()
    assert stack.peek() == "a"


def test_merge_stops_when_full():
    """Test merge pushes other's items on top until full."""
    left = BoundedStack(capacity=3)
    left.push("a")
    right = BoundedStack(capacity=3)
    for v in ["x", "y", "z"]:
        right.push(v)

    merged = left.merge(right)

    assert merged.to_list() == ["a", "x", "y"]
    assert left.to_list() == ["a"]


def test_merge_rejects_non_stack():
    """Test merge with a non-stack raises TypeError."""
    with pytest.raises(TypeError):
        BoundedStack().merge(["a"])  # type: ignore


def test_stats():
    """Test stats snapshot."""
    stack = BoundedStack(capacity=3)
    stack.push("a")
    stack.push("b")
    stats = stack.stats()
    assert stats == {
        "size": 2,
        "capacity": 3,
        "is_empty": False,
        "is_full": False,
        "remaining_capacity": 1,
        "top": "b",
        "bottom": "a",
    }
    assert stack.is_valid()


def test_dict_roundtrip_and_bad_payload():
    """Test to_dict/from_dict and rejection of non-Stack payloads."""
    stack = BoundedStack(capacity=4)
    stack.push("a")
    stack.push("b")

    restored = BoundedStack.from_dict(stack.to_dict())
    assert restored.to_list() == ["a", "b"]
    assert restored.capacity == 4

    with pytest.raises(ValueError):
        BoundedStack.from_dict({"type": "Queue", "items": []})
    with pytest.raises(ValueError):
        BoundedStack.from_dict({})


def test_from_dict_truncates_to_capacity():
    """Test from_dict keeps only the most recent items that fit."""
    restored = BoundedStack.from_dict({"type": "Stack", "items": ["a", "b", "c"], "capacity": 2})
    assert restored.to_list() == ["b", "c"]
