"""
Tests for ViewState projection (view.v1)

Validates:
- project_items lead/trail flags for stack and queue orientation
- build_stack_view / build_queue_view fields
- Snapshots are immutable
"""
import pytest

from stackqueue.bounded_queue import BoundedQueue
from stackqueue.bounded_stack import BoundedStack
from stackqueue.view_state import ViewState, build_queue_view, build_stack_view, project_items


def test_project_items_empty():
    """Test empty projection."""
    assert project_items([], lead_is_last=True) == ()


def test_project_items_exactly_one_lead_and_trail():
    """Test non-empty projections flag exactly one lead and one trail."""
    for lead_is_last in (True, False):
        items = project_items(["a", "b", "c", "d"], lead_is_last=lead_is_last)
        assert sum(i.is_lead_end for i in items) == 1
        assert sum(i.is_trail_end for i in items) == 1
        assert [i.index for i in items] == [0, 1, 2, 3]


def test_project_items_orientation():
    """Test stack leads at the end, queue leads at the start."""
    stack_items = project_items(["a", "b"], lead_is_last=True)
    queue_items = project_items(["a", "b"], lead_is_last=False)

    assert stack_items[1].is_lead_end and stack_items[0].is_trail_end
    assert queue_items[0].is_lead_end and queue_items[1].is_trail_end


def test_build_stack_view_fields():
    """Test stack snapshot fields."""
    stack = BoundedStack(capacity=3)
    stack.push("a")
    stack.push("b")

    view = build_stack_view(stack, view_id=7, ts_unix_ms=123)

    assert view.schema_version == "view.v1"
    assert view.container == "stack"
    assert view.view_id == 7
    assert view.ts_unix_ms == 123
    assert view.size == 2
    assert view.capacity == 3
    assert view.remaining_capacity == 1
    assert view.top_or_front == "b"
    assert view.bottom_or_rear == "a"
    assert view.status == "Active"
    assert view.values() == ["a", "b"]


def test_build_queue_view_fields():
    """Test queue snapshot fields."""
    queue = BoundedQueue(capacity=2)
    queue.enqueue("x")
    queue.enqueue("y")

    view = build_queue_view(queue, view_id=1, ts_unix_ms=5)

    assert view.container == "queue"
    assert view.top_or_front == "x"
    assert view.bottom_or_rear == "y"
    assert view.is_full is True
    assert view.status == "Full"


def test_view_snapshot_detached_from_container():
    """Test a snapshot does not change when the container mutates later."""
    stack = BoundedStack(capacity=3)
    stack.push("a")
    view = build_stack_view(stack, view_id=1, ts_unix_ms=0)

    stack.push("b")

    assert view.size == 1
    assert view.values() == ["a"]


def test_view_state_frozen():
    """Test ViewState is immutable."""
    view = ViewState()
    with pytest.raises(Exception):  # FrozenInstanceError
        view.size = 1  # type: ignore
