"""
ViewState - Read-only view snapshot schema (view.v1)

Rebuilt whole from the container after every command; never patched.
"""
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class ViewItem:
    """One rendered element of the projection."""
    index: int
    value: Any
    is_lead_end: bool  # top (stack) | front (queue)
    is_trail_end: bool  # bottom (stack) | rear (queue)


@dataclass(frozen=True)
class ViewState:
    """
    Immutable view snapshot published by a controller.
    Schema version: view.v1

    `items` is in container order: stack bottom→top, queue front→rear.
    """
    schema_version: str = "view.v1"
    container: str = ""  # stack | queue
    view_id: int = 0
    ts_unix_ms: int = 0

    size: int = 0
    capacity: int = 0
    remaining_capacity: int = 0
    is_empty: bool = True
    is_full: bool = False
    top_or_front: Optional[Any] = None
    bottom_or_rear: Optional[Any] = None
    status: str = "Empty"  # Empty | Active | Has Data | Full

    items: tuple[ViewItem, ...] = field(default_factory=tuple)

    def values(self) -> list[Any]:
        return [item.value for item in self.items]


def project_items(values: Sequence[Any], lead_is_last: bool) -> tuple[ViewItem, ...]:
    """
    Build the (value, is_lead_end, is_trail_end) projection.

    Args:
        values: Container contents in storage order
        lead_is_last: True for a stack (top is the last element),
                      False for a queue (front is the first element)

    Returns:
        Tuple of ViewItem; a single element is both lead and trail
    """
    last = len(values) - 1
    items = []
    for index, value in enumerate(values):
        at_start = index == 0
        at_end = index == last
        items.append(
            ViewItem(
                index=index,
                value=value,
                is_lead_end=at_end if lead_is_last else at_start,
                is_trail_end=at_start if lead_is_last else at_end,
            )
        )
    return tuple(items)


def build_stack_view(stack, view_id: int, ts_unix_ms: int) -> ViewState:
    """Snapshot a BoundedStack."""
    values = stack.to_list()

    if stack.is_empty():
        status = "Empty"
    elif stack.is_full():
        status = "Full"
    else:
        status = "Active"

    return ViewState(
        container="stack",
        view_id=view_id,
        ts_unix_ms=ts_unix_ms,
        size=len(values),
        capacity=stack.capacity,
        remaining_capacity=stack.remaining_capacity(),
        is_empty=stack.is_empty(),
        is_full=stack.is_full(),
        top_or_front=stack.peek(),
        bottom_or_rear=values[0] if values else None,
        status=status,
        items=project_items(values, lead_is_last=True),
    )


def build_queue_view(queue, view_id: int, ts_unix_ms: int) -> ViewState:
    """Snapshot a BoundedQueue."""
    values = queue.to_list()

    if queue.is_empty():
        status = "Empty"
    elif queue.is_full():
        status = "Full"
    else:
        status = "Has Data"

    return ViewState(
        container="queue",
        view_id=view_id,
        ts_unix_ms=ts_unix_ms,
        size=len(values),
        capacity=queue.capacity,
        remaining_capacity=queue.remaining_capacity(),
        is_empty=queue.is_empty(),
        is_full=queue.is_full(),
        top_or_front=queue.front(),
        bottom_or_rear=queue.rear(),
        status=status,
        items=project_items(values, lead_is_last=False),
    )
