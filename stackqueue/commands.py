"""
Commands: explicit messages dispatched synchronously to a controller.

The presentation layer maps its own input events (keys, buttons, typed
lines) to these commands; controllers never see raw UI events.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class StackOp(str, Enum):
    PUSH = "push"
    POP = "pop"
    PEEK = "peek"
    CLEAR = "clear"
    SET_CAPACITY = "set_capacity"


class QueueOp(str, Enum):
    ENQUEUE = "enqueue"
    DEQUEUE = "dequeue"
    FRONT = "front"
    REAR = "rear"
    CLEAR = "clear"
    SET_CAPACITY = "set_capacity"
    LOAD_SAMPLE = "load_sample"


@dataclass(frozen=True)
class StackCommand:
    """Command for a StackController."""
    cmd_id: int
    ts_unix_ms: int
    op: StackOp
    value: Optional[str] = None  # push value, or capacity for SET_CAPACITY


@dataclass(frozen=True)
class QueueCommand:
    """Command for a QueueController."""
    cmd_id: int
    ts_unix_ms: int
    op: QueueOp
    value: Optional[str] = None  # enqueue value, or capacity for SET_CAPACITY
