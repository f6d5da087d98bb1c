"""
Feedback event schema for controller→sink communication

Architecture invariant: controllers emit exactly one FeedbackEvent per
command. Sinks display it; the core never retains it.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class FeedbackKind(str, Enum):
    """Outcome tag of a command (closed set)."""
    SUCCESS = "success"
    VALIDATION_ERROR = "validation-error"
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"


class Severity(str, Enum):
    """Display tone for sinks (maps to toast types)."""
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class FeedbackEvent:
    """
    Tagged outcome of one controller command.

    `value` carries the pushed/popped/peeked element when there is one;
    None for failures and for reads on an empty container.
    """
    kind: FeedbackKind
    message: str
    operation: str  # push | pop | peek | enqueue | ... | set_capacity | load
    container: str  # stack | queue

    value: Optional[Any] = None
    severity: Severity = Severity.INFO
    ts_unix_ms: int = 0

    @property
    def is_failure(self) -> bool:
        return self.kind is not FeedbackKind.SUCCESS
