"""
DemoController - shared command pipeline for the stack and queue demos

Every command is one synchronous transition:
    validate → mutate-or-fail → rebuild ViewState → emit FeedbackEvent

Invariants:
- Exactly one FeedbackEvent per command, success or failure
- ContainerError never escapes; it becomes a FeedbackEvent
- ViewState is rebuilt from the container, never patched
- Sink/animator failures are logged and never affect the container
"""
import logging
from typing import Any, Iterable, Optional

from stackqueue.clock import ClockProtocol, SystemClock
from stackqueue.errors import (
    ContainerError,
    InvalidCapacity,
    InvalidValue,
    Overflow,
    Underflow,
)
from stackqueue.feedback import FeedbackEvent, FeedbackKind, Severity
from stackqueue.sinks import Animator, NotificationSink, NullAnimator, NullSink
from stackqueue.view_state import ViewState


logger = logging.getLogger(__name__)

DEFAULT_MAX_VALUE_LENGTH = 15

CommandResult = tuple[ViewState, FeedbackEvent]


def _parse_capacity(capacity: Any) -> Optional[int]:
    """Return capacity as an int, or None if it is not integral input."""
    if isinstance(capacity, bool):
        return None
    if isinstance(capacity, int):
        return capacity
    if isinstance(capacity, str):
        try:
            return int(capacity.strip())
        except ValueError:
            return None
    return None


class DemoController:
    """
    Base controller owning one bounded container and its ViewState.

    Subclasses provide the container operations and `_build_view`.
    """

    container_name = ""

    def __init__(
        self,
        container,
        sink: Optional[NotificationSink] = None,
        animator: Optional[Animator] = None,
        clock: Optional[ClockProtocol] = None,
        max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
    ):
        self.container = container
        self.sink = sink or NullSink()
        self.animator = animator or NullAnimator()
        self.clock = clock or SystemClock()
        self.max_value_length = max_value_length

        self._view_id = 0
        self._view_state = self._build_view(self._view_id, self.clock.now_unix_ms())

    @property
    def view_state(self) -> ViewState:
        """Latest published snapshot."""
        return self._view_state

    def _build_view(self, view_id: int, ts_unix_ms: int) -> ViewState:
        raise NotImplementedError

    # -- command pipeline ---------------------------------------------------

    def _clean_value(self, value: Any) -> tuple[Any, Optional[str]]:
        """
        Normalize an input value.

        Returns:
            (cleaned_value, problem) where problem is a validation message
            or None when the value is acceptable
        """
        if value is None:
            return None, "Please enter a value"

        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None, "Please enter a value"
            if len(value) > self.max_value_length:
                return None, f"Value too long (max {self.max_value_length} characters)"

        return value, None

    def _event(
        self,
        kind: FeedbackKind,
        message: str,
        operation: str,
        value: Any = None,
        severity: Severity = Severity.INFO,
    ) -> FeedbackEvent:
        return FeedbackEvent(
            kind=kind,
            message=message,
            operation=operation,
            container=self.container_name,
            value=value,
            severity=severity,
            ts_unix_ms=self.clock.now_unix_ms(),
        )

    def _rejected(self, message: str, operation: str) -> CommandResult:
        logger.info(f"{self.container_name}.{operation} rejected: {message}")
        return self._finish(
            self._event(
                FeedbackKind.VALIDATION_ERROR, message, operation, severity=Severity.WARNING
            )
        )

    def _failed(self, error: ContainerError, operation: str) -> CommandResult:
        """Map a container failure onto its FeedbackEvent."""
        if isinstance(error, Overflow):
            kind, severity = FeedbackKind.OVERFLOW, Severity.ERROR
        elif isinstance(error, Underflow):
            kind, severity = FeedbackKind.UNDERFLOW, Severity.WARNING
        elif isinstance(error, (InvalidValue, InvalidCapacity)):
            kind, severity = FeedbackKind.VALIDATION_ERROR, Severity.WARNING
        else:
            raise ValueError(f"Unhandled container error: {type(error).__name__}")

        logger.info(f"{self.container_name}.{operation} failed: {error.message}")
        return self._finish(self._event(kind, error.message, operation, severity=severity))

    def _finish(self, event: FeedbackEvent) -> CommandResult:
        """Rebuild the view, hand the event to the sink, return both."""
        self._view_id += 1
        self._view_state = self._build_view(self._view_id, event.ts_unix_ms)

        try:
            self.sink.notify(event)
        except Exception:
            logger.exception(f"Notification sink failed on {self.container_name}.{event.operation}")

        logger.debug(
            f"{self.container_name}.{event.operation} -> {event.kind.value} "
            f"(size={self._view_state.size}, view_id={self._view_id})"
        )
        return self._view_state, event

    def _animate(self, effect: str, index: Optional[int] = None) -> None:
        try:
            self.animator.animate(effect, index)
        except Exception:
            logger.exception(f"Animator failed on {self.container_name} effect '{effect}'")

    # -- shared operations --------------------------------------------------

    def set_capacity(self, capacity: Any) -> CommandResult:
        """
        Change the container capacity.

        Accepts an int or a string holding one. Shrinking below the current
        size keeps the most recently added elements. Floats, bools and
        non-positive values are rejected.
        """
        new_capacity = _parse_capacity(capacity)
        if new_capacity is None:
            return self._rejected(f"Capacity must be an integer, got {capacity!r}", "set_capacity")

        before = self.container.size()
        try:
            self.container.set_capacity(new_capacity)
        except ContainerError as e:
            return self._failed(e, "set_capacity")

        dropped = before - self.container.size()
        message = f"Capacity set to {new_capacity}"
        if dropped:
            message += f" ({dropped} oldest removed)"
        return self._finish(
            self._event(
                FeedbackKind.SUCCESS,
                message,
                "set_capacity",
                value=new_capacity,
                severity=Severity.SUCCESS,
            )
        )

    def load_state(self, values: Iterable[Any]) -> CommandResult:
        """
        Replace the contents with values (in insertion order).

        All-or-nothing: if any value is invalid or the values do not fit,
        the container is left untouched and a validation error is emitted.
        """
        cleaned = []
        for raw in values:
            value, problem = self._clean_value(raw)
            if problem:
                return self._rejected(f"Cannot load {raw!r}: {problem}", "load")
            cleaned.append(value)

        if len(cleaned) > self.container.capacity:
            return self._rejected(
                f"Cannot load {len(cleaned)} items into capacity {self.container.capacity}",
                "load",
            )

        self.container.clear()
        for value in cleaned:
            self._add(value)

        return self._finish(
            self._event(
                FeedbackKind.SUCCESS,
                f"Loaded {len(cleaned)} items",
                "load",
                severity=Severity.SUCCESS,
            )
        )

    def reset(self) -> CommandResult:
        return self.clear()

    def clear(self) -> CommandResult:
        raise NotImplementedError

    def _add(self, value: Any) -> None:
        raise NotImplementedError

    def stats(self) -> dict:
        stats = self.container.stats()
        stats["view_id"] = self._view_id
        stats["status"] = self._view_state.status
        return stats
