"""
QueueController - binds queue commands to a BoundedQueue
"""
from typing import Any, Optional

from stackqueue.bounded_queue import DEFAULT_QUEUE_CAPACITY, BoundedQueue
from stackqueue.clock import ClockProtocol
from stackqueue.commands import QueueCommand, QueueOp
from stackqueue.controller import DEFAULT_MAX_VALUE_LENGTH, CommandResult, DemoController
from stackqueue.errors import ContainerError
from stackqueue.feedback import FeedbackKind, Severity
from stackqueue.sinks import Animator, NotificationSink
from stackqueue.view_state import ViewState, build_queue_view


SAMPLE_DATA = ("Apple", "Banana", "Cherry", "Date")


class QueueController(DemoController):
    """
    Queue demo controller.

    Dequeue on an empty queue is a benign empty read, not an underflow.
    """

    container_name = "queue"

    def __init__(
        self,
        capacity: int = DEFAULT_QUEUE_CAPACITY,
        sink: Optional[NotificationSink] = None,
        animator: Optional[Animator] = None,
        clock: Optional[ClockProtocol] = None,
        max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
    ):
        super().__init__(
            BoundedQueue(capacity),
            sink=sink,
            animator=animator,
            clock=clock,
            max_value_length=max_value_length,
        )

    @property
    def queue(self) -> BoundedQueue:
        return self.container

    def _build_view(self, view_id: int, ts_unix_ms: int) -> ViewState:
        return build_queue_view(self.container, view_id, ts_unix_ms)

    def _add(self, value: Any) -> None:
        self.queue.enqueue(value)

    def dispatch(self, command: QueueCommand) -> CommandResult:
        """
        Route a QueueCommand to its operation.

        Raises:
            TypeError: If command is not a QueueCommand
            ValueError: If command.op is not a known QueueOp
        """
        if not isinstance(command, QueueCommand):
            raise TypeError(f"Expected QueueCommand, got {type(command).__name__}")

        op = command.op
        if op is QueueOp.ENQUEUE:
            return self.enqueue(command.value)
        elif op is QueueOp.DEQUEUE:
            return self.dequeue()
        elif op is QueueOp.FRONT:
            return self.front()
        elif op is QueueOp.REAR:
            return self.rear()
        elif op is QueueOp.CLEAR:
            return self.clear()
        elif op is QueueOp.SET_CAPACITY:
            return self.set_capacity(command.value)
        elif op is QueueOp.LOAD_SAMPLE:
            return self.load_sample_data()

        raise ValueError(f"Unknown queue op: {op!r}")

    def enqueue(self, value: Any = None) -> CommandResult:
        cleaned, problem = self._clean_value(value)
        if problem:
            return self._rejected(problem, "enqueue")

        try:
            self.queue.enqueue(cleaned)
        except ContainerError as e:
            return self._failed(e, "enqueue")

        self._animate("push", self.queue.size() - 1)
        return self._finish(
            self._event(
                FeedbackKind.SUCCESS,
                f"Enqueued: {cleaned}",
                "enqueue",
                value=cleaned,
                severity=Severity.SUCCESS,
            )
        )

    def dequeue(self) -> CommandResult:
        value = self.queue.dequeue()
        if value is None:
            return self._finish(
                self._event(FeedbackKind.SUCCESS, "Queue is empty", "dequeue", severity=Severity.WARNING)
            )

        self._animate("pop", 0)
        return self._finish(
            self._event(
                FeedbackKind.SUCCESS,
                f"Dequeued: {value}",
                "dequeue",
                value=value,
                severity=Severity.SUCCESS,
            )
        )

    def front(self) -> CommandResult:
        return self._peek_end("front", self.queue.front(), 0)

    def rear(self) -> CommandResult:
        return self._peek_end("rear", self.queue.rear(), self.queue.size() - 1)

    def _peek_end(self, operation: str, value: Any, index: int) -> CommandResult:
        if value is None:
            return self._finish(
                self._event(FeedbackKind.SUCCESS, "Queue is empty", operation, severity=Severity.WARNING)
            )

        self._animate("highlight", index)
        return self._finish(
            self._event(
                FeedbackKind.SUCCESS,
                f"{operation.capitalize()} element: {value}",
                operation,
                value=value,
                severity=Severity.INFO,
            )
        )

    def clear(self) -> CommandResult:
        if self.queue.is_empty():
            return self._finish(
                self._event(
                    FeedbackKind.SUCCESS, "Queue is already empty", "clear", severity=Severity.INFO
                )
            )

        removed = self.queue.size()
        self.queue.clear()
        self._animate("clear")
        return self._finish(
            self._event(
                FeedbackKind.SUCCESS,
                f"Queue cleared ({removed} items removed)",
                "clear",
                severity=Severity.SUCCESS,
            )
        )

    def load_sample_data(self) -> CommandResult:
        return self.load_state(SAMPLE_DATA)
