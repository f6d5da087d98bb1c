"""
StackController - binds stack commands to a BoundedStack
"""
from typing import Any, Optional

from stackqueue.bounded_stack import DEFAULT_STACK_CAPACITY, BoundedStack
from stackqueue.clock import ClockProtocol
from stackqueue.commands import StackCommand, StackOp
from stackqueue.controller import DEFAULT_MAX_VALUE_LENGTH, CommandResult, DemoController
from stackqueue.errors import ContainerError
from stackqueue.feedback import FeedbackKind, Severity
from stackqueue.sinks import Animator, NotificationSink
from stackqueue.view_state import ViewState, build_stack_view


class StackController(DemoController):
    """
    Stack demo controller.

    pop on an empty stack is an underflow; peek on an empty stack is a
    successful read that reports the stack is empty.
    """

    container_name = "stack"

    def __init__(
        self,
        capacity: int = DEFAULT_STACK_CAPACITY,
        sink: Optional[NotificationSink] = None,
        animator: Optional[Animator] = None,
        clock: Optional[ClockProtocol] = None,
        max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
    ):
        super().__init__(
            BoundedStack(capacity),
            sink=sink,
            animator=animator,
            clock=clock,
            max_value_length=max_value_length,
        )

    @property
    def stack(self) -> BoundedStack:
        return self.container

    def _build_view(self, view_id: int, ts_unix_ms: int) -> ViewState:
        return build_stack_view(self.container, view_id, ts_unix_ms)

    def _add(self, value: Any) -> None:
        self.stack.push(value)

    def dispatch(self, command: StackCommand) -> CommandResult:
        """
        Route a StackCommand to its operation.

        Raises:
            TypeError: If command is not a StackCommand
            ValueError: If command.op is not a known StackOp
        """
        if not isinstance(command, StackCommand):
            raise TypeError(f"Expected StackCommand, got {type(command).__name__}")

        op = command.op
        if op is StackOp.PUSH:
            return self.push(command.value)
        elif op is StackOp.POP:
            return self.pop()
        elif op is StackOp.PEEK:
            return self.peek()
        elif op is StackOp.CLEAR:
            return self.clear()
        elif op is StackOp.SET_CAPACITY:
            return self.set_capacity(command.value)

        raise ValueError(f"Unknown stack op: {op!r}")

    def push(self, value: Any = None) -> CommandResult:
        cleaned, problem = self._clean_value(value)
        if problem:
            return self._rejected(problem, "push")

        try:
            self.stack.push(cleaned)
        except ContainerError as e:
            return self._failed(e, "push")

        self._animate("push", self.stack.size() - 1)
        return self._finish(
            self._event(
                FeedbackKind.SUCCESS,
                f"Pushed '{cleaned}' onto the stack",
                "push",
                value=cleaned,
                severity=Severity.SUCCESS,
            )
        )

    def pop(self) -> CommandResult:
        try:
            value = self.stack.pop()
        except ContainerError as e:
            return self._failed(e, "pop")

        self._animate("pop", self.stack.size())
        return self._finish(
            self._event(
                FeedbackKind.SUCCESS,
                f"Popped '{value}' from the stack",
                "pop",
                value=value,
                severity=Severity.SUCCESS,
            )
        )

    def peek(self) -> CommandResult:
        value = self.stack.peek()
        if value is None:
            return self._finish(
                self._event(FeedbackKind.SUCCESS, "Stack is empty", "peek", severity=Severity.WARNING)
            )

        self._animate("highlight", self.stack.size() - 1)
        return self._finish(
            self._event(
                FeedbackKind.SUCCESS,
                f"Top element: '{value}'",
                "peek",
                value=value,
                severity=Severity.INFO,
            )
        )

    def clear(self) -> CommandResult:
        if self.stack.is_empty():
            return self._finish(
                self._event(
                    FeedbackKind.SUCCESS, "Stack is already empty", "clear", severity=Severity.INFO
                )
            )

        removed = self.stack.size()
        self.stack.clear()
        self._animate("clear")
        return self._finish(
            self._event(
                FeedbackKind.SUCCESS,
                f"Stack cleared ({removed} items removed)",
                "clear",
                severity=Severity.SUCCESS,
            )
        )
