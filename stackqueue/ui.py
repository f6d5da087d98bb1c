"""
CLI UI - line-driven front-end for the stack and queue demos

Maps typed lines to StackCommand / QueueCommand and renders the
resulting ViewState and FeedbackEvent. The UI holds no container state;
it writes ONLY through controller.dispatch().
"""
from typing import Iterable, Optional

from stackqueue.clock import ClockProtocol, SystemClock
from stackqueue.commands import QueueCommand, QueueOp, StackCommand, StackOp
from stackqueue.feedback import FeedbackEvent
from stackqueue.queue_controller import QueueController
from stackqueue.sinks import ToastBoard
from stackqueue.stack_controller import StackController
from stackqueue.view_state import ViewState


HELP_TEXT = """Commands:
  push <value> | pop | peek                     (stack)
  enqueue <value> | dequeue | front | rear      (queue)
  clear | capacity <n> | show                   (active container)
  stack | queue                                 switch active container
  stack <cmd> | queue <cmd>                     target a container once
  sample                                        load sample data into the queue
  help | quit"""

TARGETS = {"stack": "stack", "s": "stack", "queue": "queue", "q": "queue"}

STACK_VERBS = {
    "push": StackOp.PUSH,
    "pop": StackOp.POP,
    "peek": StackOp.PEEK,
}

QUEUE_VERBS = {
    "enqueue": QueueOp.ENQUEUE,
    "dequeue": QueueOp.DEQUEUE,
    "front": QueueOp.FRONT,
    "rear": QueueOp.REAR,
}


def render_view(view: ViewState) -> str:
    """Render a ViewState as a few lines of text."""
    header = (
        f"{view.container.upper()}  size={view.size}/{view.capacity}  status={view.status}"
    )
    if view.is_empty:
        return f"{header}\n  (empty)"

    if view.container == "stack":
        # Top first, like a physical stack
        lines = [header]
        for item in reversed(view.items):
            label = ""
            if item.is_lead_end:
                label = "  <- top"
            if item.is_trail_end:
                label += "  <- bottom"
            lines.append(f"  | {item.value} |{label}")
        return "\n".join(lines)

    cells = " ".join(f"[{item.value}]" for item in view.items)
    return f"{header}\n  front -> {cells} <- rear"


def render_feedback(event: FeedbackEvent) -> str:
    return f"[{event.severity.value.upper()}] {event.message}"


class DemoCLI:
    """
    Line-driven CLI for both demos.

    handle_line() returns the text to print, or None when the user quits.
    """

    def __init__(
        self,
        stack_controller: StackController,
        queue_controller: QueueController,
        toast_board: Optional[ToastBoard] = None,
        clock: Optional[ClockProtocol] = None,
    ):
        self.stack_controller = stack_controller
        self.queue_controller = queue_controller
        self.toast_board = toast_board
        self.clock = clock or SystemClock()
        self.active = "stack"
        self._cmd_id_counter = 0

    def run(self, lines: Iterable[str], prompt: bool = False) -> None:
        """
        Run the CLI over an iterable of input lines (stdin or a script).

        Args:
            lines: Input lines
            prompt: Print a prompt before each line (interactive use)
        """
        print("Stack & Queue Visualizer")
        print("=" * 80)
        print(HELP_TEXT)
        print()

        try:
            if prompt:
                print(f"{self.active}> ", end="", flush=True)
            for line in lines:
                output = self.handle_line(line)
                if output is None:
                    break
                if output:
                    print(output)
                if prompt:
                    print(f"{self.active}> ", end="", flush=True)
        except KeyboardInterrupt:
            print("\n\nShutdown requested...")

    def handle_line(self, line: str) -> Optional[str]:
        if self.toast_board is not None:
            self.toast_board.tick(self.clock.now_mono_ns())

        parts = line.strip().split(maxsplit=1)
        if not parts:
            return ""

        word = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else None

        if word in ("quit", "exit"):
            return None
        if word == "help":
            return HELP_TEXT

        target = None
        if word in TARGETS:
            target = TARGETS[word]
            if rest is None:
                self.active = target
                return render_view(self._controller(target).view_state)
            parts = rest.split(maxsplit=1)
            word = parts[0].lower()
            rest = parts[1] if len(parts) > 1 else None

        return self._handle_verb(word, rest, target)

    def _handle_verb(self, word: str, rest: Optional[str], target: Optional[str]) -> str:
        if word in STACK_VERBS and target in (None, "stack"):
            return self._send_stack(STACK_VERBS[word], rest)
        if word in QUEUE_VERBS and target in (None, "queue"):
            return self._send_queue(QUEUE_VERBS[word], rest)
        if word == "sample" and target in (None, "queue"):
            return self._send_queue(QueueOp.LOAD_SAMPLE, None)

        container = target or self.active
        if word == "clear":
            return self._send(container, "clear", None)
        if word == "capacity":
            return self._send(container, "set_capacity", rest)
        if word == "show":
            return render_view(self._controller(container).view_state)

        return f"Unknown command: {word!r} (type 'help')"

    def _send(self, container: str, op_name: str, value: Optional[str]) -> str:
        if container == "stack":
            return self._send_stack(StackOp(op_name), value)
        return self._send_queue(QueueOp(op_name), value)

    def _next_cmd_id(self) -> int:
        self._cmd_id_counter += 1
        return self._cmd_id_counter

    def _send_stack(self, op: StackOp, value: Optional[str]) -> str:
        cmd = StackCommand(
            cmd_id=self._next_cmd_id(),
            ts_unix_ms=self.clock.now_unix_ms(),
            op=op,
            value=value,
        )
        self.active = "stack"
        return self._render(*self.stack_controller.dispatch(cmd))

    def _send_queue(self, op: QueueOp, value: Optional[str]) -> str:
        cmd = QueueCommand(
            cmd_id=self._next_cmd_id(),
            ts_unix_ms=self.clock.now_unix_ms(),
            op=op,
            value=value,
        )
        self.active = "queue"
        return self._render(*self.queue_controller.dispatch(cmd))

    def _controller(self, container: str):
        return self.stack_controller if container == "stack" else self.queue_controller

    def _render(self, view: ViewState, event: FeedbackEvent) -> str:
        return f"{render_view(view)}\n{render_feedback(event)}"
