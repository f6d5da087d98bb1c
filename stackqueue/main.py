"""
Main entrypoint - Stack & Queue Visualizer (terminal)

Wires config, sinks and both controllers, then runs the CLI over stdin
or over a script file given as the first argument.
"""
import sys
import uuid
import logging
from pathlib import Path
from typing import Optional

from stackqueue.clock import SystemClock
from stackqueue.config import load_demo_config, log_demo_config
from stackqueue.feedback_logger import FeedbackLogger
from stackqueue.queue_controller import QueueController
from stackqueue.sinks import FanoutSink, LoggingSink, ToastBoard
from stackqueue.stack_controller import StackController
from stackqueue.ui import DemoCLI


logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the demo.

    Usage:
        python -m stackqueue.main            # interactive, reads stdin
        python -m stackqueue.main script.txt # one command per line

    Returns:
        Process exit code
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    argv = sys.argv[1:] if argv is None else argv

    config = load_demo_config()
    log_demo_config(config)

    clock = SystemClock()
    session_id = uuid.uuid4().hex[:12]

    toast_board = ToastBoard(
        max_toasts=config.toast_max,
        default_duration_ms=config.toast_duration_ms,
        clock=clock,
    )
    sink = FanoutSink(toast_board, LoggingSink())

    feedback_log = None
    if config.feedback_log_enabled:
        Path(config.feedback_log_dir).mkdir(parents=True, exist_ok=True)
        logger.info(f"Enabling feedback log: {config.feedback_log_dir} (session {session_id})")
        feedback_log = FeedbackLogger(session_id=session_id, log_dir=config.feedback_log_dir, clock=clock)
        sink.sinks.append(feedback_log)

    stack_controller = StackController(
        capacity=config.stack_capacity,
        sink=sink,
        clock=clock,
        max_value_length=config.max_value_length,
    )
    queue_controller = QueueController(
        capacity=config.queue_capacity,
        sink=sink,
        clock=clock,
        max_value_length=config.max_value_length,
    )
    cli = DemoCLI(stack_controller, queue_controller, toast_board=toast_board, clock=clock)

    try:
        if argv:
            script = Path(argv[0])
            if not script.exists():
                logger.error(f"Script not found: {script}")
                return 1
            with open(script, "r", encoding="utf-8") as f:
                cli.run(f)
        else:
            cli.run(sys.stdin, prompt=sys.stdin.isatty())
    finally:
        if feedback_log is not None:
            feedback_log.close()
        logger.info("Shutdown complete.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
