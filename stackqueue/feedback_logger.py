"""
Feedback Logger

JSONL append-only audit trail of FeedbackEvents with:
- One line per event, flushed immediately
- Crash-tolerant (parseable except possibly last truncated line)
- Rotation by local date + session_id
- Schema version: feedback.v1
"""
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from stackqueue.clock import ClockProtocol, SystemClock
from stackqueue.feedback import FeedbackEvent


SCHEMA_VERSION = "feedback.v1"


@dataclass
class FeedbackRecord:
    """
    One logged feedback line.

    Schema version: feedback.v1
    """
    session_id: str
    container: str
    operation: str
    kind: str
    severity: str
    message: str
    ts_unix_ms: int
    value: Optional[Any] = None
    schema_version: str = SCHEMA_VERSION

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "schema_version": self.schema_version,
            "session_id": self.session_id,
            "container": self.container,
            "operation": self.operation,
            "kind": self.kind,
            "severity": self.severity,
            "value": self.value,
            "message": self.message,
            "ts_unix_ms": self.ts_unix_ms,
        }


class FeedbackLogger:
    """
    JSONL append-only logger for FeedbackEvents.

    Implements the NotificationSink protocol, so it can be passed to a
    controller directly or combined with other sinks via FanoutSink.

    Usage:
        feedback_log = FeedbackLogger(session_id="abc123", log_dir="./logs")
        controller = StackController(sink=feedback_log)
    """

    def __init__(
        self,
        session_id: str,
        log_dir: str = "./logs",
        clock: Optional[ClockProtocol] = None,
    ):
        """
        Args:
            session_id: Unique session identifier
            log_dir: Directory for log files
            clock: Clock for local date (default SystemClock)
        """
        self.session_id = session_id
        self.log_dir = Path(log_dir)
        self.clock = clock or SystemClock()

        self._current_file: Optional[Any] = None
        self._current_date: Optional[str] = None

        self.log_dir.mkdir(parents=True, exist_ok=True)

    def notify(self, event: FeedbackEvent) -> None:
        self._check_rotation()

        record = FeedbackRecord(
            session_id=self.session_id,
            container=event.container,
            operation=event.operation,
            kind=event.kind.value,
            severity=event.severity.value,
            message=event.message,
            ts_unix_ms=event.ts_unix_ms,
            value=_jsonable(event.value),
        )
        self._write_record(record)

    @property
    def current_path(self) -> Optional[Path]:
        if self._current_date is None:
            return None
        return self._get_filepath(self._current_date)

    def _check_rotation(self) -> None:
        """Open a new file if the local date changed."""
        local_date = self.clock.now_local().strftime("%Y-%m-%d")

        if local_date != self._current_date:
            if self._current_file is not None:
                self._current_file.close()
                self._current_file = None

            self._current_date = local_date
            self._current_file = open(self._get_filepath(local_date), "a", encoding="utf-8")

    def _get_filepath(self, local_date: str) -> Path:
        return self.log_dir / f"feedback_{local_date}_{self.session_id}.jsonl"

    def _write_record(self, record: FeedbackRecord) -> None:
        if self._current_file is None:
            raise RuntimeError("File not opened (call _check_rotation first)")

        json_line = json.dumps(record.to_dict(), separators=(',', ':'))
        self._current_file.write(json_line)
        self._current_file.write('\n')

        # Flush immediately for crash tolerance
        self._current_file.flush()
        os.fsync(self._current_file.fileno())

    def close(self) -> None:
        if self._current_file is not None:
            self._current_file.close()
            self._current_file = None

    def __del__(self):
        self.close()


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)
