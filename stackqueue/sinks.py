"""
Notification sinks and animators (presentation collaborators)

Controllers hand every FeedbackEvent to a NotificationSink and every
visual effect to an Animator. Both are injected; the core works the same
whether they exist or not, and never waits on their timers.
"""
import itertools
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from stackqueue.clock import ClockProtocol, SystemClock
from stackqueue.feedback import FeedbackEvent, Severity


logger = logging.getLogger(__name__)

DEFAULT_MAX_TOASTS = 5
DEFAULT_TOAST_DURATION_MS = 4000
ERROR_TOAST_DURATION_MS = 6000

TOAST_TITLES = {
    Severity.SUCCESS: "Success",
    Severity.ERROR: "Error",
    Severity.WARNING: "Warning",
    Severity.INFO: "Information",
}


class NotificationSink(Protocol):
    """Receives one FeedbackEvent per controller command."""

    def notify(self, event: FeedbackEvent) -> None:
        ...


class Animator(Protocol):
    """
    Receives visual effects to play.

    effect: push | pop | highlight | clear
    index: position in the view projection, None for whole-container effects
    """

    def animate(self, effect: str, index: Optional[int]) -> None:
        ...


class NullSink:
    """Sink that drops every event."""

    def notify(self, event: FeedbackEvent) -> None:
        return None


class NullAnimator:
    """Animator that plays nothing."""

    def animate(self, effect: str, index: Optional[int]) -> None:
        return None


class LoggingSink:
    """Writes events to the `stackqueue.feedback` logger."""

    _LEVELS = {
        Severity.SUCCESS: logging.INFO,
        Severity.INFO: logging.INFO,
        Severity.WARNING: logging.WARNING,
        Severity.ERROR: logging.ERROR,
    }

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logging.getLogger("stackqueue.feedback")

    def notify(self, event: FeedbackEvent) -> None:
        self.log.log(
            self._LEVELS[event.severity],
            f"{event.container}.{event.operation} [{event.kind.value}] {event.message}",
        )


class FanoutSink:
    """
    Forwards each event to several sinks.

    A failing sink is logged and skipped; the rest still receive the event.
    """

    def __init__(self, *sinks: NotificationSink):
        self.sinks = list(sinks)

    def notify(self, event: FeedbackEvent) -> None:
        for sink in self.sinks:
            try:
                sink.notify(event)
            except Exception:
                logger.exception(f"Sink {type(sink).__name__} failed on {event.operation}")


@dataclass
class Toast:
    """One active toast."""
    toast_id: str
    title: str
    message: str
    severity: Severity
    shown_mono_ns: int
    duration_ms: int  # 0 = persistent

    def expired(self, now_mono_ns: int) -> bool:
        if self.duration_ms <= 0:
            return False
        return (now_mono_ns - self.shown_mono_ns) >= self.duration_ms * 1_000_000


class ToastBoard:
    """
    In-memory toast list usable as a NotificationSink.

    Features:
    - At most max_toasts active; the oldest is evicted first
    - Error toasts stay longer than the default duration
    - No timers or threads (tick-based expiry driven by the caller)

    Usage:
        board = ToastBoard()
        controller = StackController(sink=board)
        # Each render pass:
        board.tick(clock.now_mono_ns())
    """

    def __init__(
        self,
        max_toasts: int = DEFAULT_MAX_TOASTS,
        default_duration_ms: int = DEFAULT_TOAST_DURATION_MS,
        clock: Optional[ClockProtocol] = None,
    ):
        self.clock = clock or SystemClock()
        self._toasts: list[Toast] = []
        self._ids = itertools.count(1)
        self.max_toasts = DEFAULT_MAX_TOASTS
        self.default_duration_ms = DEFAULT_TOAST_DURATION_MS
        self.set_max_toasts(max_toasts)
        self.set_default_duration(default_duration_ms)

    def notify(self, event: FeedbackEvent) -> None:
        self.show(event.message, event.severity)

    def show(
        self,
        message: str,
        severity: Severity = Severity.INFO,
        title: Optional[str] = None,
        duration_ms: Optional[int] = None,
        toast_id: Optional[str] = None,
    ) -> str:
        """
        Add a toast and return its id.

        Reusing a toast_id replaces the existing toast with that id.
        """
        if toast_id is not None:
            self.dismiss(toast_id)

        while len(self._toasts) >= self.max_toasts:
            self._toasts.pop(0)

        if duration_ms is None:
            duration_ms = (
                ERROR_TOAST_DURATION_MS if severity is Severity.ERROR else self.default_duration_ms
            )

        toast = Toast(
            toast_id=toast_id or f"toast-{next(self._ids)}",
            title=title or TOAST_TITLES.get(severity, "Notification"),
            message=message,
            severity=severity,
            shown_mono_ns=self.clock.now_mono_ns(),
            duration_ms=duration_ms,
        )
        self._toasts.append(toast)
        return toast.toast_id

    def tick(self, now_mono_ns: int) -> list[Toast]:
        """Drop expired toasts and return the ones removed."""
        expired = [t for t in self._toasts if t.expired(now_mono_ns)]
        if expired:
            self._toasts = [t for t in self._toasts if not t.expired(now_mono_ns)]
        return expired

    def dismiss(self, toast_id: str) -> bool:
        before = len(self._toasts)
        self._toasts = [t for t in self._toasts if t.toast_id != toast_id]
        return len(self._toasts) != before

    def update(self, toast_id: str, message: str, title: Optional[str] = None) -> bool:
        for toast in self._toasts:
            if toast.toast_id == toast_id:
                toast.message = message
                if title:
                    toast.title = title
                return True
        return False

    def clear(self) -> None:
        self._toasts = []

    def active(self) -> list[Toast]:
        return list(self._toasts)

    def set_max_toasts(self, max_toasts: int) -> None:
        if max_toasts < 1:
            raise ValueError("Maximum toasts must be at least 1")
        self.max_toasts = max_toasts
        while len(self._toasts) > max_toasts:
            self._toasts.pop(0)

    def set_default_duration(self, duration_ms: int) -> None:
        if duration_ms < 0:
            raise ValueError("Duration cannot be negative")
        self.default_duration_ms = duration_ms
