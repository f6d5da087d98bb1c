"""
Clock - injectable time source

Responsibilities:
- Wall-clock time for event and view timestamps
- Monotonic time for toast expiry
- Local date for log rotation

Architecture:
- Default implementation uses real system time
- Tests inject frozen time through the same protocol
"""
import time
from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """
    Protocol for clock implementations (real or mock).

    Allows deterministic testing by injecting fake time.
    """

    def now_unix_ms(self) -> int:
        """Wall-clock time in milliseconds since epoch (UTC)."""
        ...

    def now_mono_ns(self) -> int:
        """Monotonic time in nanoseconds (for expiry/age)."""
        ...

    def now_local(self) -> datetime:
        """Current time in the local timezone."""
        ...


class SystemClock:
    """
    Real system clock implementation.

    Uses time.time() for wall-clock and time.perf_counter_ns() for monotonic.
    """

    def now_unix_ms(self) -> int:
        return int(time.time() * 1000)

    def now_mono_ns(self) -> int:
        return time.perf_counter_ns()

    def now_local(self) -> datetime:
        return datetime.now().astimezone()
