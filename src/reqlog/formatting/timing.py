# src/reqlog/formatting/timing.py
"""
Request timing helpers.

The request logger records a `RequestStart` when a request arrives and turns
it into an elapsed millisecond value when the response is ready. Two clocks are
captured on purpose:
  - `wall`: an aware local datetime, rendered by `{request-time}`.
  - `monotonic_ns`: `time.perf_counter_ns()`, used for `{response-time}` so
    wall-clock adjustments cannot distort the duration.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000


def elapsed_ms(seconds: int, nanoseconds: int | None = None) -> float:
    """
    Combine whole seconds and a sub-second nanosecond part into milliseconds.

    A missing sub-second part counts as zero. Negative totals (clock skew) clamp to 0.0.
    """
    ms = seconds * 1000 + (nanoseconds or 0) / NANOS_PER_MILLI
    return ms if ms > 0 else 0.0


def timedelta_ms(delta: timedelta) -> float:
    """Elapsed milliseconds for a timedelta, using the same clamping as elapsed_ms()."""
    whole_seconds = delta.days * 86_400 + delta.seconds
    return elapsed_ms(whole_seconds, delta.microseconds * 1000)


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class RequestStart:
    wall: datetime = field(default_factory=_local_now)
    monotonic_ns: int = field(default_factory=time.perf_counter_ns)

    def elapsed_ms(self, now_ns: int | None = None) -> float:
        if now_ns is None:
            now_ns = time.perf_counter_ns()
        seconds, nanoseconds = divmod(now_ns - self.monotonic_ns, NANOS_PER_SECOND)
        return elapsed_ms(seconds, nanoseconds)


__all__ = ["elapsed_ms", "timedelta_ms", "RequestStart"]
