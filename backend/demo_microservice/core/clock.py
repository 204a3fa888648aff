"""Clock — timestamp formatting for response payloads and headers.

Invariants:
    - utc_timestamp() is an ISO-8601 UTC instant ending in "Z"
    - local_timestamp() is an ISO-8601 local date-time with no offset
    - epoch_millis() is an integer count of milliseconds since the epoch

Design Decisions:
    - Optional `now` parameter on every function: callers pass a fixed datetime in tests,
      production passes nothing (ADR: pure core, clock injected at the edge)
"""

import time
from datetime import datetime, timezone


def utc_timestamp(now: datetime | None = None) -> str:
    """Format an instant as ISO-8601 UTC with a trailing Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def local_timestamp(now: datetime | None = None) -> str:
    """Format the local wall-clock date-time, no offset."""
    now = now or datetime.now()
    return now.replace(tzinfo=None).isoformat()


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000
