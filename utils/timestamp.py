"""Microsecond timestamp utilities."""

import time
from datetime import datetime, timezone

from core.errors import ClockError


def now_micros():
    """Current time in microseconds since Unix epoch, floor-truncated."""
    try:
        nanos = time.time_ns()
    except OSError as exc:
        raise ClockError("System clock unavailable", cause=exc) from exc
    if nanos < 0:
        raise ClockError("System clock reports a time before the Unix epoch",
                         context={"nanos": nanos})
    return nanos // 1_000


def micros_to_datetime(epoch_us):
    """UTC datetime for a microsecond timestamp."""
    seconds, micros = divmod(epoch_us, 1_000_000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=micros)


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = micros_to_datetime(epoch_us)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
