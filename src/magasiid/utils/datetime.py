"""Datetime utilities for consistent timestamp handling."""

import time
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC datetime.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(timezone.utc)


def epoch_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000
