"""Timestamp helpers for signed requests."""

from __future__ import annotations

import time


class TimestampError(ValueError):
    """Raised when a signed timestamp is malformed or outside the permitted skew."""


def get_timestamp() -> int:
    """Current unix time in whole seconds."""
    return int(time.time())


def assert_within_skew(timestamp: object, *, max_skew_seconds: int, now: int | None = None) -> int:
    if isinstance(timestamp, bool) or timestamp is None:
        raise TimestampError("timestamp missing")
    try:
        value = int(timestamp)
    except (TypeError, ValueError) as exc:
        raise TimestampError("timestamp is not an integer") from exc
    ref = get_timestamp() if now is None else now
    skew = abs(ref - value)
    if skew > max_skew_seconds:
        raise TimestampError(f"timestamp skew {skew}s exceeds max {max_skew_seconds}s")
    return value
