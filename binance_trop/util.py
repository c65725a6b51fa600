"""Query-string building and small value helpers for REST requests."""

from __future__ import annotations

import time
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from binance_trop.model import ModelError, parse_string_or_float

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class TimestampError(ValueError):
    """Raised when a request timestamp cannot be taken from the given time."""


def build_request(parameters: Mapping[str, Any]) -> str:
    """Join parameters as "key=value" pairs with "&", in key order."""
    return "&".join(f"{key}={parameters[key]}" for key in sorted(parameters))


def _timestamp_ms(start: datetime | float) -> int:
    if isinstance(start, datetime):
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        delta = start - _EPOCH
        if delta < timedelta(0):
            raise TimestampError("Failed to get timestamp")
        return (delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds // 1000
    if isinstance(start, (int, float)) and not isinstance(start, bool):
        if start < 0:
            raise TimestampError("Failed to get timestamp")
        return int(start * 1000)
    raise TypeError(f"expected a datetime or seconds since the epoch, got {start!r}")


def build_signed_request_custom(
    parameters: Mapping[str, Any], recv_window: int, start: datetime | float
) -> str:
    """Build a query string with "recvWindow" and a millisecond "timestamp" taken from `start`.

    `start` is a datetime (naive ones are taken as UTC) or seconds since the epoch.
    The receive window is only added when it is positive.
    """
    signed = dict(parameters)
    if recv_window > 0:
        signed["recvWindow"] = str(recv_window)
    signed["timestamp"] = str(_timestamp_ms(start))
    return build_request(signed)


def build_signed_request(parameters: Mapping[str, Any], recv_window: int) -> str:
    """Build a query string stamped with the current time."""
    return build_signed_request_custom(
        parameters, recv_window, datetime.now(timezone.utc)
    )


def to_i64(value: Any) -> int:
    """Return a decoded JSON integer that fits in a signed 64-bit range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected a 64-bit integer, got {value!r}")
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"integer {value} does not fit in 64 bits")
    return value


def to_f64(value: Any) -> float:
    """Parse a decoded JSON string holding a decimal number."""
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    try:
        return parse_string_or_float(value)
    except ModelError as exc:
        raise ValueError(str(exc)) from exc


def is_start_time_valid(start_time: int) -> bool:
    """Tell whether `start_time`, in seconds since the epoch, is not in the future."""
    return start_time <= int(time.time())