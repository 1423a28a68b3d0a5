from __future__ import annotations

"""Date parsing for stored date values."""

from datetime import date, datetime, timezone
from typing import Any, Tuple

from ..exceptions import ConversionError

# Tried in order after ISO-8601 parsing fails
_FALLBACK_FORMATS: Tuple[str, ...] = (
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
)


def _to_naive_utc(value: datetime) -> datetime:
    """Stored dates are naive; aware values are expressed in UTC first."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _parse_string(value: str) -> datetime:
    token = value.strip()
    if token.endswith(("Z", "z")):
        token = token[:-1] + "+00:00"
    try:
        return _to_naive_utc(datetime.fromisoformat(token))
    except ValueError:  # Not ISO-8601, try fallback formats  # policy_guard: allow-silent-handler
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(token, fmt)
        except ValueError:  # policy_guard: allow-silent-handler
            continue
    raise ConversionError.for_target(value, "datetime", "unrecognised date format")


def parse_datetime(value: Any) -> datetime:
    """
    Convert assorted date inputs into a naive datetime.

    Args:
        value: datetime, date, ISO-8601 string (``T`` or space separated) or bytes

    Returns:
        Naive datetime; aware inputs are converted to UTC

    Raises:
        ConversionError: If the value is not a recognised date
    """
    if isinstance(value, datetime):
        return _to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (bytes, bytearray)):
        return _parse_string(value.decode("utf-8", errors="ignore"))
    if isinstance(value, str):
        return _parse_string(value)
    raise ConversionError.for_target(value, "datetime", "unsupported type")


__all__ = ["parse_datetime"]
