"""
Type-directed coercion of editor values to stored values.

Each storage kind has one converter. Converters return a ConversionResult and
never raise for bad data; the only exception that escapes this module is
UnsupportedStorageKindError, which signals a configuration defect.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict

import orjson

from .coercion_helpers import narrow_int32, parse_datetime, parse_decimal, parse_int64
from .conversion_result import ConversionResult
from .exceptions import ConversionError, UnsupportedStorageKindError
from .json_detection import dumps_compact
from .value_types import StorageKind

logger = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    """Return True for strings that are empty or whitespace only."""
    return isinstance(value, str) and not value.strip()


def try_convert_to_text(value: Any) -> ConversionResult:
    """
    Convert value to text.

    Strings pass through untouched, bytes are decoded as UTF-8, mappings and
    sequences are serialised as compact JSON and other scalars use ``str``.
    """
    if value is None:
        return ConversionResult.succeed(None)
    if isinstance(value, str):
        return ConversionResult.succeed(value)
    if isinstance(value, (bytes, bytearray)):
        return ConversionResult.succeed(value.decode("utf-8", errors="ignore"))
    if isinstance(value, (dict, list, tuple)):
        try:
            return ConversionResult.succeed(dumps_compact(value))
        except (orjson.JSONEncodeError, TypeError) as exc:  # policy_guard: allow-silent-handler
            return ConversionResult.fail(ConversionError.for_target(value, "text", str(exc)))
    return ConversionResult.succeed(str(value))


def try_convert_to_int64(value: Any) -> ConversionResult:
    """Convert value to a 64-bit integer, or None for an absent value."""
    if value is None:
        return ConversionResult.succeed(None)
    try:
        return ConversionResult.succeed(parse_int64(value))
    except ConversionError as exc:  # policy_guard: allow-silent-handler
        return ConversionResult.fail(exc)


def narrow_to_int32(result: ConversionResult) -> ConversionResult:
    """
    Narrow a successful 64-bit result to 32 bits.

    Out-of-range values fail instead of wrapping around.
    """
    if not result.success or result.value is None:
        return result
    try:
        return ConversionResult.succeed(narrow_int32(result.value))
    except ConversionError as exc:  # policy_guard: allow-silent-handler
        return ConversionResult.fail(exc)


def try_convert_to_decimal(value: Any) -> ConversionResult:
    """Convert value to a Decimal, or None for an absent value."""
    if value is None:
        return ConversionResult.succeed(None)
    try:
        return ConversionResult.succeed(parse_decimal(value))
    except ConversionError as exc:  # policy_guard: allow-silent-handler
        return ConversionResult.fail(exc)


def try_convert_to_datetime(value: Any) -> ConversionResult:
    """Convert value to a naive datetime, or None for an absent value."""
    if value is None:
        return ConversionResult.succeed(None)
    try:
        return ConversionResult.succeed(parse_datetime(value))
    except ConversionError as exc:  # policy_guard: allow-silent-handler
        return ConversionResult.fail(exc)


def _try_convert_to_int32(value: Any) -> ConversionResult:
    return narrow_to_int32(try_convert_to_int64(value))


_CONVERTERS: Dict[StorageKind, Callable[[Any], ConversionResult]] = {
    StorageKind.TEXT: try_convert_to_text,
    StorageKind.LONG_TEXT: try_convert_to_text,
    StorageKind.INTEGER: _try_convert_to_int32,
    StorageKind.DECIMAL: try_convert_to_decimal,
    StorageKind.DATE: try_convert_to_datetime,
}


def try_convert_to_kind(value: Any, kind: StorageKind) -> ConversionResult:
    """
    Coerce an editor value to the canonical stored type of *kind*.

    Args:
        value: Editor value (None, string or structured object)
        kind: Storage kind selecting the target type

    Returns:
        Successful result holding the canonical value (or None), or a failed result

    Raises:
        UnsupportedStorageKindError: If *kind* has no converter
    """
    if is_blank(value):
        value = None
    converter = _CONVERTERS.get(kind) if isinstance(kind, StorageKind) else None
    if converter is None:
        raise UnsupportedStorageKindError.for_value(kind)
    result = converter(value)
    if not result.success:
        logger.debug("Conversion to %s failed: %s", kind.name, result.error)
    return result


__all__ = [
    "is_blank",
    "narrow_to_int32",
    "try_convert_to_datetime",
    "try_convert_to_decimal",
    "try_convert_to_int64",
    "try_convert_to_kind",
    "try_convert_to_text",
]
