"""Culture-invariant integer and decimal parsing for stored values."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_EVEN, Context, Decimal, DecimalException
from typing import Any

from ..exceptions import ConversionError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Range and scale of the database decimal type
DECIMAL_MAX = Decimal("79228162514264337593543950335")
DECIMAL_MAX_SCALE = 28
_SCALE_QUANTUM = Decimal(1).scaleb(-DECIMAL_MAX_SCALE)
_SCALE_CONTEXT = Context(prec=60)
_INT64_MAX_DIGITS = len(str(INT64_MAX))

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def _decode(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="ignore")
    return value


def normalize_decimal_separator(text: str) -> str:
    """Treat a lone comma as the decimal separator when no dot is present."""
    if "." not in text and text.count(",") == 1:
        return text.replace(",", ".")
    return text


def _bounded(number: Decimal, original: Any) -> Decimal:
    """Reject magnitudes beyond DECIMAL_MAX and round digits past DECIMAL_MAX_SCALE."""
    if number.copy_abs() > DECIMAL_MAX:
        raise ConversionError.for_target(original, "decimal", "out of range")
    if number.as_tuple().exponent < -DECIMAL_MAX_SCALE:
        number = number.quantize(_SCALE_QUANTUM, rounding=ROUND_HALF_EVEN, context=_SCALE_CONTEXT)
    return number


def parse_decimal(value: Any) -> Decimal:
    """
    Convert value to a finite Decimal using invariant culture rules.

    Args:
        value: int, float, Decimal, str or bytes

    Returns:
        Decimal value rounded to at most DECIMAL_MAX_SCALE fractional digits

    Raises:
        ConversionError: If value is not a finite number or its magnitude exceeds DECIMAL_MAX
    """
    value = _decode(value)
    if isinstance(value, bool):
        raise ConversionError.for_target(value, "decimal", "booleans are not numbers")
    if isinstance(value, int):
        return _bounded(Decimal(value), value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ConversionError.for_target(value, "decimal", "not finite")
        return _bounded(Decimal(repr(value)), value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ConversionError.for_target(value, "decimal", "not finite")
        return _bounded(value, value)
    if isinstance(value, str):
        token = normalize_decimal_separator(value.strip())
        if not _DECIMAL_PATTERN.fullmatch(token):
            raise ConversionError.for_target(value, "decimal", "not a number")
        try:
            number = Decimal(token)
        except DecimalException as exc:  # policy_guard: allow-silent-handler
            raise ConversionError.for_target(value, "decimal") from exc
        return _bounded(number, value)
    raise ConversionError.for_target(value, "decimal", "unsupported type")


def parse_int64(value: Any) -> int:
    """
    Convert value to an integer within the signed 64-bit range.

    Integral floats, Decimals and decimal strings such as ``"12.0"`` are accepted;
    anything with a fractional part is rejected rather than truncated.

    Raises:
        ConversionError: If value is not integral or is outside the 64-bit range
    """
    value = _decode(value)
    if isinstance(value, bool):
        raise ConversionError.for_target(value, "int64", "booleans are not numbers")
    if isinstance(value, int):
        result = value
    elif isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value.strip()):
        token = value.strip()
        sign = "-" if token.startswith("-") else ""
        digits = token.lstrip("+-").lstrip("0")
        # Count digits before int() so oversized strings fail without a huge conversion
        if len(digits) > _INT64_MAX_DIGITS:
            raise ConversionError.for_target(value, "int64", "out of range")
        result = int(sign + (digits or "0"))
    elif isinstance(value, (float, Decimal, str)):
        numeric = parse_decimal(value)
        if numeric != numeric.to_integral_value():
            raise ConversionError.for_target(value, "int64", "has a fractional part")
        result = int(numeric)
    else:
        raise ConversionError.for_target(value, "int64", "unsupported type")

    if not INT64_MIN <= result <= INT64_MAX:
        raise ConversionError.for_target(value, "int64", "out of range")
    return result


def narrow_int32(value: int) -> int:
    """
    Narrow a 64-bit integer to 32 bits.

    Raises:
        ConversionError: If value is outside the signed 32-bit range
    """
    if not INT32_MIN <= value <= INT32_MAX:
        raise ConversionError.for_target(value, "int32", "out of range")
    return value


__all__ = [
    "DECIMAL_MAX",
    "DECIMAL_MAX_SCALE",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "narrow_int32",
    "normalize_decimal_separator",
    "parse_decimal",
    "parse_int64",
]
