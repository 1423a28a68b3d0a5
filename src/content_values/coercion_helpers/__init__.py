"""Parsing helpers backing the coercion table."""

from .date_parser import parse_datetime
from .numeric_parser import (
    DECIMAL_MAX,
    DECIMAL_MAX_SCALE,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    narrow_int32,
    normalize_decimal_separator,
    parse_decimal,
    parse_int64,
)

__all__ = [
    "DECIMAL_MAX",
    "DECIMAL_MAX_SCALE",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "narrow_int32",
    "normalize_decimal_separator",
    "parse_datetime",
    "parse_decimal",
    "parse_int64",
]
