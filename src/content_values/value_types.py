"""Value type names and the storage kinds they persist as."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, Union

from .exceptions import UnsupportedStorageKindError

__all__ = [
    "StorageKind",
    "ValueType",
    "canonical_type",
    "is_numeric_kind",
    "is_text_kind",
    "parse_value_type",
    "to_storage_kind",
]


class StorageKind(Enum):
    """Canonical persisted type category for a field's value"""

    TEXT = "nvarchar"
    LONG_TEXT = "ntext"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"


class ValueType(Enum):
    """Value type names an editor can be configured with"""

    STRING = "STRING"
    TEXT = "TEXT"
    JSON = "JSON"
    XML = "XML"
    INT = "INT"
    BIGINT = "BIGINT"
    DECIMAL = "DECIMAL"
    DATE = "DATE"
    DATETIME = "DATETIME"
    TIME = "TIME"


_STORAGE_KINDS: Dict[ValueType, StorageKind] = {
    ValueType.STRING: StorageKind.TEXT,
    ValueType.TEXT: StorageKind.LONG_TEXT,
    ValueType.JSON: StorageKind.LONG_TEXT,
    ValueType.XML: StorageKind.LONG_TEXT,
    ValueType.INT: StorageKind.INTEGER,
    ValueType.BIGINT: StorageKind.INTEGER,
    ValueType.DECIMAL: StorageKind.DECIMAL,
    ValueType.DATE: StorageKind.DATE,
    ValueType.DATETIME: StorageKind.DATE,
    ValueType.TIME: StorageKind.DATE,
}

_CANONICAL_TYPES: Dict[StorageKind, type] = {
    StorageKind.TEXT: str,
    StorageKind.LONG_TEXT: str,
    StorageKind.INTEGER: int,
    StorageKind.DECIMAL: Decimal,
    StorageKind.DATE: datetime,
}


def parse_value_type(value_type: Union[ValueType, str]) -> ValueType:
    """
    Resolve a value type name, matching case-insensitively.

    Raises:
        UnsupportedStorageKindError: If the name is not a known value type
    """
    if isinstance(value_type, ValueType):
        return value_type
    if isinstance(value_type, str):
        try:
            return ValueType(value_type.strip().upper())
        except ValueError as exc:
            raise UnsupportedStorageKindError.for_value(value_type) from exc
    raise UnsupportedStorageKindError.for_value(value_type)


def to_storage_kind(value_type: Union[ValueType, str]) -> StorageKind:
    """
    Map a value type onto the storage kind it is persisted as.

    Args:
        value_type: ValueType member or its name (e.g. ``"int"``, ``"DATETIME"``)

    Returns:
        The storage kind for the value type

    Raises:
        UnsupportedStorageKindError: If the value type is unknown
    """
    return _STORAGE_KINDS[parse_value_type(value_type)]


def canonical_type(kind: StorageKind) -> type:
    """Return the Python type stored values of *kind* always have."""
    if kind not in _CANONICAL_TYPES:
        raise UnsupportedStorageKindError.for_value(kind)
    return _CANONICAL_TYPES[kind]


def is_text_kind(kind: StorageKind) -> bool:
    return kind in (StorageKind.TEXT, StorageKind.LONG_TEXT)


def is_numeric_kind(kind: StorageKind) -> bool:
    return kind in (StorageKind.INTEGER, StorageKind.DECIMAL)
