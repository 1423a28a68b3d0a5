"""Tests for value type names and storage kinds."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from content_values.exceptions import ConfigurationError, UnsupportedStorageKindError
from content_values.value_types import (
    StorageKind,
    ValueType,
    canonical_type,
    is_numeric_kind,
    is_text_kind,
    parse_value_type,
    to_storage_kind,
)


@pytest.mark.parametrize(
    "value_type, expected",
    [
        ("STRING", StorageKind.TEXT),
        ("TEXT", StorageKind.LONG_TEXT),
        ("JSON", StorageKind.LONG_TEXT),
        ("XML", StorageKind.LONG_TEXT),
        ("INT", StorageKind.INTEGER),
        ("BIGINT", StorageKind.INTEGER),
        ("DECIMAL", StorageKind.DECIMAL),
        ("DATE", StorageKind.DATE),
        ("DATETIME", StorageKind.DATE),
        ("TIME", StorageKind.DATE),
    ],
)
def test_value_type_maps_to_storage_kind(value_type, expected):
    assert to_storage_kind(value_type) is expected


def test_value_type_names_are_case_insensitive():
    assert parse_value_type(" datetime ") is ValueType.DATETIME
    assert to_storage_kind(ValueType.INT) is StorageKind.INTEGER


@pytest.mark.parametrize("value_type", ["FLOAT", "", None, 3])
def test_unknown_value_type_is_a_configuration_error(value_type):
    with pytest.raises(UnsupportedStorageKindError) as excinfo:
        to_storage_kind(value_type)

    assert isinstance(excinfo.value, ConfigurationError)
    assert excinfo.value.value_type == value_type


class TestCanonicalType:
    """Tests for canonical_type."""

    def test_each_kind_has_a_canonical_type(self) -> None:
        """Every storage kind maps to one Python type."""
        assert canonical_type(StorageKind.TEXT) is str
        assert canonical_type(StorageKind.LONG_TEXT) is str
        assert canonical_type(StorageKind.INTEGER) is int
        assert canonical_type(StorageKind.DECIMAL) is Decimal
        assert canonical_type(StorageKind.DATE) is datetime

    def test_non_kind_raises(self) -> None:
        """Non-kind input is rejected."""
        with pytest.raises(UnsupportedStorageKindError):
            canonical_type("integer")


def test_kind_predicates():
    assert is_text_kind(StorageKind.TEXT)
    assert is_text_kind(StorageKind.LONG_TEXT)
    assert not is_text_kind(StorageKind.DATE)
    assert is_numeric_kind(StorageKind.INTEGER)
    assert is_numeric_kind(StorageKind.DECIMAL)
    assert not is_numeric_kind(StorageKind.TEXT)
