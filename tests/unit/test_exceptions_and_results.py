"""Tests for the exception hierarchy and ConversionResult."""

from __future__ import annotations

import pytest

from content_values import (
    ApplicationError,
    ConfigurationError,
    ConversionError,
    ConversionResult,
    DataError,
    MalformedJsonError,
    UnsupportedStorageKindError,
)


class TestExceptions:
    """Tests for exception defaults and context attributes."""

    def test_default_messages(self) -> None:
        assert str(ConversionError()) == "Value cannot be converted to the target type"
        assert str(MalformedJsonError()) == "Text looked like JSON but could not be parsed"
        assert str(UnsupportedStorageKindError()) == "Value type or storage kind is not supported"

    def test_keyword_context_becomes_attributes(self) -> None:
        err = DataError(field="price", value=3)
        assert err.field == "price"
        assert err.value == 3

    def test_hierarchy(self) -> None:
        assert issubclass(ConversionError, DataError)
        assert issubclass(MalformedJsonError, DataError)
        assert issubclass(UnsupportedStorageKindError, ConfigurationError)
        assert issubclass(DataError, ApplicationError)

    def test_for_target(self) -> None:
        err = ConversionError.for_target("abc", "int64", "not a number")
        assert str(err) == "Cannot convert str 'abc' to int64: not a number"
        assert err.target == "int64"

    def test_configuration_helpers(self) -> None:
        assert str(ConfigurationError.missing_value("fields")) == "fields is missing or empty"
        assert str(ConfigurationError.invalid_value("level", "x", "bad")) == "Invalid value for level: 'x'. bad"


class TestConversionResult:
    """Tests for ConversionResult."""

    def test_succeed(self) -> None:
        result = ConversionResult.succeed(5)
        assert result
        assert result.value == 5
        assert result.error is None

    def test_succeed_with_absent_value(self) -> None:
        result = ConversionResult.succeed()
        assert result.success
        assert result.value is None

    def test_fail(self) -> None:
        error = ConversionError()
        result = ConversionResult.fail(error)
        assert not result
        assert result.error is error
        assert result.value is None

    def test_failure_cannot_carry_value(self) -> None:
        with pytest.raises(ValueError):
            ConversionResult(success=False, value=1)
