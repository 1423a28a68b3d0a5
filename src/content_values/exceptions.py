"""Exception classes for content value conversion.

All custom exceptions inherit from ApplicationError to keep a single
hierarchy across the package.

Exception classes support two patterns:
1. No-argument raise: raise ConversionError()
2. Contextual attributes: err = ConversionError(value="abc", storage_kind=kind); raise err

Conversion and JSON failures are data defects: they are carried inside a
ConversionResult or logged, and never reach the persistence layer. An
unsupported storage kind is a configuration defect and always propagates.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all content value errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ConfigurationError(ApplicationError):
    """Configuration is invalid or missing."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Configuration is invalid or missing"
        super().__init__(message, **kwargs)

    @classmethod
    def missing_value(cls, param_name: str, context: str = "") -> "ConfigurationError":
        """Create error for missing value."""
        msg = f"{param_name} is missing or empty"
        if context:
            msg += f": {context}"
        return cls(msg, param_name=param_name)

    @classmethod
    def invalid_value(cls, param_name: str, value: Any, reason: str = "") -> "ConfigurationError":
        """Create error for invalid value."""
        msg = f"Invalid value for {param_name}: {value!r}"
        if reason:
            msg += f". {reason}"
        return cls(msg, param_name=param_name, value=value)


class UnsupportedStorageKindError(ConfigurationError):
    """Value type or storage kind is not supported."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Value type or storage kind is not supported"
        super().__init__(message, **kwargs)

    @classmethod
    def for_value(cls, value_type: Any) -> "UnsupportedStorageKindError":
        """Create error for an unrecognised value type or storage kind."""
        return cls(f"Unsupported value type or storage kind: {value_type!r}", value_type=value_type)


class DataError(ApplicationError):
    """Data processing or parsing error."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data processing or parsing error"
        super().__init__(message, **kwargs)


class ConversionError(DataError):
    """Value cannot be converted to the target type."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Value cannot be converted to the target type"
        super().__init__(message, **kwargs)

    @classmethod
    def for_target(cls, value: Any, target: str, reason: str = "") -> "ConversionError":
        """Create error for a value that does not convert to *target*."""
        msg = f"Cannot convert {type(value).__name__} {value!r} to {target}"
        if reason:
            msg += f": {reason}"
        return cls(msg, value=value, target=target)


class MalformedJsonError(DataError):
    """Text looked like JSON but could not be parsed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Text looked like JSON but could not be parsed"
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ConversionError",
    "DataError",
    "MalformedJsonError",
    "UnsupportedStorageKindError",
]
