"""
content_values: conversion of content property values.

Converts values between the editor form, the typed stored form and the
export text/XML form, directed by the storage kind of each field.
"""

from .conversion_result import ConversionResult
from .exceptions import (
    ApplicationError,
    ConfigurationError,
    ConversionError,
    DataError,
    MalformedJsonError,
    UnsupportedStorageKindError,
)
from .formatting import InvariantValueFormatter, ValueFormatter
from .localization import InMemoryLanguageLookup, Language, LanguageLookup
from .models import Property, PropertyType, PropertyValue
from .value_converter import ValueConverter
from .value_editor import DataValueEditor
from .value_types import StorageKind, ValueType, to_storage_kind
from .xml_export import ExportNode, PropertyXmlElement

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ConversionError",
    "ConversionResult",
    "DataError",
    "DataValueEditor",
    "ExportNode",
    "InMemoryLanguageLookup",
    "InvariantValueFormatter",
    "Language",
    "LanguageLookup",
    "MalformedJsonError",
    "Property",
    "PropertyType",
    "PropertyValue",
    "PropertyXmlElement",
    "StorageKind",
    "UnsupportedStorageKindError",
    "ValueConverter",
    "ValueFormatter",
    "ValueType",
    "to_storage_kind",
    "__version__",
]
