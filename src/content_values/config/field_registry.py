"""
Registry of field aliases and the value types they are configured with.

The registry is the schema the persistence layer consults to pick an editor for
each field. It is loaded from a JSON object of the form::

    {"fields": {"bodyText": "TEXT", "price": "DECIMAL", "publishDate": "DATETIME"}}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Union

from ..exceptions import ConfigurationError, UnsupportedStorageKindError
from ..formatting import ValueFormatter
from ..value_editor import DataValueEditor
from ..value_types import StorageKind, ValueType, parse_value_type, to_storage_kind
from .runtime import env_str, load_json

logger = logging.getLogger(__name__)

FIELDS_PATH_ENV = "CONTENT_VALUES_FIELDS_PATH"


class FieldRegistry:
    """
    Immutable alias to value type mapping.

    Every value type is validated when the registry is built, so an unsupported
    type surfaces as a ConfigurationError at load time.
    """

    def __init__(self, fields: Mapping[str, Union[ValueType, str]]):
        resolved: Dict[str, ValueType] = {}
        for alias, value_type in fields.items():
            if not isinstance(alias, str) or not alias.strip():
                raise ConfigurationError.invalid_value("field alias", alias, "must be a non-empty string")
            try:
                resolved[alias] = parse_value_type(value_type)
            except UnsupportedStorageKindError as exc:
                raise ConfigurationError.invalid_value(f"fields.{alias}", value_type, "unsupported value type") from exc
        self._fields = resolved

    def __contains__(self, alias: object) -> bool:
        return alias in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def value_type_for(self, alias: str) -> ValueType:
        if alias not in self._fields:
            raise ConfigurationError.missing_value(alias, "field is not registered")
        return self._fields[alias]

    def storage_kind_for(self, alias: str) -> StorageKind:
        return to_storage_kind(self.value_type_for(alias))

    def editor_for(self, alias: str, *, formatter: Optional[ValueFormatter] = None) -> DataValueEditor:
        """Build the value editor configured for *alias*."""
        return DataValueEditor(self.value_type_for(alias), formatter=formatter)

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "FieldRegistry":
        fields = payload.get("fields")
        if not isinstance(fields, Mapping):
            raise ConfigurationError.missing_value("fields", "expected an object of alias to value type")
        return cls(fields)


def load_field_registry(path: Optional[Union[str, Path]] = None) -> FieldRegistry:
    """
    Load the field registry from *path* or ``$CONTENT_VALUES_FIELDS_PATH``.

    Raises:
        ConfigurationError: If no path is configured or the file is invalid
    """
    if path is None:
        path = env_str(FIELDS_PATH_ENV)
    if path is None:
        raise ConfigurationError(f"Field registry path not provided. Set {FIELDS_PATH_ENV} or pass path explicitly.")

    config = load_json(path)
    registry = FieldRegistry.from_payload(config.payload)
    logger.info("Loaded %d field definitions from %s", len(registry), config.path)
    return registry


__all__ = ["FIELDS_PATH_ENV", "FieldRegistry", "load_field_registry"]
