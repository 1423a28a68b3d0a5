"""Configuration helpers: environment access and the field registry."""

from ..exceptions import ConfigurationError
from .field_registry import FIELDS_PATH_ENV, FieldRegistry, load_field_registry
from .runtime import JsonConfig, env_str, load_json

__all__ = [
    "ConfigurationError",
    "FIELDS_PATH_ENV",
    "FieldRegistry",
    "JsonConfig",
    "env_str",
    "load_field_registry",
    "load_json",
]
