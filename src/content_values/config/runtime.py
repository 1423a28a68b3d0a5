from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..exceptions import ConfigurationError


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    return value


@dataclass(frozen=True)
class JsonConfig:
    path: Path
    payload: dict[str, object]


def load_json(path: Union[str, Path]) -> JsonConfig:
    """Load a JSON object from *path*, expanding ``~``."""

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file {config_path} does not exist")
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Failed to parse JSON config {config_path}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"JSON config {config_path} must contain an object at the top level")

    return JsonConfig(path=config_path, payload=data)


__all__ = ["JsonConfig", "env_str", "load_json"]
