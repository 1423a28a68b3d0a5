"""JSON sniffing and best-effort parsing for stored text values."""

from __future__ import annotations

import logging
import re
from typing import Any, Tuple

import orjson

from .exceptions import MalformedJsonError

logger = logging.getLogger(__name__)

_EMPTY_JSON_PATTERN = re.compile(r"^(\{\s*\}|\[\s*\])$")


def detect_is_json(text: str) -> bool:
    """
    Cheap check for text that may hold a JSON object or array.

    Only the outer brackets are inspected; a positive answer still has to be
    confirmed by parsing.
    """
    if not isinstance(text, str):
        return False
    token = text.strip()
    if len(token) < 2:
        return False
    return (token[0] == "{" and token[-1] == "}") or (token[0] == "[" and token[-1] == "]")


def detect_is_empty_json(text: str) -> bool:
    """Return True when text is an empty JSON object or array."""
    if not isinstance(text, str):
        return False
    return bool(_EMPTY_JSON_PATTERN.match(text.strip()))


def try_parse_json(text: str) -> Tuple[bool, Any]:
    """
    Parse JSON text without raising.

    Args:
        text: Candidate JSON text

    Returns:
        ``(True, parsed)`` on success, ``(False, None)`` when the text is not JSON
    """
    try:
        return True, orjson.loads(text)
    except (orjson.JSONDecodeError, TypeError) as exc:  # policy_guard: allow-silent-handler
        error = MalformedJsonError(f"Malformed JSON: {exc}", text=text)
        logger.debug("%s; falling back to raw text", error)
        return False, None


def dumps_compact(payload: Any) -> str:
    """Serialise payload as compact JSON text."""
    return orjson.dumps(payload).decode("utf-8")


__all__ = [
    "detect_is_empty_json",
    "detect_is_json",
    "dumps_compact",
    "try_parse_json",
]
