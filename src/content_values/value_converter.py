"""
Conversion between editor, stored and export representations of a value.

ValueConverter is stateless apart from its formatter and is safe to share
between threads.
"""

from __future__ import annotations

from typing import Any, Optional

from .coercion import try_convert_to_datetime, try_convert_to_decimal, try_convert_to_kind, try_convert_to_text
from .conversion_result import ConversionResult
from .exceptions import UnsupportedStorageKindError
from .formatting import DEFAULT_FORMATTER, ValueFormatter
from .json_detection import detect_is_json, try_parse_json
from .value_types import StorageKind, is_numeric_kind, is_text_kind
from .xml_export import ExportNode


def _require_kind(kind: Any) -> StorageKind:
    if not isinstance(kind, StorageKind):
        raise UnsupportedStorageKindError.for_value(kind)
    return kind


def _as_text(value: Any) -> str:
    result = try_convert_to_text(value)
    if result.success and result.value is not None:
        return result.value
    return str(value)


class ValueConverter:
    """
    Maps values between the editor, the database and the export format.

    Args:
        formatter: Number and date renderer; defaults to the culture-invariant one
    """

    def __init__(self, formatter: Optional[ValueFormatter] = None):
        self.formatter = formatter if formatter is not None else DEFAULT_FORMATTER

    def to_stored(self, editor_value: Any, kind: StorageKind) -> ConversionResult:
        """
        Coerce an editor value to the canonical stored type of *kind*.

        Blank strings become None before coercion. Bad data yields a failed
        result; it is up to the caller to log and store None.

        Raises:
            UnsupportedStorageKindError: If *kind* is not a StorageKind
        """
        return try_convert_to_kind(editor_value, _require_kind(kind))

    def to_editor(self, stored_value: Any, kind: StorageKind) -> Any:
        """
        Format a stored value for the editor.

        Text holding JSON is returned as the parsed structure so the editor receives
        real objects; anything that fails to parse is returned as the raw string.
        Numbers are rendered with a dot separator and dates as
        ``yyyy-MM-dd HH:mm:ss``.
        """
        kind = _require_kind(kind)
        if stored_value is None:
            return ""

        if is_text_kind(kind):
            as_string = _as_text(stored_value)
            if detect_is_json(as_string):
                parsed_ok, parsed = try_parse_json(as_string)
                if parsed_ok:
                    return parsed
            return as_string

        if is_numeric_kind(kind):
            number = try_convert_to_decimal(stored_value)
            if number.success and number.value is not None:
                return self.formatter.format_number(number.value)
            return str(stored_value)

        moment = try_convert_to_datetime(stored_value)
        if not moment.success or moment.value is None:
            return ""
        return self.formatter.format_editor_date(moment.value)

    def to_export_string(self, stored_value: Any, kind: StorageKind) -> str:
        """Render a stored value as export text; unconvertible dates export as ``""``."""
        kind = _require_kind(kind)
        if stored_value is None:
            return ""

        if is_text_kind(kind):
            return _as_text(stored_value)

        if is_numeric_kind(kind):
            number = try_convert_to_decimal(stored_value)
            if number.success and number.value is not None:
                return self.formatter.format_export_number(number.value)
            return str(stored_value)

        moment = try_convert_to_datetime(stored_value)
        if not moment.success or moment.value is None:
            return ""
        return self.formatter.format_export_date(moment.value)

    def to_export_text(self, stored_value: Any, kind: StorageKind) -> ExportNode:
        """
        Build the XML node for a stored value.

        Text kinds are wrapped in CDATA so embedded markup survives. Empty values,
        numbers and dates are plain text nodes.
        """
        kind = _require_kind(kind)
        text = self.to_export_string(stored_value, kind)
        if stored_value is None or not str(stored_value).strip():
            return ExportNode(text)
        if is_text_kind(kind):
            return ExportNode(text, is_cdata=True)
        return ExportNode(text)


__all__ = ["ValueConverter"]
