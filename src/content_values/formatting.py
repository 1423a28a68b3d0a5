"""
Locale-independent formatting of stored values.

The editor depends only on the ValueFormatter protocol so that number and date
rendering never reads the host locale and can be replaced in tests.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Protocol


class ValueFormatter(Protocol):
    """Contract for rendering numbers and dates as text."""

    def format_number(self, value: Decimal) -> str:
        """Render a number for the editor."""
        ...  # pragma: no cover

    def format_export_number(self, value: Decimal) -> str:
        """Render a number for export."""
        ...  # pragma: no cover

    def format_editor_date(self, value: datetime) -> str:
        """Render a date for the editor."""
        ...  # pragma: no cover

    def format_export_date(self, value: datetime) -> str:
        """Render a date for export."""
        ...  # pragma: no cover


def format_invariant_decimal(value: Decimal) -> str:
    """
    Render a Decimal with a dot separator and no exponent.

    Trailing zeros carried by the value's own scale are kept, so ``Decimal("1.50")``
    renders as ``"1.50"``.
    """
    text = format(value, "f")
    if text.startswith("-") and text.strip("-0.") == "":
        return text[1:]
    return text


class InvariantValueFormatter:
    """
    Culture-invariant formatter.

    Numbers use a dot separator. Editor dates render as ``yyyy-MM-dd HH:mm:ss`` and
    export dates as ``yyyy-MM-ddTHH:mm:ss`` with fractional seconds only when present.
    """

    def format_number(self, value: Decimal) -> str:
        return format_invariant_decimal(value)

    def format_export_number(self, value: Decimal) -> str:
        return format_invariant_decimal(value)

    def format_editor_date(self, value: datetime) -> str:
        return value.replace(tzinfo=None).isoformat(sep=" ", timespec="seconds")

    def format_export_date(self, value: datetime) -> str:
        value = value.replace(tzinfo=None)
        if value.microsecond:
            return value.isoformat(timespec="microseconds").rstrip("0")
        return value.isoformat(timespec="seconds")


DEFAULT_FORMATTER = InvariantValueFormatter()

__all__ = [
    "DEFAULT_FORMATTER",
    "InvariantValueFormatter",
    "ValueFormatter",
    "format_invariant_decimal",
]
