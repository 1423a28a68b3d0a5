"""Tests for ValueConverter."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from content_values.exceptions import UnsupportedStorageKindError
from content_values.value_converter import ValueConverter
from content_values.value_types import StorageKind
from content_values.xml_export import ExportNode


@pytest.fixture
def converter() -> ValueConverter:
    return ValueConverter()


class TestToStored:
    """Tests for ValueConverter.to_stored."""

    def test_integer_round_trip(self, converter) -> None:
        result = converter.to_stored("42", StorageKind.INTEGER)
        assert result.success
        assert result.value == 42
        assert isinstance(result.value, int)

    def test_out_of_range_integer_fails(self, converter) -> None:
        assert not converter.to_stored("3000000000", StorageKind.INTEGER).success

    @pytest.mark.parametrize(
        ("value", "kind"),
        [("9" * 5000, StorageKind.INTEGER), ("1e2000000", StorageKind.INTEGER), ("1e100000000", StorageKind.DECIMAL)],
    )
    def test_oversized_numbers_fail_without_raising(self, converter, value, kind) -> None:
        """Huge digit strings and exponents give a failed result."""
        result = converter.to_stored(value, kind)
        assert not result.success
        assert "out of range" in str(result.error)

    def test_decimal_scale_bounded(self, converter) -> None:
        result = converter.to_stored("1e-100000000", StorageKind.DECIMAL)
        assert result.success
        assert converter.to_export_string(result.value, StorageKind.DECIMAL) == "0." + "0" * 28

    def test_whitespace_is_absent(self, converter) -> None:
        assert converter.to_stored("  ", StorageKind.DECIMAL).value is None

    def test_unknown_kind_raises(self, converter) -> None:
        with pytest.raises(UnsupportedStorageKindError):
            converter.to_stored("x", None)


class TestToEditor:
    """Tests for ValueConverter.to_editor."""

    @pytest.mark.parametrize("kind", list(StorageKind))
    def test_absent_value_is_empty_string(self, converter, kind) -> None:
        assert converter.to_editor(None, kind) == ""

    def test_json_text_is_parsed(self, converter) -> None:
        assert converter.to_editor('{"a":1}', StorageKind.LONG_TEXT) == {"a": 1}
        assert converter.to_editor("[1, 2]", StorageKind.TEXT) == [1, 2]

    def test_malformed_json_falls_back_to_raw_string(self, converter) -> None:
        assert converter.to_editor("{not json}", StorageKind.LONG_TEXT) == "{not json}"

    def test_plain_text_returned_as_is(self, converter) -> None:
        assert converter.to_editor("hello", StorageKind.TEXT) == "hello"

    def test_decimal_uses_dot_separator(self, converter) -> None:
        assert converter.to_editor(Decimal("1234.5"), StorageKind.DECIMAL) == "1234.5"

    def test_integer_rendered_as_string(self, converter) -> None:
        assert converter.to_editor(42, StorageKind.INTEGER) == "42"

    def test_unconvertible_number_falls_back_to_str(self, converter) -> None:
        assert converter.to_editor("n/a", StorageKind.DECIMAL) == "n/a"

    def test_date_fixed_profile(self, converter) -> None:
        assert converter.to_editor(datetime(2024, 1, 2, 3, 4, 5), StorageKind.DATE) == "2024-01-02 03:04:05"

    def test_date_string_is_reformatted(self, converter) -> None:
        assert converter.to_editor("2024-01-02T03:04:05", StorageKind.DATE) == "2024-01-02 03:04:05"

    def test_unconvertible_date_is_empty(self, converter) -> None:
        assert converter.to_editor("not a date", StorageKind.DATE) == ""


class TestExport:
    """Tests for export string and node rendering."""

    def test_text_with_markup_is_cdata(self, converter) -> None:
        node = converter.to_export_text("<p>Hi</p>", StorageKind.LONG_TEXT)
        assert node == ExportNode("<p>Hi</p>", is_cdata=True)
        assert node.to_xml() == "<![CDATA[<p>Hi</p>]]>"

    def test_integer_is_plain_text(self, converter) -> None:
        node = converter.to_export_text(7, StorageKind.INTEGER)
        assert node == ExportNode("7")
        assert node.to_xml() == "7"

    def test_decimal_is_plain_text(self, converter) -> None:
        assert converter.to_export_text(Decimal("0.5"), StorageKind.DECIMAL) == ExportNode("0.5")

    def test_date_is_plain_xml_date(self, converter) -> None:
        node = converter.to_export_text(datetime(2024, 1, 2, 3, 4, 5), StorageKind.DATE)
        assert node == ExportNode("2024-01-02T03:04:05")

    def test_unconvertible_date_exports_empty(self, converter) -> None:
        assert converter.to_export_text("garbage", StorageKind.DATE) == ExportNode("")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_text_is_never_cdata(self, converter, value) -> None:
        node = converter.to_export_text(value, StorageKind.TEXT)
        assert not node.is_cdata

    def test_export_string_for_none(self, converter) -> None:
        assert converter.to_export_string(None, StorageKind.INTEGER) == ""


def test_injected_formatter_is_used():
    class ShoutingFormatter:
        def format_number(self, value):
            return f"#{value}"

        def format_export_number(self, value):
            return f"x{value}"

        def format_editor_date(self, value):
            return "editor-date"

        def format_export_date(self, value):
            return "export-date"

    converter = ValueConverter(ShoutingFormatter())

    assert converter.to_editor(3, StorageKind.INTEGER) == "#3"
    assert converter.to_export_string(3, StorageKind.INTEGER) == "x3"
    assert converter.to_editor(datetime(2024, 1, 2), StorageKind.DATE) == "editor-date"
    assert converter.to_export_string(datetime(2024, 1, 2), StorageKind.DATE) == "export-date"
