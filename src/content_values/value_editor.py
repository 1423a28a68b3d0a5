"""Value editor: a ValueConverter bound to one configured value type."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Union

from .conversion_result import ConversionResult
from .formatting import ValueFormatter
from .json_detection import detect_is_empty_json
from .localization import LanguageLookup
from .models import Property
from .value_converter import ValueConverter
from .value_types import StorageKind, ValueType, parse_value_type, to_storage_kind
from .xml_export import ExportNode, PropertyXmlElement, to_safe_alias

logger = logging.getLogger(__name__)


class DataValueEditor:
    """
    Converts the values of one field between editor, database and export forms.

    The value type is resolved to a storage kind on construction, so a
    misconfigured editor fails immediately with UnsupportedStorageKindError
    rather than on first use.

    Args:
        value_type: ValueType member or name (case-insensitive), ``STRING`` by default
        formatter: Optional number/date formatter passed to the converter
    """

    def __init__(
        self,
        value_type: Union[ValueType, str] = ValueType.STRING,
        *,
        formatter: Optional[ValueFormatter] = None,
    ):
        self.value_type = parse_value_type(value_type)
        self.storage_kind: StorageKind = to_storage_kind(self.value_type)
        self.converter = ValueConverter(formatter)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value_type={self.value_type.value!r})"

    def to_stored(self, editor_value: Any) -> ConversionResult:
        return self.converter.to_stored(editor_value, self.storage_kind)

    def convert_editor_to_db(self, editor_value: Any) -> Any:
        """
        Convert a submitted editor value to the value to persist.

        Empty JSON submitted to a JSON editor is stored as None. Values that fail
        conversion are logged and stored as None so they can be corrected later.
        """
        if self.value_type is ValueType.JSON and editor_value is not None and detect_is_empty_json(str(editor_value)):
            return None

        result = self.to_stored(editor_value)
        if not result.success:
            logger.warning(
                "The value %r cannot be converted to the type %s: %s",
                editor_value,
                self.storage_kind.name,
                result.error,
            )
            return None
        return result.value

    def to_editor(self, stored_value: Any) -> Any:
        return self.converter.to_editor(stored_value, self.storage_kind)

    def to_export_string(self, stored_value: Any) -> str:
        return self.converter.to_export_string(stored_value, self.storage_kind)

    def to_export_text(self, stored_value: Any) -> ExportNode:
        return self.converter.to_export_text(stored_value, self.storage_kind)

    def convert_property_to_xml(
        self,
        prop: Property,
        language_lookup: LanguageLookup,
        *,
        published: bool,
    ) -> Iterator[PropertyXmlElement]:
        """
        Export every value of a property as an XML element.

        Args:
            prop: Property whose values are exported
            language_lookup: Resolves value language ids to iso codes
            published: Export published values instead of edited ones; ignored when
                the property type does not publish

        Yields:
            One element per non-blank value, named after the safe alias of the property
        """
        published = published and prop.property_type.is_publishing
        node_name = to_safe_alias(prop.alias)

        for property_value in prop.values:
            value = property_value.select(published)
            if value is None or (isinstance(value, str) and not value.strip()):
                continue

            attributes = {}
            if property_value.language_id is not None:
                language = language_lookup.get_language_by_id(property_value.language_id)
                if language is None:
                    logger.warning(
                        "Skipping value of %s: unknown language id %s",
                        prop.alias,
                        property_value.language_id,
                    )
                    continue
                attributes["lang"] = language.iso_code
            if property_value.segment is not None:
                attributes["segment"] = property_value.segment

            yield PropertyXmlElement(node_name, self.to_export_text(value), attributes)


__all__ = ["DataValueEditor"]
