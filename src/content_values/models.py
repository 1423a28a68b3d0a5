"""Property models read by the XML export path."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class PropertyValue:
    """
    A single stored value of a property.

    A property holds one value per culture and segment combination. Both the edited
    (draft) and published forms are stored.
    """

    edited_value: Any = None
    published_value: Any = None
    language_id: Optional[int] = None  # None for culture-invariant values
    segment: Optional[str] = None

    def select(self, published: bool) -> Any:
        return self.published_value if published else self.edited_value


@dataclass(frozen=True)
class PropertyType:
    alias: str
    value_type: str = "STRING"
    is_publishing: bool = True  # False for types whose values are never published separately


@dataclass
class Property:
    property_type: PropertyType
    values: List[PropertyValue] = field(default_factory=list)

    @property
    def alias(self) -> str:
        return self.property_type.alias


__all__ = ["Property", "PropertyType", "PropertyValue"]
