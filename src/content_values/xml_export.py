"""XML fragments produced when exporting stored values."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict
from xml.sax.saxutils import escape, quoteattr

_ALIAS_WORD = re.compile(r"[A-Za-z0-9_]+")
_CDATA_END = "]]>"


@dataclass(frozen=True)
class ExportNode:
    """
    Text content of an exported element.

    Plain nodes are entity-escaped; CDATA nodes keep embedded markup verbatim.
    """

    text: str
    is_cdata: bool = False

    def to_xml(self) -> str:
        if not self.is_cdata:
            return escape(self.text)
        # A literal "]]>" would close the section early, so split it across two sections
        body = self.text.replace(_CDATA_END, "]]]]><![CDATA[>")
        return f"<![CDATA[{body}]]>"


@dataclass(frozen=True)
class PropertyXmlElement:
    """One exported property value: element name, attributes and content node."""

    name: str
    node: ExportNode
    attributes: Dict[str, str] = field(default_factory=dict)

    def to_xml(self) -> str:
        attrs = "".join(f" {key}={quoteattr(value)}" for key, value in self.attributes.items())
        return f"<{self.name}{attrs}>{self.node.to_xml()}</{self.name}>"


def to_safe_alias(alias: str) -> str:
    """
    Convert a property alias into a valid XML element name.

    Characters outside ASCII letters, digits and underscore act as word separators
    and the words are joined in camel case. Leading digits are dropped.

    Raises:
        ValueError: If nothing usable remains
    """
    words = _ALIAS_WORD.findall(alias or "")
    if not words:
        raise ValueError(f"Alias {alias!r} has no usable characters")

    head, *rest = words
    joined = head[:1].lower() + head[1:] + "".join(word[:1].upper() + word[1:] for word in rest)
    safe = joined.lstrip("0123456789")
    if not safe:
        raise ValueError(f"Alias {alias!r} has no usable characters")
    return safe[:1].lower() + safe[1:]


__all__ = ["ExportNode", "PropertyXmlElement", "to_safe_alias"]
