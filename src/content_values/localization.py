"""Language lookup consumed by the property XML export."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Protocol


@dataclass(frozen=True)
class Language:
    id: int
    iso_code: str


class LanguageLookup(Protocol):
    """Resolves language ids to languages; the localization service satisfies this structurally."""

    def get_language_by_id(self, language_id: int) -> Optional[Language]:
        """Return the language with *language_id*, or None if it is unknown."""
        ...  # pragma: no cover


class InMemoryLanguageLookup:
    """LanguageLookup backed by a fixed set of languages."""

    def __init__(self, languages: Iterable[Language] = ()):
        self._languages: Dict[int, Language] = {language.id: language for language in languages}

    def get_language_by_id(self, language_id: int) -> Optional[Language]:
        return self._languages.get(language_id)


__all__ = ["InMemoryLanguageLookup", "Language", "LanguageLookup"]
