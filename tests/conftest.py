"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from content_values.config import FIELDS_PATH_ENV
from content_values.localization import InMemoryLanguageLookup, Language
from content_values.logging_config import LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep host configuration out of the tests."""
    monkeypatch.delenv(FIELDS_PATH_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@pytest.fixture
def languages() -> InMemoryLanguageLookup:
    return InMemoryLanguageLookup([Language(1, "en-US"), Language(2, "da-DK")])
