"""Shared fixtures for the toolkit i18n test suite."""

import pytest

from toolkit_i18n.i18n import FallbackResolver, YAMLTranslationLoader
from toolkit_i18n.i18n.factory import DEFAULT_TRANSLATIONS_DIR


@pytest.fixture
def bundled_loader():
    """Loader over the locale files shipped with the package."""
    return YAMLTranslationLoader(DEFAULT_TRANSLATIONS_DIR)


@pytest.fixture
def bundled_resolver(bundled_loader):
    """FallbackResolver over the locale files shipped with the package."""
    return FallbackResolver(bundled_loader)
