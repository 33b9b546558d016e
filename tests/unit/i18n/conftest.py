"""Feature-level fixtures for i18n system tests."""

import pytest

from toolkit_i18n.i18n import FallbackResolver, Locale, YAMLTranslationLoader
from tests.factories.i18n import write_bundle


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a temporary directory with sample YAML bundles.

    - en: complete (two files: common + errors)
    - fr: partial, missing common.farewell and errors.networkError
    - zh: complete common namespace only
    - zh-TW: only common.greet
    - ar: present; every other locale has no files
    """
    write_bundle(
        tmp_path,
        Locale.EN,
        {
            "common": {
                "greet": "Hello {{name}}",
                "farewell": "Goodbye",
                "title": "PDF Toolkit",
            }
        },
        namespace="common",
    )
    write_bundle(
        tmp_path,
        Locale.EN,
        {
            "errors": {
                "fileTooLarge": "File too large",
                "networkError": "Network error",
            }
        },
        namespace="errors",
    )
    write_bundle(
        tmp_path,
        Locale.FR,
        {
            "common": {"greet": "Bonjour {{name}}", "title": "Boîte à outils PDF"},
            "errors": {"fileTooLarge": "Fichier trop volumineux"},
        },
    )
    write_bundle(
        tmp_path,
        Locale.ZH,
        {"common": {"greet": "你好 {{name}}", "farewell": "再见"}},
    )
    write_bundle(tmp_path, Locale.ZH_TW, {"common": {"greet": "你好，{{name}}"}})
    write_bundle(tmp_path, Locale.AR, {"common": {"greet": "مرحبا {{name}}"}})
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir)


@pytest.fixture
def yaml_loader_no_cache(temp_translations_dir):
    """YAMLTranslationLoader with caching disabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def resolver(yaml_loader):
    """FallbackResolver over the temporary bundles."""
    return FallbackResolver(yaml_loader)
