"""Tests for toolkit_i18n.i18n.factory module."""

import pytest

from toolkit_i18n.i18n import FallbackResolver, InvalidLocaleError, Locale
from toolkit_i18n.i18n import factory as factory_module
from toolkit_i18n.i18n.factory import DEFAULT_TRANSLATIONS_DIR, create_fallback_resolver


@pytest.fixture
def i18n_settings(monkeypatch):
    """The live i18n settings, reset to defaults for the test."""
    i18n = factory_module.settings.i18n
    monkeypatch.setattr(i18n, "translations_dir", None)
    monkeypatch.setattr(i18n, "base_locale", "en")
    monkeypatch.setattr(i18n, "preload", False)
    monkeypatch.setattr(i18n, "check_direction", True)
    return i18n


@pytest.mark.unit
class TestCreateFallbackResolver:
    """Tests for create_fallback_resolver()."""

    def test_defaults_to_bundled_locales(self, i18n_settings):
        resolver = create_fallback_resolver()
        assert isinstance(resolver, FallbackResolver)
        assert resolver.loader.translations_dir == DEFAULT_TRANSLATIONS_DIR
        assert resolver.base_locale == Locale.EN

    def test_bundled_directory_exists(self):
        assert DEFAULT_TRANSLATIONS_DIR.is_dir()
        assert (DEFAULT_TRANSLATIONS_DIR / "errors.en.yml").is_file()

    def test_explicit_directory(self, i18n_settings, temp_translations_dir):
        resolver = create_fallback_resolver(translations_dir=temp_translations_dir)
        assert resolver.loader.translations_dir == temp_translations_dir
        assert resolver.resolve_with_fallback(Locale.FR, "common.greet") == "Bonjour {{name}}"

    def test_directory_from_settings(self, i18n_settings, temp_translations_dir):
        i18n_settings.translations_dir = temp_translations_dir
        resolver = create_fallback_resolver()
        assert resolver.loader.translations_dir == temp_translations_dir

    def test_missing_directory_raises(self, i18n_settings, tmp_path):
        with pytest.raises(ValueError):
            create_fallback_resolver(translations_dir=tmp_path / "missing")

    def test_base_locale_from_settings(self, i18n_settings, temp_translations_dir):
        i18n_settings.base_locale = "fr"
        resolver = create_fallback_resolver(translations_dir=temp_translations_dir)
        assert resolver.base_locale == Locale.FR
        assert resolver.fallback_chain(Locale.JA) == [Locale.JA, Locale.FR]

    def test_invalid_base_locale_raises(self, i18n_settings):
        i18n_settings.base_locale = "klingon"
        with pytest.raises(InvalidLocaleError):
            create_fallback_resolver()

    def test_preload(self, i18n_settings, temp_translations_dir):
        resolver = create_fallback_resolver(
            translations_dir=temp_translations_dir, preload=True
        )
        assert set(resolver.loader.cached_locales) == {
            Locale.EN, Locale.FR, Locale.ZH, Locale.ZH_TW, Locale.AR,
        }

    def test_preload_from_settings(self, i18n_settings, temp_translations_dir):
        i18n_settings.preload = True
        resolver = create_fallback_resolver(translations_dir=temp_translations_dir)
        assert Locale.EN in resolver.loader.cached_locales

    def test_no_preload_loads_lazily(self, i18n_settings, temp_translations_dir):
        resolver = create_fallback_resolver(translations_dir=temp_translations_dir)
        assert resolver.loader.cached_locales == []

    def test_use_cache_passed_to_loader(self, i18n_settings):
        resolver = create_fallback_resolver(use_cache=False)
        assert resolver.loader.use_cache is False

    def test_check_direction_from_settings(self, i18n_settings):
        i18n_settings.check_direction = False
        resolver = create_fallback_resolver()
        assert resolver.loader.check_direction is False
