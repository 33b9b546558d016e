"""Tests for toolkit_i18n.i18n.locales module."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from toolkit_i18n.i18n.locales import (
    SUPPORTED_LOCALES,
    extract_locale_from_path,
    get_direction,
    inject_locale_into_path,
    is_rtl,
    is_supported_locale,
    locale_config,
)
from toolkit_i18n.i18n.models import Locale

path_segments = st.text(
    alphabet=st.characters(exclude_characters="/", exclude_categories=("Cs",)),
    max_size=8,
)
paths = st.lists(path_segments, max_size=5).map("/".join) | st.text(max_size=30)


@pytest.mark.unit
class TestIsSupportedLocale:
    """Tests for is_supported_locale()."""

    def test_supported_codes(self):
        """Every supported code is accepted."""
        for locale in SUPPORTED_LOCALES:
            assert is_supported_locale(locale.value)

    @pytest.mark.parametrize("candidate", ["EN", "zh-tw", "zh-CN", "pt-BR", "", "english", None, 1])
    def test_rejects_everything_else(self, candidate):
        """No normalization: near misses and non-strings are rejected."""
        assert not is_supported_locale(candidate)


@pytest.mark.unit
class TestLocaleMetadata:
    """Tests for locale_config(), get_direction() and is_rtl()."""

    def test_locale_config(self):
        """locale_config() returns the registry entry."""
        config = locale_config(Locale.JA)
        assert config.name == "Japanese"
        assert config.native_name == "日本語"
        assert config.date_format == "YYYY/MM/DD"

    def test_direction(self):
        """get_direction() projects the direction field."""
        assert get_direction(Locale.AR) == "rtl"
        assert get_direction(Locale.DE) == "ltr"

    def test_is_rtl(self):
        """is_rtl() is true only for Arabic."""
        assert is_rtl(Locale.AR)
        assert not any(is_rtl(locale) for locale in Locale if locale != Locale.AR)


@pytest.mark.unit
class TestExtractLocaleFromPath:
    """Tests for extract_locale_from_path()."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/en/tools", Locale.EN),
            ("/zh-TW/tools/merge", Locale.ZH_TW),
            ("/zh/tools", Locale.ZH),
            ("zh-TW", Locale.ZH_TW),
            ("//ar//", Locale.AR),
            ("/", None),
            ("", None),
            ("/tools/en", None),
            ("/zh-TWX/tools", None),
            ("/zh-", None),
            ("/EN/tools", None),
            ("/english", None),
        ],
    )
    def test_extract(self, path, expected):
        """Only an exact first segment counts as a locale."""
        assert extract_locale_from_path(path) == expected


@pytest.mark.unit
class TestInjectLocaleIntoPath:
    """Tests for inject_locale_into_path()."""

    @pytest.mark.parametrize(
        "path, locale, expected",
        [
            ("/tools/merge", Locale.FR, "/fr/tools/merge"),
            ("tools/merge", Locale.FR, "/fr/tools/merge"),
            ("", Locale.AR, "/ar/"),
            ("/", Locale.AR, "/ar/"),
            ("/en/", Locale.JA, "/ja/"),
            ("/en", Locale.JA, "/ja/"),
            ("///tools", Locale.DE, "/de/tools"),
            ("/en//tools", Locale.DE, "/de/tools"),
            ("/tools/", Locale.PT, "/pt/tools/"),
        ],
    )
    def test_inject(self, path, locale, expected):
        """Leading slashes are normalized and the locale prepended."""
        assert inject_locale_into_path(path, locale) == expected

    def test_replaces_prefix_locale_with_longer_one(self):
        """zh is replaced by zh-TW, not left as a stray segment."""
        assert inject_locale_into_path("/zh/tools", Locale.ZH_TW) == "/zh-TW/tools"

    def test_replaces_longer_locale_without_mis_stripping(self):
        """zh-TW is stripped as a whole segment, never as zh plus '-TW'."""
        assert inject_locale_into_path("/zh-TW/tools", Locale.ZH) == "/zh/tools"

    def test_keeps_segment_that_merely_starts_with_a_locale(self):
        """A segment like 'enterprise' is not a locale."""
        assert inject_locale_into_path("/enterprise", Locale.KO) == "/ko/enterprise"

    @given(path=paths, locale=st.sampled_from(list(Locale)))
    def test_round_trip(self, path, locale):
        """extract(inject(p, L)) == L for every path and locale."""
        assert extract_locale_from_path(inject_locale_into_path(path, locale)) == locale

    @given(path=paths, first=st.sampled_from(list(Locale)), second=st.sampled_from(list(Locale)))
    def test_reinjection_replaces_locale(self, path, first, second):
        """Injecting twice leaves exactly the last locale in front."""
        once = inject_locale_into_path(path, first)
        twice = inject_locale_into_path(once, second)
        assert twice == inject_locale_into_path(path, second)
