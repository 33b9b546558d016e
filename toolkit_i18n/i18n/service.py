"""Translation service for dependency injection.

Thin facade over a FallbackResolver. Request handlers obtain a fresh
Translator per request; the merged tree behind it is shared and immutable.
"""

from typing import Any, Mapping, Optional

from toolkit_i18n.configuration import settings
from toolkit_i18n.errors.codes import ErrorCode
from toolkit_i18n.i18n.factory import create_fallback_resolver
from toolkit_i18n.i18n.fallback import FallbackResolver
from toolkit_i18n.i18n.locales import locale_config
from toolkit_i18n.i18n.models import Locale, LocaleConfig
from toolkit_i18n.i18n.resolvers import LocaleResolver
from toolkit_i18n.i18n.translator import Translator, make_translator


class TranslationService:
    """Class-based translation service.

    Usage:
        service = TranslationService()

        t = service.translator_for(Locale.JA)
        t("common.buttons.upload")

        t = service.translator_for_path("/zh-TW/tools/merge")
        t.error(ErrorCode.FILE_TOO_LARGE)
    """

    def __init__(
        self,
        resolver: Optional[FallbackResolver] = None,
        locale_resolver: Optional[LocaleResolver] = None,
    ):
        """Initialize translation service.

        Args:
            resolver: Optional pre-configured FallbackResolver. If not
                provided, one is created via the factory.
            locale_resolver: Optional LocaleResolver for path/header input.
        """
        self._resolver = resolver or create_fallback_resolver()
        self._locale_resolver = locale_resolver or LocaleResolver(
            Locale.from_string(settings.i18n.default_locale)
        )

    def translator_for(self, locale: Locale) -> Translator:
        """Translator bound to the merged tree of a locale."""
        return make_translator(self._resolver.merged_tree(locale), locale)

    def translator_for_path(self, path: str) -> Translator:
        """Translator for the locale carried by a URL path (or the default)."""
        return self.translator_for(self._locale_resolver.resolve_from_path(path))

    def translate(
        self,
        locale: Locale,
        key: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Args:
            locale: Locale to translate to.
            key: Dot-path of the message.
            variables: Optional placeholder values.

        Returns:
            Display text; the key itself if nothing resolves.
        """
        return self.translator_for(locale)(key, variables)

    def translate_error(
        self,
        locale: Locale,
        code: ErrorCode,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Display text for an error code in a locale."""
        return self.translator_for(locale).error(code, variables)

    def locale_config(self, locale: Locale) -> LocaleConfig:
        """Display metadata for a locale."""
        return locale_config(locale)

    def invalidate(self, locale: Optional[Locale] = None) -> None:
        """Drop cached trees so the next request reloads them."""
        self._resolver.invalidate(locale)

    @property
    def resolver(self) -> FallbackResolver:
        """Access the underlying FallbackResolver."""
        return self._resolver
