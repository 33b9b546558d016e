"""Locale resolution logic for determining a request's language.

Converts raw inputs (URL paths, Accept-Language headers, stored
preferences) into a validated Locale. Past this boundary every function may
assume it holds a supported Locale.
"""

from typing import Optional

from toolkit_i18n.i18n.locales import SUPPORTED_LOCALES, extract_locale_from_path
from toolkit_i18n.i18n.models import DEFAULT_LOCALE, Locale, LocaleResolutionContext
from toolkit_i18n.logging import get_module_logger

logger = get_module_logger()


def parse_accept_language(header: str) -> list[str]:
    """Parse an Accept-Language header into tags, most preferred first.

    Entries with q=0 are dropped; malformed q-values count as 1.0. Ties keep
    header order.

    Args:
        header: Header value (e.g., "fr-CA,fr;q=0.9,en;q=0.8").

    Returns:
        Language tags in preference order.
    """
    preferences = []
    for position, part in enumerate(header.split(",")):
        lang_range, _, params = part.partition(";")
        lang_range = lang_range.strip()
        if not lang_range:
            continue

        quality = 1.0
        for param in params.split(";"):
            name, _, value = param.partition("=")
            if name.strip().lower() != "q":
                continue
            try:
                quality = float(value.strip())
            except ValueError:
                quality = 1.0

        if quality > 0:
            preferences.append((quality, position, lang_range))

    preferences.sort(key=lambda item: (-item[0], item[1]))
    return [lang_range for _, _, lang_range in preferences]


class LocaleResolver:
    """Resolves a request locale from context sources.

    Fallback chain:
    1. Locale segment in the request path
    2. User profile preference
    3. Accept-Language header
    4. Default locale
    """

    def __init__(self, default_locale: Locale = DEFAULT_LOCALE):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when no preference found.
        """
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale.value)

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Resolve locale from an HTTP Accept-Language header.

        Tags are tried in preference order, first for an exact
        case-insensitive match ("zh-tw" -> zh-TW), then by language only
        ("pt-BR" -> pt).

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Resolved Locale, or the default if none match.
        """
        if not accept_language:
            return self.default_locale

        match = LanguageNegotiator.find_best_match(
            parse_accept_language(accept_language),
            [locale.value for locale in SUPPORTED_LOCALES],
        )
        if match is None:
            self.log.info("no_matching_locale_in_header", header=accept_language)
            return self.default_locale

        self.log.debug("resolved_from_header", locale=match)
        return Locale(match)

    def resolve_from_path(self, path: str) -> Locale:
        """Locale segment of a path, or the default locale."""
        return extract_locale_from_path(path) or self.default_locale

    def resolve_from_string(self, locale_str: str) -> Locale:
        """Parse and validate a locale string.

        Args:
            locale_str: Locale string (e.g., "en", "zh-TW").

        Returns:
            Parsed Locale.

        Raises:
            InvalidLocaleError: If locale_str is not supported.
        """
        try:
            return Locale.from_string(locale_str)
        except ValueError:
            self.log.warning("invalid_locale_string", locale_str=locale_str)
            raise

    def resolve_from_context(self, context: LocaleResolutionContext) -> Locale:
        """Resolve locale from a LocaleResolutionContext.

        Args:
            context: Locale resolution context.

        Returns:
            Resolved Locale.
        """
        if context.path_locale is not None:
            return context.path_locale
        if context.user_locale is not None:
            return context.user_locale
        if context.accept_language:
            return LocaleResolver(context.default_locale).resolve_from_header(
                context.accept_language
            )
        return context.default_locale


class LanguageNegotiator:
    """Language range matching between requested and available tags."""

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if an available tag matches a requested tag.

        Args:
            requested: Requested language tag (e.g., "pt-BR").
            available: Available language tag (e.g., "pt").
            strict: If True, requires a full (case-insensitive) match.

        Returns:
            True if the tags match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        requested_lang = requested.split("-")[0].lower()
        available_lang = available.split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: list[str],
        available: list[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find the best available tag for a preference-ordered request list.

        Args:
            requested: Requested language tags in preference order.
            available: Available language tags, in priority order.
            default: Returned if nothing matches.

        Returns:
            Best matching tag from ``available``, or ``default``.
        """
        for req_lang in requested:
            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=True):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang):
                    return avail_lang

        return default
