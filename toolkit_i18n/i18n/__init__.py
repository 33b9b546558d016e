"""i18n system - translation resolution with locale fallback.

Main components:
- models: Locale, LocaleConfig, LocaleResolutionContext
- locales: locale registry lookups and URL path helpers
- tree: MessageTree (Leaf | Node), resolve, merge_over
- loader: TranslationLoader and YAMLTranslationLoader
- fallback: FallbackResolver, has_translation, find_missing_keys
- translator: Translator and make_translator
- resolvers: LocaleResolver and LanguageNegotiator
- audit: offline completeness reports
"""

from toolkit_i18n.i18n.audit import (
    CompletenessReport,
    audit_error_keys,
    audit_locales,
)
from toolkit_i18n.i18n.exceptions import (
    I18nError,
    InvalidLocaleError,
    ResourceLoadFailure,
)
from toolkit_i18n.i18n.fallback import (
    FallbackResolver,
    find_missing_keys,
    has_translation,
    merge_over,
)
from toolkit_i18n.i18n.loader import TranslationLoader, YAMLTranslationLoader
from toolkit_i18n.i18n.locales import (
    SUPPORTED_LOCALES,
    extract_locale_from_path,
    get_direction,
    inject_locale_into_path,
    is_rtl,
    is_supported_locale,
    locale_config,
)
from toolkit_i18n.i18n.models import (
    BASE_LOCALE,
    DEFAULT_LOCALE,
    Locale,
    LocaleConfig,
    LocaleResolutionContext,
)
from toolkit_i18n.i18n.resolvers import LanguageNegotiator, LocaleResolver
from toolkit_i18n.i18n.translator import Translator, interpolate, make_translator
from toolkit_i18n.i18n.tree import Leaf, MessageTree, Node, build_tree, resolve

__all__ = [
    "BASE_LOCALE",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "Locale",
    "LocaleConfig",
    "LocaleResolutionContext",
    "I18nError",
    "InvalidLocaleError",
    "ResourceLoadFailure",
    "Leaf",
    "Node",
    "MessageTree",
    "build_tree",
    "resolve",
    "merge_over",
    "has_translation",
    "find_missing_keys",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "FallbackResolver",
    "Translator",
    "make_translator",
    "interpolate",
    "LocaleResolver",
    "LanguageNegotiator",
    "is_supported_locale",
    "locale_config",
    "get_direction",
    "is_rtl",
    "extract_locale_from_path",
    "inject_locale_into_path",
    "CompletenessReport",
    "audit_locales",
    "audit_error_keys",
]
