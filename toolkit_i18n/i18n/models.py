"""Locale models for the i18n system.

Defines the closed set of supported locales and their display/formatting
metadata. Everything here is immutable and built once at import time.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping, Optional

from toolkit_i18n.i18n.exceptions import InvalidLocaleError

Direction = Literal["ltr", "rtl"]


class Locale(str, Enum):
    """Supported locale identifiers, in display order.

    Values are the exact tokens used in URL paths and bundle file names.
    """

    EN = "en"
    JA = "ja"
    KO = "ko"
    ES = "es"
    FR = "fr"
    DE = "de"
    ZH = "zh"
    ZH_TW = "zh-TW"
    PT = "pt"
    AR = "ar"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Matching is exact: no case folding and no region stripping.

        Args:
            locale_str: Locale string (e.g., "en", "zh-TW").

        Returns:
            Matching Locale enum value.

        Raises:
            InvalidLocaleError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise InvalidLocaleError(locale_str) from e

    @property
    def language(self) -> str:
        """Language part of the locale (e.g., "zh" from "zh-TW")."""
        return self.value.split("-")[0]

    @property
    def region(self) -> str:
        """Region part of the locale (e.g., "TW" from "zh-TW"), or ""."""
        parts = self.value.split("-")
        return parts[1] if len(parts) > 1 else ""


@dataclass(frozen=True)
class LocaleConfig:
    """Display and formatting metadata for one locale.

    Attributes:
        name: English display name.
        native_name: Name of the language in the language itself.
        direction: Text direction, passed through to the presentation layer.
        date_format: Date pattern used by the content layer.
    """

    name: str
    native_name: str
    direction: Direction
    date_format: str


BASE_LOCALE = Locale.EN
DEFAULT_LOCALE = Locale.EN

LOCALE_CONFIGS: Mapping[Locale, LocaleConfig] = MappingProxyType(
    {
        Locale.EN: LocaleConfig("English", "English", "ltr", "MM/DD/YYYY"),
        Locale.JA: LocaleConfig("Japanese", "日本語", "ltr", "YYYY/MM/DD"),
        Locale.KO: LocaleConfig("Korean", "한국어", "ltr", "YYYY.MM.DD"),
        Locale.ES: LocaleConfig("Spanish", "Español", "ltr", "DD/MM/YYYY"),
        Locale.FR: LocaleConfig("French", "Français", "ltr", "DD/MM/YYYY"),
        Locale.DE: LocaleConfig("German", "Deutsch", "ltr", "DD.MM.YYYY"),
        Locale.ZH: LocaleConfig("Chinese (Simplified)", "简体中文", "ltr", "YYYY-MM-DD"),
        Locale.ZH_TW: LocaleConfig(
            "Chinese (Traditional)", "繁體中文", "ltr", "YYYY/MM/DD"
        ),
        Locale.PT: LocaleConfig("Portuguese", "Português", "ltr", "DD/MM/YYYY"),
        Locale.AR: LocaleConfig("Arabic", "العربية", "rtl", "DD/MM/YYYY"),
    }
)

# Locales served from a closer relative before the base locale.
FALLBACK_PARENTS: Mapping[Locale, tuple[Locale, ...]] = MappingProxyType(
    {
        Locale.ZH_TW: (Locale.ZH,),
    }
)


@dataclass(frozen=True)
class LocaleResolutionContext:
    """Inputs for resolving the locale of a request.

    Attributes:
        path_locale: Locale carried by the request path, if any.
        user_locale: User's stored preference, if any.
        accept_language: Raw Accept-Language header, if any.
        default_locale: Locale used when nothing else matches.
    """

    path_locale: Optional[Locale] = None
    user_locale: Optional[Locale] = None
    accept_language: Optional[str] = None
    default_locale: Locale = DEFAULT_LOCALE
