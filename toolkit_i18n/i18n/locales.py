"""Locale registry lookups and URL path helpers.

Path matching always compares whole segments against the supported set.
"zh" is a strict prefix of "zh-TW", so prefix or character-class matching
would misclassify one as the other.
"""

from typing import Optional

from toolkit_i18n.i18n.models import LOCALE_CONFIGS, Direction, Locale, LocaleConfig

SUPPORTED_LOCALES: tuple[Locale, ...] = tuple(Locale)
_SUPPORTED_CODES = frozenset(locale.value for locale in SUPPORTED_LOCALES)


def is_supported_locale(candidate: object) -> bool:
    """Exact membership test against the supported locale codes.

    Args:
        candidate: Any value; only exact supported code strings match.

    Returns:
        True if candidate is one of the supported codes.
    """
    return isinstance(candidate, str) and candidate in _SUPPORTED_CODES


def locale_config(locale: Locale) -> LocaleConfig:
    """Get display/formatting metadata for a validated locale."""
    return LOCALE_CONFIGS[locale]


def get_direction(locale: Locale) -> Direction:
    """Get the text direction declared for a locale."""
    return LOCALE_CONFIGS[locale].direction


def is_rtl(locale: Locale) -> bool:
    """Check if a locale is written right-to-left."""
    return get_direction(locale) == "rtl"


def _split_leading_segment(path: str) -> tuple[str, str]:
    stripped = path.lstrip("/")
    head, _, rest = stripped.partition("/")
    return head, rest


def extract_locale_from_path(path: str) -> Optional[Locale]:
    """Get the locale carried by the first segment of a URL path.

    Args:
        path: URL-style path (e.g., "/zh-TW/tools/merge").

    Returns:
        The Locale if the first segment is exactly a supported code, else None.
    """
    head, _ = _split_leading_segment(path)
    if is_supported_locale(head):
        return Locale(head)
    return None


def inject_locale_into_path(path: str, locale: Locale) -> str:
    """Prefix a path with a locale segment, replacing any existing one.

    Leading slashes are collapsed; a trailing slash is preserved.

    Args:
        path: URL-style path with or without a locale segment.
        locale: Target locale.

    Returns:
        Path beginning with "/<locale>/".

    Example:
        inject_locale_into_path("/zh/tools", Locale.ZH_TW)  # "/zh-TW/tools"
        inject_locale_into_path("", Locale.AR)              # "/ar/"
    """
    head, rest = _split_leading_segment(path)
    if is_supported_locale(head):
        remainder = rest.lstrip("/")
    else:
        remainder = path.lstrip("/")
    return f"/{locale.value}/{remainder}"
