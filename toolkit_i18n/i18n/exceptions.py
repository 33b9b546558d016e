"""Exceptions raised by the i18n system.

Only the loader raises ``ResourceLoadFailure``; the fallback resolver is the
single place that catches it and substitutes the base locale. Nothing on the
resolution path (lookups, merging, translators) raises.
"""

from typing import Optional


class I18nError(Exception):
    """Base class for i18n errors."""


class ResourceLoadFailure(I18nError):
    """A locale's resource bundle is missing or structurally malformed.

    Attributes:
        locale: Locale code whose bundle could not be loaded.
        reason: Human-readable description of the failure.
        source: File the failure originated from, when known.
    """

    def __init__(self, locale: str, reason: str, source: Optional[str] = None):
        self.locale = locale
        self.reason = reason
        self.source = source
        message = f"Could not load resources for locale '{locale}': {reason}"
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class InvalidLocaleError(I18nError, ValueError):
    """A value outside the supported locale set was given where a Locale is required."""

    def __init__(self, candidate: object):
        self.candidate = candidate
        super().__init__(f"Unsupported locale: {candidate!r}")
