"""Offline translation completeness audits.

Not used on the request path. These reports show how far each locale's own
bundle is from the base locale, and confirm that every error message key
resolves in every merged tree.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from toolkit_i18n.errors.codes import all_error_codes, message_key_for
from toolkit_i18n.i18n.exceptions import ResourceLoadFailure
from toolkit_i18n.i18n.fallback import FallbackResolver, find_missing_keys
from toolkit_i18n.i18n.loader import TranslationLoader
from toolkit_i18n.i18n.models import BASE_LOCALE, Locale
from toolkit_i18n.i18n.tree import EMPTY_TREE, iter_leaf_paths
from toolkit_i18n.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class CompletenessReport:
    """Translation coverage of one locale's own bundle.

    Attributes:
        locale: Audited locale.
        total_keys: Number of keys audited.
        missing_keys: Keys the bundle does not translate.
        load_error: Reason the bundle failed to load, if it did.
    """

    locale: Locale
    total_keys: int
    missing_keys: frozenset[str] = field(default_factory=frozenset)
    load_error: Optional[str] = None

    @property
    def coverage(self) -> float:
        """Fraction of audited keys translated (1.0 when nothing is audited)."""
        if self.total_keys == 0:
            return 1.0
        return (self.total_keys - len(self.missing_keys)) / self.total_keys

    @property
    def is_complete(self) -> bool:
        return self.load_error is None and not self.missing_keys


def audit_locales(
    loader: TranslationLoader,
    keys: Optional[Iterable[str]] = None,
    base_locale: Locale = BASE_LOCALE,
) -> Dict[Locale, CompletenessReport]:
    """Audit every supported locale's raw bundle.

    Args:
        loader: Loader supplying raw (un-merged) trees.
        keys: Keys to audit; defaults to every leaf in the base locale.
        base_locale: Locale whose keys define completeness.

    Returns:
        Report per locale, in registry order.
    """
    if keys is None:
        try:
            keys = list(iter_leaf_paths(loader.load(base_locale)))
        except ResourceLoadFailure as e:
            logger.error("base_locale_unavailable", locale=base_locale.value, reason=e.reason)
            keys = []
    key_list = sorted(set(keys))

    reports = {}
    for locale in Locale:
        load_error = None
        try:
            tree = loader.load(locale)
        except ResourceLoadFailure as e:
            tree = EMPTY_TREE
            load_error = e.reason

        report = CompletenessReport(
            locale=locale,
            total_keys=len(key_list),
            missing_keys=frozenset(find_missing_keys(tree, key_list)),
            load_error=load_error,
        )
        reports[locale] = report
        logger.info(
            "locale_audited",
            locale=locale.value,
            coverage=round(report.coverage, 4),
            missing_count=len(report.missing_keys),
            load_error=load_error,
        )
    return reports


def audit_error_keys(resolver: FallbackResolver) -> Dict[Locale, frozenset[str]]:
    """Error message keys unresolved in each locale's merged tree.

    Every value is expected to be empty; anything else means the base bundle
    lacks an error key.
    """
    error_keys = [message_key_for(code) for code in all_error_codes()]
    return {
        locale: frozenset(find_missing_keys(resolver.merged_tree(locale), error_keys))
        for locale in Locale
    }
