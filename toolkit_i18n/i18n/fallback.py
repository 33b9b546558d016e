"""Fallback resolution across locales.

Every locale is served through a merged tree: the locale's own bundle over
its configured parents, over the base locale. A locale with only part of its
keys translated therefore still presents a complete tree, with gaps filled
in the base language.

Resolution tiers, in order:
1. The merged tree for the requested locale.
2. The default English message for a known error code.
3. The dot-path itself, as visible placeholder text.
"""

import threading
from typing import Dict, Iterable, Mapping, Optional, Set

from toolkit_i18n.errors.codes import ErrorCode, default_message_for
from toolkit_i18n.i18n.exceptions import ResourceLoadFailure
from toolkit_i18n.i18n.loader import TranslationLoader
from toolkit_i18n.i18n.models import BASE_LOCALE, FALLBACK_PARENTS, Locale
from toolkit_i18n.i18n.tree import EMPTY_TREE, MessageTree, Node, merge_over, resolve
from toolkit_i18n.logging import get_module_logger

logger = get_module_logger()

__all__ = [
    "FallbackResolver",
    "find_missing_keys",
    "has_translation",
    "merge_over",
]


def has_translation(tree: MessageTree, dot_path: str) -> bool:
    """Check whether a key resolves to non-empty text in a tree."""
    return bool(resolve(tree, dot_path))


def find_missing_keys(tree: MessageTree, keys: Iterable[str]) -> Set[str]:
    """Keys from ``keys`` that do not resolve to non-empty text in ``tree``."""
    return {key for key in keys if not has_translation(tree, key)}


class FallbackResolver:
    """Builds, caches and queries merged per-locale trees.

    Merged trees are built at most once per locale while cached, with the
    same per-locale single-flight discipline as the loader.

    Attributes:
        loader: Source of raw per-locale trees.
        base_locale: Locale every chain ends with.
        parents: Intermediate fallbacks per locale (e.g., zh-TW -> zh).
    """

    def __init__(
        self,
        loader: TranslationLoader,
        base_locale: Locale = BASE_LOCALE,
        parents: Mapping[Locale, tuple[Locale, ...]] = FALLBACK_PARENTS,
    ):
        self.loader = loader
        self.base_locale = base_locale
        self.parents = parents
        self._merged: Dict[Locale, Node] = {}
        self._locks = {locale: threading.Lock() for locale in Locale}
        logger.info("initialized_fallback_resolver", base_locale=base_locale.value)

    def fallback_chain(self, locale: Locale) -> list[Locale]:
        """Locales consulted for ``locale``, nearest first, base last."""
        chain = [locale]
        for parent in self.parents.get(locale, ()):
            if parent not in chain:
                chain.append(parent)
        if self.base_locale not in chain:
            chain.append(self.base_locale)
        return chain

    def merged_tree(self, locale: Locale) -> Node:
        """Get the complete merged tree for a locale.

        Bundles that fail to load are logged and skipped; if even the base
        bundle fails, the result is an empty tree and every lookup falls
        through to defaults or placeholders.
        """
        cached = self._merged.get(locale)
        if cached is not None:
            return cached

        with self._locks[locale]:
            cached = self._merged.get(locale)
            if cached is not None:
                return cached
            merged = self._build_merged_tree(locale)
            self._merged[locale] = merged
            return merged

    def resolve_with_fallback(
        self,
        locale: Locale,
        dot_path: str,
        error_code: Optional[ErrorCode] = None,
    ) -> str:
        """Resolve a key for a locale; always returns non-empty text.

        Args:
            locale: Requested locale.
            dot_path: Key to resolve.
            error_code: Known error code whose default message is used when
                no tree has the key.

        Returns:
            Translated text, the error code's default message, or ``dot_path``.
        """
        message = resolve(self.merged_tree(locale), dot_path)
        if message:
            return message

        logger.warning(
            "translation_not_found",
            key=dot_path,
            locale=locale.value,
            error_code=error_code.value if error_code else None,
        )
        if error_code is not None:
            return default_message_for(error_code)
        return dot_path

    def preload(self, locales: Optional[Iterable[Locale]] = None) -> None:
        """Build merged trees ahead of the first request."""
        targets = list(locales) if locales is not None else list(Locale)
        for locale in targets:
            self.merged_tree(locale)
        logger.info("preloaded_translations", locale_count=len(targets))

    def invalidate(self, locale: Optional[Locale] = None) -> None:
        """Drop merged trees and the loader's raw trees.

        Invalidating one locale also drops every merged tree whose chain
        includes it (invalidating the base locale drops them all). Raw trees
        go first; each merged tree is then evicted under its build lock, so a
        build already in flight cannot leave a stale tree behind.
        """
        self.loader.clear_cache(locale)
        for merged_locale in Locale:
            if locale is None or locale in self.fallback_chain(merged_locale):
                with self._locks[merged_locale]:
                    self._merged.pop(merged_locale, None)

    def _build_merged_tree(self, locale: Locale) -> Node:
        merged: MessageTree = EMPTY_TREE
        loaded = []
        for chain_locale in reversed(self.fallback_chain(locale)):
            try:
                tree = self.loader.load(chain_locale)
            except ResourceLoadFailure as e:
                log = logger.error if chain_locale == self.base_locale else logger.warning
                log(
                    "resource_load_failed",
                    locale=chain_locale.value,
                    requested_locale=locale.value,
                    reason=e.reason,
                    source=e.source,
                )
                continue
            merged = merge_over(tree, merged)
            loaded.append(chain_locale.value)

        if locale.value not in loaded:
            logger.warning(
                "used_fallback_locale",
                requested_locale=locale.value,
                served_from=list(reversed(loaded)),
            )
        return merged
