"""Translation loading interface and implementations.

Defines the contract for loading one locale's message tree and provides the
YAML-based loader. Loaders only report failures; substituting another locale
is the fallback resolver's job.
"""

import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

import yaml

from toolkit_i18n.i18n.exceptions import ResourceLoadFailure
from toolkit_i18n.i18n.locales import get_direction
from toolkit_i18n.i18n.models import Locale
from toolkit_i18n.i18n.tree import (
    EMPTY_TREE,
    MalformedTreeError,
    MessageTree,
    Node,
    build_tree,
    merge_over,
    resolve,
)
from toolkit_i18n.logging import get_module_logger

logger = get_module_logger()

DIRECTION_KEY = "meta.direction"


class TranslationLoader(ABC):
    """Abstract base for translation loaders."""

    @abstractmethod
    def load(self, locale: Locale) -> Node:
        """Load the full message tree for a locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            Immutable message tree.

        Raises:
            ResourceLoadFailure: If the bundle is absent or malformed.
        """

    @abstractmethod
    def clear_cache(self, locale: Optional[Locale] = None) -> None:
        """Drop cached trees, for one locale or all of them."""

    def load_all(self) -> Dict[Locale, Node]:
        """Load every supported locale, skipping those that fail.

        Returns:
            Dict mapping each loadable Locale to its tree.
        """
        result = {}
        for locale in Locale:
            try:
                result[locale] = self.load(locale)
            except ResourceLoadFailure as e:
                logger.warning(
                    "could_not_load_locale", locale=locale.value, reason=e.reason
                )
        return result


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based translation files.

    Expects files named ``<namespace>.<locale>.yml`` in the translations
    directory. All files of one locale are deep-merged in sorted filename
    order, later files winning on overlapping leaves.

    Each locale is read at most once while cached. Concurrent first requests
    for the same locale wait on that locale's lock instead of reading again,
    and a finished tree is published with a single dict assignment.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        use_cache: Whether loaded trees are kept in memory.
        check_direction: Whether to compare a bundle's ``meta.direction``
            against the locale registry.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
        check_direction: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded trees in memory.
            check_direction: Whether to warn on declared direction mismatches.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.check_direction = check_direction
        self._cache: Dict[Locale, Node] = {}
        self._locks = {locale: threading.Lock() for locale in Locale}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    @property
    def cached_locales(self) -> list[Locale]:
        """Locales whose trees are currently cached."""
        return [locale for locale in Locale if locale in self._cache]

    def load(self, locale: Locale) -> Node:
        """Load the message tree for a locale from YAML files.

        Args:
            locale: Locale to load.

        Returns:
            Immutable merged tree of every file for the locale.

        Raises:
            ResourceLoadFailure: If no files exist for the locale, a file
                cannot be read or parsed, or its contents are not a nested
                string tree.
        """
        if not self.use_cache:
            return self._read_locale(locale)

        cached = self._cache.get(locale)
        if cached is not None:
            return cached

        with self._locks[locale]:
            cached = self._cache.get(locale)
            if cached is not None:
                return cached
            tree = self._read_locale(locale)
            self._cache[locale] = tree
            return tree

    def available_locales(self) -> list[Locale]:
        """Locales that have at least one bundle file, in registry order."""
        return [
            locale
            for locale in Locale
            if any(self.translations_dir.glob(f"*.{locale.value}.yml"))
        ]

    def clear_cache(self, locale: Optional[Locale] = None) -> None:
        """Clear cached translations.

        Eviction takes the locale's lock, so a read already in flight
        publishes first and is then dropped.

        Args:
            locale: Locale to evict; clears every locale when None.
        """
        targets = list(Locale) if locale is None else [locale]
        for target in targets:
            with self._locks[target]:
                self._cache.pop(target, None)
        logger.info(
            "translation_cache_cleared",
            locale=locale.value if locale else "all",
        )

    def _read_locale(self, locale: Locale) -> Node:
        yaml_files = sorted(self.translations_dir.glob(f"*.{locale.value}.yml"))
        if not yaml_files:
            raise ResourceLoadFailure(
                locale.value, f"no translation files in {self.translations_dir}"
            )

        tree = EMPTY_TREE
        for yaml_file in yaml_files:
            file_tree = self._read_file(locale, yaml_file)
            if file_tree is not None:
                tree = merge_over(file_tree, tree)

        if self.check_direction:
            self._check_declared_direction(locale, tree)

        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(yaml_files),
            namespace_count=len(tree.children),
        )
        return tree

    def _read_file(self, locale: Locale, yaml_file: Path) -> Optional[Node]:
        try:
            with open(yaml_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
            raise ResourceLoadFailure(
                locale.value, f"invalid YAML: {e}", str(yaml_file)
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceLoadFailure(
                locale.value, f"unreadable file: {e}", str(yaml_file)
            ) from e

        if data is None:
            return None

        try:
            return build_tree(data)
        except MalformedTreeError as e:
            logger.error(
                "invalid_yaml_format",
                file=str(yaml_file),
                path=e.path,
                problem=e.problem,
            )
            raise ResourceLoadFailure(
                locale.value, f"malformed tree at {e}", str(yaml_file)
            ) from e

    def _check_declared_direction(self, locale: Locale, tree: MessageTree) -> None:
        declared = resolve(tree, DIRECTION_KEY)
        if declared is not None and declared != get_direction(locale):
            logger.warning(
                "declared_direction_mismatch",
                locale=locale.value,
                declared=declared,
                expected=get_direction(locale),
            )
