"""Factory functions for creating i18n components.

Builds loaders and resolvers from settings, auto-discovering the bundled
locales directory when none is configured.
"""

from pathlib import Path
from typing import Optional

from toolkit_i18n.configuration import settings
from toolkit_i18n.i18n.fallback import FallbackResolver
from toolkit_i18n.i18n.loader import YAMLTranslationLoader
from toolkit_i18n.i18n.models import Locale
from toolkit_i18n.logging import get_module_logger

logger = get_module_logger()

DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[1] / "locales"


def create_fallback_resolver(
    translations_dir: Optional[Path] = None,
    base_locale: Optional[Locale] = None,
    preload: Optional[bool] = None,
    use_cache: bool = True,
) -> FallbackResolver:
    """Create and configure a FallbackResolver.

    Unset arguments come from ``settings.i18n``.

    Args:
        translations_dir: Path to YAML bundles (default: settings, then the
            package's ``locales`` directory).
        base_locale: Locale every chain ends with.
        preload: Whether to merge every locale immediately.
        use_cache: Whether the loader caches parsed YAML.

    Returns:
        Configured resolver.

    Raises:
        ValueError: If the translations directory does not exist.
        InvalidLocaleError: If the configured base locale is unsupported.
    """
    i18n_settings = settings.i18n
    translations_dir = (
        translations_dir or i18n_settings.translations_dir or DEFAULT_TRANSLATIONS_DIR
    )
    base_locale = base_locale or Locale.from_string(i18n_settings.base_locale)
    preload = i18n_settings.preload if preload is None else preload

    loader = YAMLTranslationLoader(
        translations_dir=translations_dir,
        use_cache=use_cache,
        check_direction=i18n_settings.check_direction,
    )
    resolver = FallbackResolver(loader=loader, base_locale=base_locale)

    if preload:
        resolver.preload()
    logger.info(
        "fallback_resolver_created",
        translations_dir=str(translations_dir),
        base_locale=base_locale.value,
        preload=preload,
    )
    return resolver
