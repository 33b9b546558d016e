"""Translation engine infrastructure settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field

from toolkit_i18n.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding ``<namespace>.<locale>.yml``
            bundles (default: the package's bundled ``locales`` directory)
        I18N_BASE_LOCALE: Locale every other locale falls back to (default: en)
        I18N_DEFAULT_LOCALE: Locale used when a path carries none (default: en)
        I18N_PRELOAD: Merge every locale when the resolver is built (default: False)
        I18N_CHECK_DIRECTION: Warn when a bundle's ``meta.direction`` disagrees
            with the locale registry (default: True)

    Locale values are kept as plain strings here and converted with
    ``Locale.from_string`` by the factory, so an unsupported value fails at
    startup.

    Example:
        ```python
        from toolkit_i18n.configuration import settings

        if settings.i18n.preload:
            resolver.preload()
        ```
    """

    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory containing YAML resource bundles",
    )
    base_locale: str = Field(
        default="en",
        alias="I18N_BASE_LOCALE",
        description="Authoritative locale used as the last fallback tree",
    )
    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale assumed when a path has no locale segment",
    )
    preload: bool = Field(
        default=False,
        alias="I18N_PRELOAD",
        description="Load and merge every supported locale at startup",
    )
    check_direction: bool = Field(
        default=True,
        alias="I18N_CHECK_DIRECTION",
        description="Log a warning when a bundle declares a different text direction",
    )
