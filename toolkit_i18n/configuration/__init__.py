"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class (for testing)
"""

from toolkit_i18n.configuration.i18n import I18nSettings
from toolkit_i18n.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
