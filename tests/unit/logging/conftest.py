"""Fixtures for toolkit_i18n.logging tests."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def mock_settings():
    """Settings stand-in with the attributes configure_logging reads."""
    settings = Mock()
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings
