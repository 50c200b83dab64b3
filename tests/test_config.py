"""
Test suite for configuration module

Tests defaults and environment overrides.
"""

import pytest

from strongbox import config as config_module
from strongbox.config import StrongboxConfig, get_config, reload_config


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("STRONGBOX_LOG_LEVEL", "STRONGBOX_LOG_FORMAT",
                 "STRONGBOX_LOG_FILE", "STRONGBOX_REPORT_WIDTH"):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    reload_config()


class TestStrongboxConfig:
    """Test configuration loading"""

    def test_defaults(self, clean_env):
        settings = StrongboxConfig()

        assert settings.log_level == "WARNING"
        assert settings.log_format == "json"
        assert settings.log_file is None
        assert settings.report_width == 56

    def test_environment_override(self, clean_env):
        clean_env.setenv("STRONGBOX_LOG_LEVEL", "DEBUG")
        clean_env.setenv("strongbox_report_width", "72")

        settings = reload_config()

        assert settings.log_level == "DEBUG"
        assert settings.report_width == 72
        assert get_config() is settings
        assert config_module.config is settings

    def test_get_config_returns_global(self, clean_env):
        assert get_config() is config_module.config
