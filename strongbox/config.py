"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
Only ambient settings live here; product rules are fixed in strongbox.accounts.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class StrongboxConfig(BaseSettings):
    """Strongbox configuration"""

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Report configuration
    report_width: int = 56  # Width of "=== Title ====" section headers

    class Config:
        env_prefix = "STRONGBOX_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = StrongboxConfig()


def get_config() -> StrongboxConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> StrongboxConfig:
    """Reload configuration from environment"""
    global config
    config = StrongboxConfig()
    return config
