"""Configuration package."""

from pattern_demos.config.manager import ConfigurationManager, load_config
from pattern_demos.config.schemas import (
    AppConfig,
    DisplayConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    ProxyConfig,
    SingletonConfig,
)

__all__ = [
    "AppConfig",
    "ConfigurationManager",
    "DisplayConfig",
    "LogDestination",
    "LoggingConfig",
    "LogLevel",
    "ProxyConfig",
    "SingletonConfig",
    "load_config",
]
