"""Configuration schemas."""

from .app_schema import AppConfig, DisplayConfig, ProxyConfig, SingletonConfig
from .logging_schema import LogDestination, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "DisplayConfig",
    "ProxyConfig",
    "SingletonConfig",
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
]
