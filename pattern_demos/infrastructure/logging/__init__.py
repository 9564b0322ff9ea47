"""Logging infrastructure."""

from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
