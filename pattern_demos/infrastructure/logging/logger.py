"""Structured logging for the demos using structlog.

Narration is printed to stdout by the demos themselves; log records go to
stderr and/or a rotating file so the two never interleave.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from pattern_demos.config.schemas.logging_schema import LoggingConfig

_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + _SHARED_PROCESSORS
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_formatter(fmt: Optional[str]) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=False),
        foreign_pre_chain=_SHARED_PROCESSORS,
        fmt=fmt,
    )


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, LoggingConfig defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from pattern_demos.config.schemas.logging_schema import LoggingConfig

        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    formatter = _build_formatter(config.format)
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("console", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)

    logger = get_logger(__name__)
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given module name."""
    return structlog.get_logger(name)


# structlog must never fall back to its default stdout printer
_configure_structlog()
