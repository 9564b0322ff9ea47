import logging

import pytest

from pattern_demos.config import AppConfig
from pattern_demos.demos.singleton import Database
from pattern_demos.registry import DemoRegistry


@pytest.fixture
def app_config():
    """Default application configuration."""
    return AppConfig()


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Each test starts without singletons and leaves no log handlers behind."""
    Database.reset_instance()
    DemoRegistry.reset_instance()
    yield
    Database.reset_instance()
    DemoRegistry.reset_instance()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.WARNING)
