"""Demo Registry - Registry pattern for pattern demo runners.

Demos are looked up by name instead of through hard-coded conditionals, so a
new demo only needs to be registered to become available to the CLI.
"""

import threading
from typing import Callable, Dict, List, Optional

from pattern_demos.config.schemas import AppConfig
from pattern_demos.domain.demo import DemoInfo
from pattern_demos.domain.exceptions import UnsupportedDemoError
from pattern_demos.infrastructure.logging.logger import get_logger

DemoRunner = Callable[[AppConfig], None]


class DemoRegistration:
    """Container for demo registration information."""

    def __init__(self, info: DemoInfo, runner: DemoRunner):
        """
        Initialize demo registration.

        Args:
            info: Descriptive metadata for the demo
            runner: Callable that runs the demo against a configuration
        """
        self.info = info
        self.runner = runner

    @property
    def name(self) -> str:
        return self.info.name


class DemoRegistry:
    """
    Registry for pattern demos.

    Thread-safe singleton implementation; registration order is preserved so
    that ``run --all`` plays the demos in a stable sequence.
    """

    _instance: Optional["DemoRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize demo registry."""
        self._registrations: Dict[str, DemoRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "DemoRegistry":
        """Get singleton instance of demo registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance; the next get_instance() builds a fresh one."""
        with cls._lock:
            cls._instance = None

    def register_demo(self, info: DemoInfo, runner: DemoRunner) -> None:
        """
        Register a demo with its runner.

        Args:
            info: Demo metadata; ``info.name`` is the registry key
            runner: Callable taking an AppConfig

        Raises:
            ValueError: If a demo with the same name is already registered
        """
        with self._registration_lock:
            if info.name in self._registrations:
                raise ValueError(f"Demo '{info.name}' is already registered")

            self._registrations[info.name] = DemoRegistration(info, runner)
            self._logger.debug("Registered demo", demo=info.name)

    def get_registration(self, name: str) -> DemoRegistration:
        """
        Get the registration for a demo.

        Raises:
            UnsupportedDemoError: If no demo is registered under ``name``
        """
        registration = self._registrations.get(name)
        if registration is None:
            raise UnsupportedDemoError(name, self.get_registered_demos())
        return registration

    def run_demo(self, name: str, config: AppConfig) -> None:
        """Run a registered demo."""
        registration = self.get_registration(name)
        self._logger.debug("Running demo", demo=name)
        registration.runner(config)

    def get_registered_demos(self) -> List[str]:
        """Get demo names in registration order."""
        return list(self._registrations.keys())

    def get_demo_infos(self) -> List[DemoInfo]:
        """Get metadata for every registered demo."""
        return [registration.info for registration in self._registrations.values()]

    def is_registered(self, name: str) -> bool:
        """Check whether a demo is registered."""
        return name in self._registrations

    def clear_registrations(self) -> None:
        """Clear all registrations (primarily for testing)."""
        with self._registration_lock:
            self._registrations.clear()
