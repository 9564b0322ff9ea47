"""Tests for the demo registry."""

from unittest.mock import Mock

import pytest

from pattern_demos.demos.registration import DEMOS, register_all_demos
from pattern_demos.domain.demo import DemoInfo, PatternCategory
from pattern_demos.domain.exceptions import UnsupportedDemoError
from pattern_demos.registry import DemoRegistry


def make_info(name="sample"):
    return DemoInfo(name=name, title="Sample", category=PatternCategory.BEHAVIORAL, summary="s")


class TestDemoRegistry:
    """Test demo registry functionality."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = DemoRegistry()
        self.runner = Mock()

    def test_register_and_run(self, app_config):
        self.registry.register_demo(make_info(), self.runner)

        self.registry.run_demo("sample", app_config)

        assert self.registry.is_registered("sample")
        self.runner.assert_called_once_with(app_config)

    def test_duplicate_registration_rejected(self):
        self.registry.register_demo(make_info(), self.runner)

        with pytest.raises(ValueError, match="already registered"):
            self.registry.register_demo(make_info(), self.runner)

    def test_unknown_demo_raises(self, app_config):
        self.registry.register_demo(make_info(), self.runner)

        with pytest.raises(UnsupportedDemoError, match="Demo 'visitor' is not registered") as exc_info:
            self.registry.run_demo("visitor", app_config)

        assert exc_info.value.available == ["sample"]
        self.runner.assert_not_called()

    def test_registration_order_is_preserved(self):
        for name in ("c", "a", "b"):
            self.registry.register_demo(make_info(name), self.runner)

        assert self.registry.get_registered_demos() == ["c", "a", "b"]
        assert [info.name for info in self.registry.get_demo_infos()] == ["c", "a", "b"]

    def test_clear_registrations(self):
        self.registry.register_demo(make_info(), self.runner)

        self.registry.clear_registrations()

        assert self.registry.get_registered_demos() == []


def test_get_instance_is_shared():
    assert DemoRegistry.get_instance() is DemoRegistry.get_instance()


def test_reset_instance_builds_new_registry():
    first = DemoRegistry.get_instance()
    DemoRegistry.reset_instance()
    assert DemoRegistry.get_instance() is not first


def test_register_all_demos_is_idempotent():
    registry = DemoRegistry.get_instance()

    register_all_demos(registry)
    register_all_demos(registry)

    assert registry.get_registered_demos() == [
        "prototype",
        "solid",
        "facade",
        "simple_factory",
        "strategy",
        "observer",
        "proxy",
        "singleton",
        "factory_method",
    ]


def test_every_demo_has_metadata():
    for info, runner in DEMOS:
        assert info.title
        assert info.summary
        assert callable(runner)


def test_demo_info_stores_category_value():
    info = make_info()
    assert info.category == "behavioral"
    assert info.model_dump()["category"] == "behavioral"


@pytest.mark.parametrize("name", [info.name for info, _ in DEMOS])
def test_every_registered_demo_runs(name, app_config, capsys):
    registry = DemoRegistry.get_instance()
    register_all_demos(registry)

    registry.run_demo(name, app_config)

    assert capsys.readouterr().out
