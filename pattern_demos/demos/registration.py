"""Demo Registration - Register every pattern demo with the demo registry."""

from typing import TYPE_CHECKING, List, Tuple

from pattern_demos.demos import (
    facade,
    factory_method,
    observer,
    prototype,
    proxy,
    simple_factory,
    singleton,
    solid,
    strategy,
)
from pattern_demos.domain.demo import DemoInfo, PatternCategory
from pattern_demos.infrastructure.logging.logger import get_logger

if TYPE_CHECKING:
    from pattern_demos.registry import DemoRegistry, DemoRunner

logger = get_logger(__name__)

DEMOS: List[Tuple[DemoInfo, "DemoRunner"]] = [
    (
        DemoInfo(
            name="prototype",
            title="Prototype",
            category=PatternCategory.CREATIONAL,
            summary="Create objects by cloning a prototype instead of constructing them",
        ),
        prototype.run,
    ),
    (
        DemoInfo(
            name="solid",
            title="SOLID Principles",
            category=PatternCategory.PRINCIPLES,
            summary="Five design principles, each shown violated and then followed",
        ),
        solid.run,
    ),
    (
        DemoInfo(
            name="facade",
            title="Facade",
            category=PatternCategory.STRUCTURAL,
            summary="One simple interface in front of several pricing subsystems",
        ),
        facade.run,
    ),
    (
        DemoInfo(
            name="simple_factory",
            title="Simple Factory",
            category=PatternCategory.CREATIONAL,
            summary="A single factory picks the concrete class from a type key",
        ),
        simple_factory.run,
    ),
    (
        DemoInfo(
            name="strategy",
            title="Strategy",
            category=PatternCategory.BEHAVIORAL,
            summary="Swap payment algorithms at runtime behind one interface",
        ),
        strategy.run,
    ),
    (
        DemoInfo(
            name="observer",
            title="Observer",
            category=PatternCategory.BEHAVIORAL,
            summary="Notify attached observers whenever a store's price changes",
        ),
        observer.run,
    ),
    (
        DemoInfo(
            name="proxy",
            title="Proxy",
            category=PatternCategory.STRUCTURAL,
            summary="Guard a bank account with validation and a withdrawal limit",
        ),
        proxy.run,
    ),
    (
        DemoInfo(
            name="singleton",
            title="Singleton",
            category=PatternCategory.CREATIONAL,
            summary="Share exactly one database connection across the process",
        ),
        singleton.run,
    ),
    (
        DemoInfo(
            name="factory_method",
            title="Factory Method",
            category=PatternCategory.CREATIONAL,
            summary="Let creator subclasses decide which vehicle to build",
        ),
        factory_method.run,
    ),
]


def register_all_demos(registry: "DemoRegistry") -> None:
    """
    Register every demo with the registry.

    Demos that are already registered are left untouched, so calling this
    more than once is harmless.
    """
    for info, runner in DEMOS:
        if registry.is_registered(info.name):
            continue
        registry.register_demo(info, runner)
    logger.debug("Demos registered", count=len(registry.get_registered_demos()))
