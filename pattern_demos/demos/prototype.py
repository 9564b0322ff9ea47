"""
Prototype Pattern: Creational Design Pattern

New objects are created by cloning an existing prototype instead of being
built from scratch. Useful when construction is expensive, when many objects
share most of their state, or to avoid a parallel hierarchy of factories.

Key components:
- Prototype: Shape, declares clone()
- Concrete prototypes: Rectangle and Circle, each knows how to copy itself
- Client: asks a prototype for a copy rather than calling a constructor
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Optional

from pattern_demos.config import AppConfig, load_config
from pattern_demos.demos.narration import print_rule
from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class Shape(ABC):
    """Prototype interface."""

    @abstractmethod
    def clone(self) -> "Shape":
        """Return an independent copy of this shape."""


@dataclass
class Rectangle(Shape):
    width: float
    height: float
    type: str = field(default="Rectangle", init=False)

    def clone(self) -> "Rectangle":
        return replace(self)


@dataclass
class Circle(Shape):
    radius: float
    type: str = field(default="Circle", init=False)

    def clone(self) -> "Circle":
        return replace(self)


def run(config: Optional[AppConfig] = None) -> None:
    """Clone two shapes and show that the clones are independent."""
    config = config or AppConfig()
    print_rule(config.display, "=")
    print("Demo Prototype Pattern")

    rectangle = Rectangle(10, 20)
    circle = Circle(15)

    cloned_rectangle = rectangle.clone()
    cloned_circle = circle.clone()
    logger.debug("Cloned prototypes", shapes=[rectangle.type, circle.type])

    print("Original Rectangle:", rectangle)
    print("Cloned Rectangle:", cloned_rectangle)
    print("Original Circle:", circle)
    print("Cloned Circle:", cloned_circle)

    cloned_rectangle.width = 30
    cloned_circle.radius = 25

    print("\nAfter modifying clones:")
    print("Original Rectangle:", rectangle)
    print("Modified Clone Rectangle:", cloned_rectangle)
    print("Original Circle:", circle)
    print("Modified Clone Circle:", cloned_circle)


def main() -> None:
    config = load_config()
    setup_logging(config.logging)
    run(config)


if __name__ == "__main__":
    main()
