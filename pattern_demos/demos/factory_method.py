"""
Factory Method Pattern: Creational Design Pattern

The creator declares a factory method that returns a product, and each
concrete creator subclass decides which product class to instantiate.

Key components:
- Creator: VehicleFactory, declares create_vehicle()
- Concrete creators: CarFactory, BikeFactory
- Product: Vehicle
- Concrete products: Car, Bike

Unlike the simple factory, adding a product means adding a creator
subclass; no existing class has to change.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pattern_demos.config import AppConfig, load_config
from pattern_demos.demos.narration import print_rule
from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


class Vehicle(ABC):
    """Product interface."""

    @abstractmethod
    def get_type(self) -> str:
        pass


class Car(Vehicle):
    def get_type(self) -> str:
        return "Car"


class Bike(Vehicle):
    def get_type(self) -> str:
        return "Bike"


class VehicleFactory(ABC):
    """Creator interface."""

    @abstractmethod
    def create_vehicle(self) -> Vehicle:
        """Factory method implemented by concrete creators."""

    def order_vehicle(self) -> Vehicle:
        """Create a vehicle through the factory method and announce it."""
        vehicle = self.create_vehicle()
        logger.debug("Vehicle created", factory=type(self).__name__, vehicle=vehicle.get_type())
        print("Created:", vehicle.get_type())
        return vehicle


class CarFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Car()


class BikeFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Bike()


def run(config: Optional[AppConfig] = None) -> None:
    """Order one vehicle from each concrete factory."""
    config = config or AppConfig()
    print_rule(config.display, "=")
    print("Demo Factory Method Pattern")

    for factory in (CarFactory(), BikeFactory()):
        factory.order_vehicle()


def main() -> None:
    config = load_config()
    setup_logging(config.logging)
    run(config)


if __name__ == "__main__":
    main()
