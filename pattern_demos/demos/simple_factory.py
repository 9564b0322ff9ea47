"""
Simple Factory Pattern: Creational Design Pattern

A single factory object decides which concrete class to instantiate from a
type key, keeping creation code out of the code that uses the products.

Benefits:
- Separates object creation code from object usage code
- Products can be added or removed in one place

Drawbacks:
- Every new product means editing the factory itself, so the factory is not
  closed for modification (compare the factory_method demo)
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from pattern_demos.config import AppConfig, load_config
from pattern_demos.demos.narration import print_rule
from pattern_demos.domain.exceptions import UnsupportedAnimalError
from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


class Animal(ABC):
    """Product interface."""

    @abstractmethod
    def make_sound(self) -> str:
        pass


class Dog(Animal):
    def make_sound(self) -> str:
        return "Woof!"


class Cat(Animal):
    def make_sound(self) -> str:
        return "Meow!"


class AnimalFactory:
    """Simple factory mapping an animal type to its class."""

    _animals: Dict[str, Type[Animal]] = {
        "dog": Dog,
        "cat": Cat,
    }

    def create_animal(self, animal_type: str) -> Animal:
        """
        Create an animal by type name (case-insensitive).

        Raises:
            UnsupportedAnimalError: If the type is unknown
        """
        animal_class = self._animals.get(animal_type.lower())
        if animal_class is None:
            raise UnsupportedAnimalError(animal_type)
        return animal_class()


def run(config: Optional[AppConfig] = None) -> None:
    """Create a dog and a cat, then ask for an unsupported bird."""
    config = config or AppConfig()
    print_rule(config.display, "=")
    print("Demo Simple Factory Pattern")

    factory = AnimalFactory()

    dog = factory.create_animal("dog")
    cat = factory.create_animal("cat")

    print("Dog says:", dog.make_sound())
    print("Cat says:", cat.make_sound())

    try:
        factory.create_animal("bird")
    except UnsupportedAnimalError as e:
        logger.warning("Animal factory rejected request", animal_type=e.animal_type)
        print("Error:", e)


def main() -> None:
    config = load_config()
    setup_logging(config.logging)
    run(config)


if __name__ == "__main__":
    main()
