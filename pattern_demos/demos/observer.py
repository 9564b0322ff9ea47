"""
Observer Pattern: Behavioral Design Pattern

A subject keeps a list of observers and notifies all of them when its state
changes, so the subject never needs to know who is listening.

Key components:
- Subject: maintains the observer list and notifies it
- Observer: interface for anything that wants updates
- Concrete observers: EmailObserver, SMSObserver, AppObserver
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from pattern_demos.config import AppConfig, load_config
from pattern_demos.demos.narration import print_section
from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


# Without Observer Pattern
class Store:
    """Store that notifies every channel itself, tightly coupled to all of them."""

    def __init__(self):
        self.price = 0

    def set_price(self, price: float) -> None:
        self.price = price
        print(f"Email notification: Price updated to {price}")
        print(f"SMS notification: Price updated to {price}")
        print(f"App notification: Price updated to {price}")


class Observer(ABC):
    """Observer interface."""

    @abstractmethod
    def update(self, data: Any) -> None:
        pass


class Subject:
    """Keeps observers in attach order and broadcasts data to them."""

    def __init__(self):
        self._observers: List[Observer] = []

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)
        logger.debug("Observer attached", observer=type(observer).__name__)

    def detach(self, observer: Observer) -> None:
        """Stop notifying ``observer``; unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug("Observer detached", observer=type(observer).__name__)

    def notify(self, data: Any) -> None:
        for observer in list(self._observers):
            observer.update(data)


class StoreWithObserver(Subject):
    def __init__(self):
        super().__init__()
        self.price = 0

    def set_price(self, price: float) -> None:
        self.price = price
        self.notify(price)


class EmailObserver(Observer):
    def update(self, price: Any) -> None:
        print(f"Email notification: Price updated to {price}")


class SMSObserver(Observer):
    def update(self, price: Any) -> None:
        print(f"SMS notification: Price updated to {price}")


class AppObserver(Observer):
    def update(self, price: Any) -> None:
        print(f"App notification: Price updated to {price}")


def run(config: Optional[AppConfig] = None) -> None:
    """Broadcast price changes, then detach one observer."""
    config = config or AppConfig()
    display = config.display

    print_section("Example 1: Without Observer Pattern", display)
    store = Store()
    store.set_price(100)

    print_section("Example 2: With Observer Pattern", display)
    store_with_observer = StoreWithObserver()

    email_observer = EmailObserver()
    sms_observer = SMSObserver()
    app_observer = AppObserver()

    store_with_observer.attach(email_observer)
    store_with_observer.attach(sms_observer)
    store_with_observer.attach(app_observer)

    store_with_observer.set_price(100)

    store_with_observer.detach(sms_observer)
    print("\nAfter detaching SMS observer:")
    store_with_observer.set_price(200)


def main() -> None:
    config = load_config()
    setup_logging(config.logging)
    run(config)


if __name__ == "__main__":
    main()
