"""
SOLID Principles: five object-oriented design principles

1. Single Responsibility Principle (SRP):
   A class should have only one reason to change.
2. Open/Closed Principle (OCP):
   Classes should be open for extension but closed for modification.
3. Liskov Substitution Principle (LSP):
   Subclasses must be usable wherever their parent class is expected.
4. Interface Segregation Principle (ISP):
   Clients shouldn't depend on methods they don't use.
5. Dependency Inversion Principle (DIP):
   High-level modules depend on abstractions, not on low-level modules.

Each principle is shown twice: a class that violates it, then a version that
follows it.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

from pattern_demos.config import AppConfig, load_config
from pattern_demos.demos.narration import print_divider
from pattern_demos.domain.exceptions import CannotFlyError
from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


# 1. Single Responsibility Principle

class UserWithoutSRP:
    """Persistence, email and reporting all live in one class."""

    def __init__(self, name: str):
        self.name = name

    def save_user(self) -> None:
        print(f"Saving user {self.name} to DB")

    def send_email(self) -> None:
        print(f"Sending welcome email to {self.name}")

    def generate_report(self) -> None:
        print(f"Generating report for {self.name}")


class User:
    def __init__(self, name: str):
        self.name = name


class UserDB:
    def save_user(self, user: User) -> None:
        print(f"Saving user {user.name} to DB")


class EmailService:
    def send_email(self, user: User) -> None:
        print(f"Sending welcome email to {user.name}")


class ReportGenerator:
    def generate_report(self, user: User) -> None:
        print(f"Generating report for {user.name}")


# 2. Open/Closed Principle

class DiscountWithoutOCP:
    """Every new customer type means another branch here."""

    def calculate_discount(self, order: Dict[str, Any]) -> Optional[float]:
        if order["type"] == "regular":
            return order["price"] * 0.1
        elif order["type"] == "premium":
            return order["price"] * 0.2
        return None


class Order:
    def __init__(self, price: float):
        self.price = price
        self.date = datetime.now()


class Discount(ABC):
    def calculate_discount(self, order: Order) -> float:
        return order.price * self.get_discount_rate()

    @abstractmethod
    def get_discount_rate(self) -> float:
        pass


class RegularDiscount(Discount):
    def get_discount_rate(self) -> float:
        return 0.1


class PremiumDiscount(Discount):
    def get_discount_rate(self) -> float:
        return 0.2


# 3. Liskov Substitution Principle

class Bird:
    def fly(self) -> None:
        print("I can fly")


class Penguin(Bird):
    """Cannot stand in for Bird: fly() breaks the parent's contract."""

    def fly(self) -> None:
        raise CannotFlyError()


class Animal:
    def move(self) -> None:
        print("I can move")


class FlyingBird(Animal):
    def fly(self) -> None:
        print("I can fly")


class WalkingBird(Animal):
    def walk(self) -> None:
        print("I can walk")


# 4. Interface Segregation Principle

class WorkerWithoutISP:
    def work(self) -> None:
        print("Working")

    def eat(self) -> None:
        print("Eating")

    def sleep(self) -> None:
        print("Sleeping")


class Workable:
    def work(self) -> None:
        print("Working")


class Eatable:
    def eat(self) -> None:
        print("Eating")


class Sleepable:
    def sleep(self) -> None:
        print("Sleeping")


class Worker(Workable):
    """Implements only what it needs."""


# 5. Dependency Inversion Principle

class LightBulbWithoutDIP:
    def turn_on(self) -> None:
        print("Light bulb turned on")

    def turn_off(self) -> None:
        print("Light bulb turned off")


class SwitchWithoutDIP:
    def __init__(self):
        # hard-wired to one concrete device
        self.bulb = LightBulbWithoutDIP()

    def operate(self) -> None:
        self.bulb.turn_on()


class Device(ABC):
    @abstractmethod
    def turn_on(self) -> None:
        pass

    @abstractmethod
    def turn_off(self) -> None:
        pass


class LightBulb(Device):
    def turn_on(self) -> None:
        print("Light bulb turned on")

    def turn_off(self) -> None:
        print("Light bulb turned off")


class Switch:
    def __init__(self, device: Device):
        self.device = device

    def operate(self) -> None:
        self.device.turn_on()


def _heading(title: str) -> None:
    print(f"--- {title} ---")


def _demo_srp() -> None:
    _heading("Violating SRP")
    user_without_srp = UserWithoutSRP("John")
    user_without_srp.save_user()
    user_without_srp.send_email()
    user_without_srp.generate_report()

    _heading("Following SRP")
    user = User("John")
    UserDB().save_user(user)
    EmailService().send_email(user)
    ReportGenerator().generate_report(user)


def _demo_ocp() -> None:
    _heading("Violating OCP")
    discount_without_ocp = DiscountWithoutOCP()
    print("Regular discount:", discount_without_ocp.calculate_discount({"type": "regular", "price": 100}))
    print("Premium discount:", discount_without_ocp.calculate_discount({"type": "premium", "price": 200}))

    _heading("Following OCP")
    order = Order(100)
    print("Regular discount:", RegularDiscount().calculate_discount(order))
    print("Premium discount:", PremiumDiscount().calculate_discount(order))


def _demo_lsp() -> None:
    _heading("Violating LSP")
    for bird in (Bird(), Penguin()):
        try:
            bird.fly()
        except CannotFlyError as e:
            logger.warning("Subclass broke the parent contract", subclass=type(bird).__name__)
            print(f"{type(bird).__name__}: {e}")

    _heading("Following LSP")
    flying_bird = FlyingBird()
    walking_bird = WalkingBird()
    flying_bird.move()
    flying_bird.fly()
    walking_bird.move()
    walking_bird.walk()


def _demo_isp() -> None:
    _heading("Violating ISP")
    worker_without_isp = WorkerWithoutISP()
    worker_without_isp.work()
    worker_without_isp.eat()
    worker_without_isp.sleep()

    _heading("Following ISP")
    Worker().work()


def _demo_dip() -> None:
    _heading("Violating DIP")
    SwitchWithoutDIP().operate()

    _heading("Following DIP")
    Switch(LightBulb()).operate()


def run(config: Optional[AppConfig] = None) -> None:
    """Walk through all five principles."""
    config = config or AppConfig()
    display = config.display

    sections = (_demo_srp, _demo_ocp, _demo_lsp, _demo_isp, _demo_dip)
    for index, section in enumerate(sections):
        if index:
            print_divider(display)
        section()


def main() -> None:
    config = load_config()
    setup_logging(config.logging)
    run(config)


if __name__ == "__main__":
    main()
