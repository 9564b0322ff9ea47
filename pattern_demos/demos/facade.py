"""
Facade Pattern: Structural Design Pattern

A facade offers one simple entry point to a set of subsystems. Here
ShopFacade coordinates discount, fees and shipping so that checkout code
only has to call buy().
"""

from typing import Optional

from pattern_demos.config import AppConfig, load_config
from pattern_demos.demos.narration import print_section
from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


class Discount:
    def calculate(self, price: float) -> float:
        return price * 0.9


class Shipping:
    def calculate(self, price: float) -> float:
        return price * 0.1


class Fees:
    def calculate(self, price: float) -> float:
        return price * 1.05


class ShopFacade:
    """Single entry point to the pricing subsystems."""

    def __init__(self):
        self.discount = Discount()
        self.shipping = Shipping()
        self.fees = Fees()

    def calculate(self, price: float) -> float:
        price = self.discount.calculate(price)
        print(f"Discount: {price}")
        price = self.fees.calculate(price)
        print(f"Fees: {price}")
        # shipping is charged on the fee-inclusive price
        price += self.shipping.calculate(price)
        print(f"Shipping: {price}")
        return price


def buy(price: float) -> float:
    """Client code: price an order through the facade."""
    shop = ShopFacade()
    total = shop.calculate(price)
    print(f"Total: {total}")
    return total


# Without Facade Pattern
def calculate_price(price: float) -> float:
    """Client code that has to know every pricing step itself."""
    discounted_price = price * 0.9
    print(f"Discount: {discounted_price}")

    with_fees = discounted_price * 1.05
    print(f"Fees: {with_fees}")

    shipping = with_fees * 0.1
    total = with_fees + shipping
    print(f"Shipping: {total}")

    print(f"Total: {total}")
    return total


def run(config: Optional[AppConfig] = None) -> None:
    """Price the same order by hand and through the facade."""
    config = config or AppConfig()
    display = config.display

    print_section("Example 1: Without Facade Pattern", display)
    calculate_price(150000)

    print_section("Example 2: With Facade Pattern", display)
    total = buy(150000)
    logger.debug("Order priced", total=total)


def main() -> None:
    config = load_config()
    setup_logging(config.logging)
    run(config)


if __name__ == "__main__":
    main()
