"""
Strategy Pattern: Behavioral Design Pattern

A family of interchangeable algorithms is encapsulated behind one interface
so the algorithm can be picked, and swapped, at runtime.

Key components:
- Context: ShoppingCart, holds a strategy and delegates payment to it
- Strategy: PaymentStrategy, the common interface
- Concrete strategies: CreditCardStrategy, PayPalStrategy, CashStrategy
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pattern_demos.config import AppConfig, load_config
from pattern_demos.demos.narration import print_rule, print_section
from pattern_demos.domain.exceptions import InsufficientCashError, UnsupportedPaymentTypeError
from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


# Without Strategy Pattern
def process_payment(payment_type: str, amount: float, details: Dict[str, Any]) -> None:
    """Pay through a conditional that has to know every payment method."""
    if payment_type == "credit_card":
        print(f"Paid {amount} using Credit Card: {details['card_number']}")
    elif payment_type == "paypal":
        print(f"Paid {amount} using PayPal account: {details['email']}")
    else:
        raise UnsupportedPaymentTypeError(payment_type)


class PaymentStrategy(ABC):
    """Strategy interface."""

    @abstractmethod
    def pay(self, amount: float) -> None:
        pass


class CreditCardStrategy(PaymentStrategy):
    def __init__(self, card_number: str, cvv: str, date_of_expiry: str):
        self.card_number = card_number
        self.cvv = cvv
        self.date_of_expiry = date_of_expiry

    def pay(self, amount: float) -> None:
        print(f"Paid {amount} using Credit Card: {self.card_number}")


class PayPalStrategy(PaymentStrategy):
    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    def pay(self, amount: float) -> None:
        print(f"Paid {amount} using PayPal: {self.email}")


class CashStrategy(PaymentStrategy):
    def __init__(self, cash_amount: float):
        self.cash_amount = cash_amount

    def pay(self, amount: float) -> None:
        """
        Pay from the cash on hand.

        Raises:
            InsufficientCashError: If ``amount`` exceeds the remaining cash
        """
        if amount > self.cash_amount:
            raise InsufficientCashError(amount, self.cash_amount)
        self.cash_amount -= amount
        print(f"Paid {amount} using Cash. Cash amount remaining: {self.cash_amount}")


class ShoppingCart:
    """Context that delegates checkout to its payment strategy."""

    def __init__(self, payment_strategy: PaymentStrategy):
        self.payment_strategy = payment_strategy
        self.amount: float = 0

    def set_payment_strategy(self, payment_strategy: PaymentStrategy) -> None:
        logger.debug("Payment strategy changed", strategy=type(payment_strategy).__name__)
        self.payment_strategy = payment_strategy

    def set_amount(self, amount: float) -> None:
        self.amount = amount

    def checkout(self) -> None:
        self.payment_strategy.pay(self.amount)


def run(config: Optional[AppConfig] = None) -> None:
    """Pay with a conditional function, then with swappable strategies."""
    config = config or AppConfig()
    display = config.display

    print_section("Example 1: Without Strategy Pattern", display)
    process_payment(
        "credit_card",
        100,
        {"card_number": "1234-5678", "cvv": "123", "expiry_date": "12/25"},
    )
    process_payment("paypal", 200, {"email": "example@email.com", "password": "password"})

    print_rule(display, width=display.section_width)
    print("Example 2: With Strategy Pattern")

    credit_card_strategy = CreditCardStrategy("1234-5678", "123", "12/25")
    paypal_strategy = PayPalStrategy("example@email.com", "password")
    cash_strategy = CashStrategy(500)

    cart = ShoppingCart(credit_card_strategy)
    cart.set_amount(100)
    cart.checkout()

    for strategy, amount in (
        (paypal_strategy, 200),
        (cash_strategy, 300),
        (credit_card_strategy, 400),
    ):
        cart.set_payment_strategy(strategy)
        cart.set_amount(amount)
        cart.checkout()


def main() -> None:
    config = load_config()
    setup_logging(config.logging)
    run(config)


if __name__ == "__main__":
    main()
