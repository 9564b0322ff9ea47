"""
Proxy Pattern: Structural Design Pattern

A proxy stands in for another object and controls access to it. Here the
proxy validates amounts, enforces a per-transaction withdrawal limit and
logs deposits before delegating to the real bank account.

Key components:
- Subject: BankAccountInterface, shared by the real account and the proxy
- Real subject: RealBankAccount
- Proxy: BankAccountProxy
"""

from abc import ABC, abstractmethod
from typing import Optional

from pattern_demos.config import AppConfig, load_config
from pattern_demos.demos.narration import print_section
from pattern_demos.domain.exceptions import InvalidTransactionError
from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)

DEFAULT_WITHDRAWAL_LIMIT = 1000


# Without Proxy Pattern
class BankAccount:
    def __init__(self, balance: float):
        self.balance = balance

    def deposit(self, amount: float) -> None:
        self.balance += amount
        print(f"Deposited {amount}. New balance: {self.balance}")

    def withdraw(self, amount: float) -> None:
        if amount <= self.balance:
            self.balance -= amount
            print(f"Withdrawn {amount}. New balance: {self.balance}")
        else:
            print("Insufficient funds!")


class BankAccountInterface(ABC):
    """Subject interface."""

    @abstractmethod
    def deposit(self, amount: float):
        pass

    @abstractmethod
    def withdraw(self, amount: float) -> bool:
        pass


class RealBankAccount(BankAccountInterface):
    def __init__(self, balance: float):
        self.balance = balance

    def deposit(self, amount: float) -> None:
        if amount <= 0:
            raise InvalidTransactionError(amount)
        self.balance += amount
        print(f"Deposited {amount}. New balance: {self.balance}")

    def withdraw(self, amount: float) -> bool:
        """Withdraw ``amount``; returns False and leaves the balance alone if it is too large."""
        if amount <= 0:
            raise InvalidTransactionError(amount)
        if amount <= self.balance:
            self.balance -= amount
            print(f"Withdrawn {amount}. New balance: {self.balance}")
            return True
        return False


class BankAccountProxy(BankAccountInterface):
    """Protection proxy in front of a RealBankAccount."""

    def __init__(
        self, real_account: RealBankAccount, withdrawal_limit: int = DEFAULT_WITHDRAWAL_LIMIT
    ):
        self._real_account = real_account
        self.withdrawal_limit = withdrawal_limit

    def deposit(self, amount: float) -> bool:
        if not self.validate_transaction(amount):
            return False
        print("Proxy: Logging deposit transaction")
        logger.info("Deposit accepted", amount=amount)
        self._real_account.deposit(amount)
        return True

    def withdraw(self, amount: float) -> bool:
        if not self.validate_transaction(amount):
            return False

        print("Proxy: Checking withdrawal limit")
        if amount > self.withdrawal_limit:
            print(f"Proxy: Cannot withdraw more than {self.withdrawal_limit} at once")
            return False

        if not self._real_account.withdraw(amount):
            print("Proxy: Insufficient funds!")
            return False
        return True

    def validate_transaction(self, amount: float) -> bool:
        if amount <= 0:
            logger.warning("Rejected transaction", amount=amount)
            print("Proxy: Invalid amount")
            return False
        return True


def run(config: Optional[AppConfig] = None) -> None:
    """Use an account directly, then through a protecting proxy."""
    config = config or AppConfig()
    display = config.display

    print_section("Example 1: Without Proxy Pattern", display)
    account = BankAccount(100)
    account.deposit(50)
    account.withdraw(70)
    account.withdraw(100)

    print_section("Example 2: With Proxy Pattern", display)
    real_account = RealBankAccount(100)
    proxy_account = BankAccountProxy(real_account, config.proxy.withdrawal_limit)

    proxy_account.deposit(50)
    proxy_account.deposit(-50)
    proxy_account.withdraw(70)
    proxy_account.withdraw(1500)
    proxy_account.withdraw(100)


def main() -> None:
    config = load_config()
    setup_logging(config.logging)
    run(config)


if __name__ == "__main__":
    main()
