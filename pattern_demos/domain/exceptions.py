# pattern_demos/domain/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all pattern demo errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnsupportedDemoError(DomainException):
    """Raised when a demo name is not registered."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.name = name
        self.available = available or []
        message = f"Demo '{name}' is not registered"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class UnsupportedAnimalError(DomainException):
    """Raised when the animal factory is asked for an unknown animal."""
    def __init__(self, animal_type: str):
        super().__init__("Animal type not supported")
        self.animal_type = animal_type


class UnsupportedPaymentTypeError(DomainException):
    """Raised when a payment type has no matching branch."""
    def __init__(self, payment_type: str):
        super().__init__("Unsupported payment type")
        self.payment_type = payment_type


class InsufficientCashError(DomainException):
    """Raised when a cash payment exceeds the cash on hand."""
    def __init__(self, requested: float, available: float):
        super().__init__("Insufficient cash amount")
        self.requested = requested
        self.available = available


class InvalidTransactionError(DomainException):
    """Raised when a transaction amount is not positive."""
    def __init__(self, amount: float):
        super().__init__(f"Invalid amount: {amount}")
        self.amount = amount


class DatabaseNotConnectedError(DomainException):
    """Raised when querying a database before connecting."""
    def __init__(self):
        super().__init__("Must connect to database first")


class CannotFlyError(DomainException):
    """Raised by birds that cannot honour Bird.fly()."""
    def __init__(self):
        super().__init__("I can't fly")
