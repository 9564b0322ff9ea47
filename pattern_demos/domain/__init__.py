"""Domain layer - exceptions and demo metadata."""

from pattern_demos.domain.demo import DemoInfo, PatternCategory
from pattern_demos.domain.exceptions import (
    CannotFlyError,
    ConfigurationError,
    DatabaseNotConnectedError,
    DomainException,
    InsufficientCashError,
    InvalidTransactionError,
    UnsupportedAnimalError,
    UnsupportedDemoError,
    UnsupportedPaymentTypeError,
)

__all__ = [
    "DemoInfo",
    "PatternCategory",
    "DomainException",
    "ConfigurationError",
    "UnsupportedDemoError",
    "UnsupportedAnimalError",
    "UnsupportedPaymentTypeError",
    "InsufficientCashError",
    "InvalidTransactionError",
    "DatabaseNotConnectedError",
    "CannotFlyError",
]
