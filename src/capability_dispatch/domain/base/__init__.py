"""Base domain building blocks."""

from .exceptions import (
    ConfigurationError,
    ContractViolationError,
    DelegationError,
    DomainException,
    UnknownVariantError,
)

__all__ = [
    "DomainException",
    "ConfigurationError",
    "UnknownVariantError",
    "DelegationError",
    "ContractViolationError",
]
