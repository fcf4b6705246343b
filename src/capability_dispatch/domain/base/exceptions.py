# src/capability_dispatch/domain/base/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None, details: Any = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
        self.details = details


class UnknownVariantError(DomainException):
    """Raised when a discriminator has no registered variant."""
    def __init__(self, discriminator: Any, available: Optional[List[str]] = None):
        self.discriminator = discriminator
        self.available = sorted(available or [])
        super().__init__(
            f"Variant '{discriminator}' is not registered. "
            f"Available variants: {self.available}"
        )


class DelegationError(DomainException):
    """Raised when the wrapped adaptee's native operation fails."""
    def __init__(self, operation: str, native_operation: str, adaptee_type: str,
                 original_error: BaseException):
        super().__init__(
            f"{adaptee_type}.{native_operation}() failed during {operation}(): "
            f"{type(original_error).__name__}: {original_error}"
        )
        self.operation = operation
        self.native_operation = native_operation
        self.adaptee_type = adaptee_type
        self.original_error = original_error


class ContractViolationError(DomainException):
    """Raised when an object does not honour the capability contract."""
    def __init__(self, message: str, missing_operations: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_operations = missing_operations or []
