"""Capability contract checks."""

from .capability_contract import (
    REQUIRED_OPERATIONS,
    conforms_to_capability,
    missing_operations,
    verify_capability,
    verify_rate,
)

__all__ = [
    "REQUIRED_OPERATIONS",
    "conforms_to_capability",
    "missing_operations",
    "verify_capability",
    "verify_rate",
]
