"""Capability value objects."""

from .value_objects import (
    CapabilityReport,
    SubstitutabilityResult,
    VariantOutcome,
    normalize_discriminator,
)

__all__ = [
    "CapabilityReport",
    "SubstitutabilityResult",
    "VariantOutcome",
    "normalize_discriminator",
]
