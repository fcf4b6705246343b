# src/capability_dispatch/domain/capability/value_objects.py
from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


def normalize_discriminator(value: Any) -> str:
    """
    Normalize a discriminator to its string key.

    Keys are opaque and matched exactly; enum members are reduced to their
    value so ``Variant.CAR`` and ``"car"`` select the same registration.

    Raises:
        ValueError: If the key is not a non-empty string
    """
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, str) or not value:
        raise ValueError(f"Discriminator must be a non-empty string, got {value!r}")
    return value


class CapabilityReport(BaseModel):
    """Result of running the client routine once against a capability."""
    model_config = ConfigDict(frozen=True)

    label: Optional[str] = Field(None, description="Caller-supplied tag for the capability")
    rate: str = Field(..., description="Value returned by report_rate()")


class VariantOutcome(BaseModel):
    """Outcome of a generic routine run against one variant."""
    model_config = ConfigDict(frozen=True)

    succeeded: bool
    error_type: Optional[str] = None
    error: Optional[str] = None


class SubstitutabilityResult(BaseModel):
    """Outcomes per variant of a substitutability check."""
    model_config = ConfigDict(frozen=True)

    outcomes: Dict[str, VariantOutcome] = Field(default_factory=dict)

    @property
    def consistent(self) -> bool:
        """True when every variant ended the same way (same success and error type)."""
        signatures = {(o.succeeded, o.error_type) for o in self.outcomes.values()}
        return len(signatures) <= 1

    @property
    def failed_variants(self) -> Dict[str, VariantOutcome]:
        return {name: o for name, o in self.outcomes.items() if not o.succeeded}
