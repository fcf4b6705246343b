"""Variant factory configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class FactoryConfig(BaseModel):
    """Configuration for the variant factory."""

    cache_instances: bool = Field(
        False, description="Share one instance per discriminator and config bundle"
    )
    variants: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict,
        description="Default configuration bundle per discriminator",
    )

    @field_validator("variants")
    @classmethod
    def validate_variant_keys(cls, v: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
        """Validate discriminator keys."""
        for key in v:
            if not key or not key.strip():
                raise ValueError("Variant discriminator cannot be empty")
        return v

    def get_variant_defaults(self, discriminator: str) -> Dict[str, Any]:
        """Get a copy of the default bundle for a discriminator (empty if none)."""
        return dict(self.variants.get(discriminator, {}))
