"""Registry for capability variants."""

from .variant_registry import (
    VariantRegistration,
    VariantRegistry,
    get_variant_registry,
    model_config_factory,
    passthrough_config,
    reset_variant_registry,
)

__all__ = [
    "VariantRegistration",
    "VariantRegistry",
    "get_variant_registry",
    "reset_variant_registry",
    "model_config_factory",
    "passthrough_config",
]
