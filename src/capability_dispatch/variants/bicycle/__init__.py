"""Bicycle variant."""

from capability_dispatch.variants.bicycle.adapter import BicycleAdapter
from capability_dispatch.variants.bicycle.bicycle import Bicycle
from capability_dispatch.variants.bicycle.configuration import BicycleVariantConfig
from capability_dispatch.variants.bicycle.registration import (
    BICYCLE_DISCRIMINATOR,
    create_bicycle_adapter,
    create_bicycle_config,
    register_bicycle_variant,
)

__all__ = [
    "Bicycle",
    "BicycleAdapter",
    "BicycleVariantConfig",
    "BICYCLE_DISCRIMINATOR",
    "create_bicycle_adapter",
    "create_bicycle_config",
    "register_bicycle_variant",
]
