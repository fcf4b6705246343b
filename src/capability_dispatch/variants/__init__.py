"""Built-in capability variants."""

from typing import TYPE_CHECKING, Optional

from capability_dispatch.variants.bicycle import register_bicycle_variant
from capability_dispatch.variants.car import register_car_variant

if TYPE_CHECKING:
    from capability_dispatch.infrastructure.registry.variant_registry import VariantRegistry


def register_builtin_variants(registry: Optional['VariantRegistry'] = None) -> None:
    """Register every built-in variant under its default discriminator."""
    register_bicycle_variant(registry)
    register_car_variant(registry)


__all__ = ["register_builtin_variants", "register_bicycle_variant", "register_car_variant"]
