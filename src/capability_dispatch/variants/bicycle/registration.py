"""Bicycle Variant Registration - Register the bicycle variant with the variant registry."""

from typing import TYPE_CHECKING, Any, Mapping, Optional

from capability_dispatch.infrastructure.logging.logger import get_logger

if TYPE_CHECKING:
    from capability_dispatch.infrastructure.registry.variant_registry import VariantRegistry

BICYCLE_DISCRIMINATOR = "bicycle"


def create_bicycle_config(data: Mapping[str, Any]) -> Any:
    """
    Create bicycle configuration from data dictionary.

    Args:
        data: Configuration bundle

    Returns:
        Validated BicycleVariantConfig instance
    """
    from capability_dispatch.variants.bicycle.configuration import BicycleVariantConfig
    return BicycleVariantConfig.model_validate(dict(data))


def create_bicycle_adapter(config: Any) -> Any:
    """
    Create the bicycle adapter from a validated configuration.

    Args:
        config: BicycleVariantConfig instance

    Returns:
        BicycleAdapter wrapping a new Bicycle
    """
    from capability_dispatch.variants.bicycle.adapter import BicycleAdapter
    from capability_dispatch.variants.bicycle.bicycle import Bicycle
    return BicycleAdapter(Bicycle(top_speed=config.top_speed))


def register_bicycle_variant(registry: Optional['VariantRegistry'] = None,
                             discriminator: str = BICYCLE_DISCRIMINATOR,
                             replace: bool = False) -> None:
    """Register the bicycle variant with the variant registry.

    Args:
        registry: Variant registry instance (optional, defaults to the global one)
        discriminator: Key to register the variant under
        replace: Replace an existing registration for the key
    """
    if registry is None:
        from capability_dispatch.infrastructure.registry.variant_registry import get_variant_registry
        registry = get_variant_registry()

    registry.register_variant(
        discriminator=discriminator,
        adapter_factory=create_bicycle_adapter,
        config_factory=create_bicycle_config,
        description="Bicycle: pedal() / speed(), no configuration required",
        replace=replace,
    )
    get_logger(__name__).debug(f"Bicycle variant registered as '{discriminator}'")
