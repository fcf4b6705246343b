"""Car Variant Registration - Register the car variant with the variant registry."""

from typing import TYPE_CHECKING, Any, Mapping, Optional

from capability_dispatch.infrastructure.logging.logger import get_logger

if TYPE_CHECKING:
    from capability_dispatch.infrastructure.registry.variant_registry import VariantRegistry

CAR_DISCRIMINATOR = "car"


def create_car_config(data: Mapping[str, Any]) -> Any:
    """
    Create car configuration from data dictionary.

    Args:
        data: Configuration bundle, must carry ``api_key`` (or ``apiKey``)

    Returns:
        Validated CarVariantConfig instance
    """
    from capability_dispatch.variants.car.configuration import CarVariantConfig
    return CarVariantConfig.model_validate(dict(data))


def create_car_adapter(config: Any) -> Any:
    """
    Create the car adapter from a validated configuration.

    Args:
        config: CarVariantConfig instance

    Returns:
        CarAdapter wrapping a new Car
    """
    from capability_dispatch.variants.car.adapter import CarAdapter
    from capability_dispatch.variants.car.car import Car
    car = Car(
        api_key=config.api_key.get_secret_value(),
        top_speed=config.top_speed,
        fuel_litres=config.fuel_litres,
    )
    return CarAdapter(car)


def register_car_variant(registry: Optional['VariantRegistry'] = None,
                         discriminator: str = CAR_DISCRIMINATOR,
                         replace: bool = False) -> None:
    """Register the car variant with the variant registry.

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
        adapter_factory=create_car_adapter,
        config_factory=create_car_config,
        description="Car: start_engine() / speed(), requires api_key",
        replace=replace,
    )
    get_logger(__name__).debug(f"Car variant registered as '{discriminator}'")
