"""Car variant."""

from capability_dispatch.variants.car.adapter import CarAdapter
from capability_dispatch.variants.car.car import Car, EngineStartError
from capability_dispatch.variants.car.configuration import CarVariantConfig
from capability_dispatch.variants.car.registration import (
    CAR_DISCRIMINATOR,
    create_car_adapter,
    create_car_config,
    register_car_variant,
)

__all__ = [
    "Car",
    "CarAdapter",
    "CarVariantConfig",
    "EngineStartError",
    "CAR_DISCRIMINATOR",
    "create_car_adapter",
    "create_car_config",
    "register_car_variant",
]
