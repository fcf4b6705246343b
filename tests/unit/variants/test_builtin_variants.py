"""Tests for the built-in bicycle and car variants."""

import pytest
from pydantic import ValidationError

from capability_dispatch.domain.base.exceptions import ConfigurationError
from capability_dispatch.infrastructure.registry.variant_registry import VariantRegistry, get_variant_registry
from capability_dispatch.variants import register_builtin_variants
from capability_dispatch.variants.bicycle import (
    BICYCLE_DISCRIMINATOR,
    Bicycle,
    BicycleAdapter,
    BicycleVariantConfig,
    create_bicycle_adapter,
    create_bicycle_config,
    register_bicycle_variant,
)
from capability_dispatch.variants.car import (
    CAR_DISCRIMINATOR,
    Car,
    CarAdapter,
    CarVariantConfig,
    EngineStartError,
    create_car_adapter,
    create_car_config,
    register_car_variant,
)


class TestBicycle:
    """Test the bicycle actor."""

    def test_pedal_and_speed(self):
        bicycle = Bicycle()
        bicycle.pedal()

        assert bicycle.pedal_strokes == 1
        assert bicycle.speed() == "rate:20"


class TestCar:
    """Test the car actor."""

    def test_requires_api_key(self):
        with pytest.raises(ValueError, match="API key"):
            Car(api_key="")

    def test_start_engine(self):
        car = Car(api_key="k1", top_speed=130)
        car.start_engine()

        assert car.engine_running
        assert car.speed() == "rate:130"

    def test_empty_tank(self):
        car = Car(api_key="k1", fuel_litres=0)

        with pytest.raises(EngineStartError):
            car.start_engine()
        assert not car.engine_running

    def test_repr_hides_key(self):
        assert "k1" not in repr(Car(api_key="k1"))


class TestVariantConfigs:
    """Test per-variant configuration models."""

    def test_bicycle_defaults(self):
        assert create_bicycle_config({}) == BicycleVariantConfig(top_speed=20)

    def test_bicycle_alias(self):
        assert create_bicycle_config({"topSpeed": 28}).top_speed == 28

    def test_bicycle_rejects_unknown_option(self):
        with pytest.raises(ValidationError):
            create_bicycle_config({"gears": 21})

    @pytest.mark.parametrize("data", [{"apiKey": "k1"}, {"api_key": "k1"}])
    def test_car_accepts_both_key_spellings(self, data):
        config = create_car_config(data)

        assert isinstance(config, CarVariantConfig)
        assert config.api_key.get_secret_value() == "k1"
        assert "k1" not in repr(config)

    @pytest.mark.parametrize("data", [{}, {"apiKey": "   "}, {"apiKey": "k1", "topSpeed": 0}])
    def test_car_invalid(self, data):
        with pytest.raises(ValidationError):
            create_car_config(data)

    def test_adapters_from_configs(self):
        bicycle = create_bicycle_adapter(create_bicycle_config({"topSpeed": 30}))
        car = create_car_adapter(create_car_config({"apiKey": "k1", "fuelLitres": 5}))

        assert isinstance(bicycle, BicycleAdapter)
        assert bicycle.report_rate() == "rate:30"
        assert isinstance(car, CarAdapter)
        assert car.adaptee.fuel_litres == 5


class TestRegistration:
    """Test variant registration helpers."""

    def test_register_builtin_variants(self):
        registry = VariantRegistry()
        register_builtin_variants(registry)

        assert registry.get_registered_variants() == [BICYCLE_DISCRIMINATOR, CAR_DISCRIMINATOR]

    def test_defaults_to_global_registry(self):
        register_bicycle_variant()

        assert get_variant_registry().is_variant_registered("bicycle")

    def test_custom_discriminators(self):
        registry = VariantRegistry()
        register_car_variant(registry, discriminator="variantA")
        register_bicycle_variant(registry, discriminator="variantB")

        assert registry.get_registered_variants() == ["variantA", "variantB"]

    def test_duplicate_needs_replace(self):
        registry = VariantRegistry()
        register_car_variant(registry)

        with pytest.raises(ConfigurationError):
            register_car_variant(registry)
        register_car_variant(registry, replace=True)
