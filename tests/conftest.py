import pytest
from unittest.mock import Mock

from capability_dispatch.application.client import CapabilityClient
from capability_dispatch.application.factory import VariantFactory
from capability_dispatch.infrastructure.registry.variant_registry import (
    VariantRegistry,
    reset_variant_registry,
)
from capability_dispatch.variants import register_builtin_variants
from capability_dispatch.variants.bicycle import register_bicycle_variant
from capability_dispatch.variants.car import register_car_variant


class Scooter:
    """Adaptee with its own operation names, not known to the package."""

    def __init__(self):
        self.kicks = 0

    def kick(self):
        self.kicks += 1

    def velocity(self):
        return "rate:15"


class StalledEngine:
    """Adaptee whose primary operation always fails."""

    def crank(self):
        raise RuntimeError("starter motor jammed")

    def speed(self):
        return "rate:0"


@pytest.fixture(autouse=True)
def clean_global_registry():
    """Each test starts from an empty global registry."""
    reset_variant_registry()
    yield
    reset_variant_registry()


@pytest.fixture
def registry():
    """Fresh registry with the built-in variants."""
    registry = VariantRegistry()
    register_builtin_variants(registry)
    return registry


@pytest.fixture
def factory(registry):
    return VariantFactory(registry, default_configs={"car": {"api_key": "default-key"}})


@pytest.fixture
def scenario_factory():
    """Factory with the built-in variants registered under variantA / variantB."""
    registry = VariantRegistry()
    register_car_variant(registry, discriminator="variantA")
    register_bicycle_variant(registry, discriminator="variantB")
    return VariantFactory(registry)


@pytest.fixture
def client():
    return CapabilityClient()


@pytest.fixture
def spy_adaptee():
    """Adaptee whose native operations are mocks."""
    adaptee = Mock(spec=["pedal", "speed"])
    adaptee.speed.return_value = "rate:42"
    return adaptee


@pytest.fixture
def scooter():
    return Scooter()


@pytest.fixture
def stalled_engine():
    return StalledEngine()
