"""End-to-end scenario: two variants behind one discriminator-driven factory."""

import os
from unittest.mock import patch

import pytest

from capability_dispatch.bootstrap import create_application
from capability_dispatch.domain.base.exceptions import UnknownVariantError
from capability_dispatch.infrastructure.registry.variant_registry import VariantRegistry
from capability_dispatch.variants.bicycle import register_bicycle_variant
from capability_dispatch.variants.car import register_car_variant

CLEAN_ENV = {key: value for key, value in os.environ.items() if not key.startswith("CAPDISPATCH_")}


class TestScenario:
    """Run the generic client routine against variants selected at runtime."""

    def test_variant_a_car(self, scenario_factory, client):
        capability = scenario_factory.create("variantA", {"apiKey": "k1"})

        assert client.operate(capability).rate == "rate:100"
        assert capability.adaptee.engine_running

    def test_variant_b_bicycle(self, scenario_factory, client):
        capability = scenario_factory.create("variantB", {})

        assert client.operate(capability).rate == "rate:20"
        assert capability.adaptee.pedal_strokes == 1

    def test_unknown_discriminator(self, scenario_factory):
        with pytest.raises(UnknownVariantError) as exc_info:
            scenario_factory.create("unknown")

        assert exc_info.value.available == ["variantA", "variantB"]

    def test_report_rate_is_idempotent(self, scenario_factory):
        capability = scenario_factory.create("variantA", {"apiKey": "k1"})
        capability.primary_action()

        assert capability.report_rate() == capability.report_rate() == "rate:100"

    def test_same_routine_for_every_variant(self, scenario_factory, client):
        bundles = {"variantA": {"apiKey": "k1"}, "variantB": {}}

        reports = [
            client.operate(scenario_factory.create(key, bundle), label=key)
            for key, bundle in bundles.items()
        ]

        assert [(r.label, r.rate) for r in reports] == [
            ("variantA", "rate:100"),
            ("variantB", "rate:20"),
        ]


class TestApplicationWiring:
    """Test the bootstrap path from configuration to operated capability."""

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            '{"factory": {"cache_instances": true, "variants": {"variantA": {"apiKey": "$CAR_KEY"}}}}'
        )
        return str(path)

    def test_configured_application(self, config_file):
        registry = VariantRegistry()
        register_car_variant(registry, discriminator="variantA")
        register_bicycle_variant(registry, discriminator="variantB")

        with patch.dict(os.environ, {**CLEAN_ENV, "CAR_KEY": "env-key"}, clear=True):
            app = create_application(config_file, configure_logging=False, registry=registry)

        capability = app.factory.get_or_create("variantA")

        assert app.cache_instances is True
        assert app.factory.get_or_create("variantA") is capability
        assert app.client.operate(capability).rate == "rate:100"
        assert app.checker.check_registered(app.factory).consistent

    def test_default_application_registers_builtins(self):
        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            app = create_application(configure_logging=False)

        assert app.factory.available_variants() == ["bicycle", "car"]
        assert app.client.operate(app.factory.create("bicycle")).rate == "rate:20"
