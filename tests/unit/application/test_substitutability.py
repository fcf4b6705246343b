"""Tests for substitutability checks across variants."""

import pytest
from unittest.mock import Mock

from capability_dispatch.application.substitutability import SubstitutabilityChecker
from capability_dispatch.domain.base.exceptions import ConfigurationError, ContractViolationError
from capability_dispatch.variants.bicycle import BicycleAdapter
from capability_dispatch.variants.car import Car, CarAdapter


class TestSubstitutabilityChecker:
    """Test the checker against conforming and non-conforming variants."""

    def setup_method(self):
        self.checker = SubstitutabilityChecker()

    def test_conforming_variants_are_substitutable(self):
        result = self.checker.assert_substitutable({
            "bicycle": BicycleAdapter(),
            "car": CarAdapter(Car(api_key="k1")),
        })

        assert result.consistent
        assert all(o.succeeded for o in result.outcomes.values())

    def test_variant_failing_where_siblings_succeed(self):
        variants = {
            "bicycle": BicycleAdapter(),
            "empty-car": CarAdapter(Car(api_key="k1", fuel_litres=0)),
        }

        result = self.checker.check(variants)

        assert not result.consistent
        assert result.outcomes["empty-car"].error_type == "DelegationError"
        assert "fuel tank is empty" in result.outcomes["empty-car"].error

    def test_assert_substitutable_raises(self):
        variants = {
            "bicycle": BicycleAdapter(),
            "empty-car": CarAdapter(Car(api_key="k1", fuel_litres=0)),
        }

        with pytest.raises(ContractViolationError, match="not substitutable"):
            self.checker.assert_substitutable(variants)

    def test_custom_routine(self):
        routine = Mock()
        checker = SubstitutabilityChecker(routine)
        bicycle = BicycleAdapter()

        result = checker.check({"bicycle": bicycle})

        routine.assert_called_once_with(bicycle)
        assert result.consistent

    def test_check_registered(self, factory):
        result = self.checker.check_registered(factory)

        assert set(result.outcomes) == {"bicycle", "car"}
        assert result.consistent

    def test_check_registered_with_explicit_configs(self, factory):
        result = self.checker.check_registered(
            factory, {"car": {"api_key": "k1", "fuel_litres": 0}}
        )

        assert not result.consistent
        assert list(result.failed_variants) == ["car"]

    def test_check_registered_propagates_build_errors(self, factory):
        with pytest.raises(ConfigurationError):
            self.checker.check_registered(factory, {"car": {}})
