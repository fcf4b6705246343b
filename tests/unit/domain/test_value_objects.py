"""Tests for capability value objects and exceptions."""

from enum import Enum

import pytest
from pydantic import ValidationError

from capability_dispatch.domain.base.exceptions import DelegationError, UnknownVariantError
from capability_dispatch.domain.capability.value_objects import (
    CapabilityReport,
    SubstitutabilityResult,
    VariantOutcome,
    normalize_discriminator,
)


class Variant(str, Enum):
    CAR = "car"


class PlainVariant(Enum):
    BICYCLE = "bicycle"


class TestNormalizeDiscriminator:
    """Test discriminator normalization."""

    def test_string_is_returned_unchanged(self):
        assert normalize_discriminator("Car") == "Car"

    def test_enum_members_use_their_value(self):
        assert normalize_discriminator(Variant.CAR) == "car"
        assert normalize_discriminator(PlainVariant.BICYCLE) == "bicycle"

    @pytest.mark.parametrize("value", ["", None, 3, ("car",)])
    def test_invalid_values_are_rejected(self, value):
        with pytest.raises(ValueError, match="non-empty string"):
            normalize_discriminator(value)


class TestReports:
    """Test report models."""

    def test_capability_report_is_frozen(self):
        report = CapabilityReport(label="car", rate="rate:100")
        with pytest.raises(ValidationError):
            report.rate = "rate:1"

    def test_consistent_when_all_succeed(self):
        result = SubstitutabilityResult(outcomes={
            "a": VariantOutcome(succeeded=True),
            "b": VariantOutcome(succeeded=True),
        })
        assert result.consistent
        assert result.failed_variants == {}

    def test_inconsistent_when_one_fails(self):
        result = SubstitutabilityResult(outcomes={
            "a": VariantOutcome(succeeded=True),
            "b": VariantOutcome(succeeded=False, error_type="DelegationError", error="boom"),
        })
        assert not result.consistent
        assert list(result.failed_variants) == ["b"]

    def test_empty_result_is_consistent(self):
        assert SubstitutabilityResult().consistent


class TestExceptions:
    """Test exception payloads."""

    def test_unknown_variant_error_lists_available(self):
        error = UnknownVariantError("boat", ["car", "bicycle"])
        assert error.discriminator == "boat"
        assert error.available == ["bicycle", "car"]
        assert "boat" in str(error)

    def test_delegation_error_keeps_original(self):
        original = RuntimeError("jammed")
        error = DelegationError("primary_action", "crank", "Engine", original)
        assert error.original_error is original
        assert str(error) == "Engine.crank() failed during primary_action(): RuntimeError: jammed"
