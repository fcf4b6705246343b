"""Substitutability checks across capability variants.

A variant that fails where its siblings succeed breaks the capability
contract. These checks run one generic routine against several variants and
compare how each run ended.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from capability_dispatch.application.client import CapabilityClient
from capability_dispatch.application.factory import VariantFactory
from capability_dispatch.domain.base.exceptions import ContractViolationError
from capability_dispatch.domain.base.ports.capability_port import CapabilityPort
from capability_dispatch.domain.capability.value_objects import SubstitutabilityResult, VariantOutcome
from capability_dispatch.infrastructure.logging.logger import get_logger

Routine = Callable[[CapabilityPort], Any]


class SubstitutabilityChecker:
    """
    Run a generic routine against named variants and compare the outcomes.

    Args:
        routine: Callable taking one capability; defaults to ``CapabilityClient.operate``
    """

    def __init__(self, routine: Optional[Routine] = None):
        self._routine = routine or CapabilityClient().operate
        self.logger = get_logger(__name__)

    def check(self, variants: Mapping[str, CapabilityPort]) -> SubstitutabilityResult:
        """
        Run the routine against every variant and record each outcome.

        Args:
            variants: Capabilities keyed by a name used in the result

        Returns:
            SubstitutabilityResult with one outcome per variant
        """
        outcomes: Dict[str, VariantOutcome] = {}
        for name, capability in variants.items():
            try:
                self._routine(capability)
            except Exception as e:
                outcomes[name] = VariantOutcome(
                    succeeded=False, error_type=type(e).__name__, error=str(e)
                )
                self.logger.warning(f"Variant '{name}' failed the routine", error=str(e))
            else:
                outcomes[name] = VariantOutcome(succeeded=True)

        result = SubstitutabilityResult(outcomes=outcomes)
        self.logger.info("Substitutability check finished", consistent=result.consistent)
        return result

    def assert_substitutable(self, variants: Mapping[str, CapabilityPort]) -> SubstitutabilityResult:
        """
        Check the variants and fail if their outcomes differ.

        Raises:
            ContractViolationError: If some variant ended differently from the others
        """
        result = self.check(variants)
        if not result.consistent:
            details = {
                name: outcome.error_type or "ok" for name, outcome in result.outcomes.items()
            }
            raise ContractViolationError(f"Variants are not substitutable: {details}")
        return result

    def check_registered(self,
                         factory: VariantFactory,
                         configs: Optional[Mapping[str, Mapping[str, Any]]] = None) -> SubstitutabilityResult:
        """
        Build every registered variant through ``factory`` and check them.

        Args:
            factory: Factory to build the variants with
            configs: Bundle per discriminator; missing ones use the factory defaults

        Raises:
            UnknownVariantError, ConfigurationError: If a variant cannot be built
        """
        configs = configs or {}
        variants = {
            key: factory.create(key, configs.get(key))
            for key in factory.available_variants()
        }
        return self.check(variants)
