"""Client routines that consume capabilities through the port only."""

from typing import Any, Iterable, List, Optional

from capability_dispatch.domain.base.contracts.capability_contract import verify_capability, verify_rate
from capability_dispatch.domain.base.ports.capability_port import CapabilityPort
from capability_dispatch.domain.capability.value_objects import CapabilityReport
from capability_dispatch.infrastructure.logging.logger import get_logger


class CapabilityClient:
    """
    Client of the capability set.

    Knows nothing about concrete variants: it never inspects their type and
    never builds them. Objects that only partly satisfy the contract are
    rejected with ``ContractViolationError`` on first use.
    """

    def __init__(self):
        self.logger = get_logger(__name__)

    def operate(self, capability: CapabilityPort, label: Optional[str] = None) -> CapabilityReport:
        """
        Run the primary action once and report the resulting rate.

        Args:
            capability: Object satisfying the capability set
            label: Optional tag copied into the report

        Returns:
            CapabilityReport with the reported rate

        Raises:
            ContractViolationError: If the object breaks the capability contract
            DelegationError: If the wrapped object's native operation fails
        """
        verify_capability(capability)
        capability.primary_action()
        rate = verify_rate(capability, capability.report_rate())
        self.logger.debug("Capability operated", label=label, rate=rate)
        return CapabilityReport(label=label, rate=rate)

    def operate_all(self, capabilities: Iterable[Any]) -> List[CapabilityReport]:
        """Operate each capability in order; errors propagate from the first failure."""
        return [self.operate(capability) for capability in capabilities]

    def current_rate(self, capability: CapabilityPort) -> str:
        """Query the rate without performing the primary action."""
        verify_capability(capability)
        return verify_rate(capability, capability.report_rate())
