"""Base adapter translating the capability set to an adaptee's native operations."""

from typing import Any, ClassVar, Optional

from capability_dispatch.domain.base.exceptions import ContractViolationError, DelegationError
from capability_dispatch.domain.base.ports.capability_port import CapabilityPort
from capability_dispatch.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class BaseCapabilityAdapter(CapabilityPort):
    """
    Adapter holding exactly one adaptee and forwarding calls to it.

    Subclasses declare which native operation backs each capability
    operation through ``primary_native`` and ``rate_native``. The adaptee is
    held by reference, so any object with those native operations can be
    wrapped without changing the adapter.
    """

    primary_native: ClassVar[Optional[str]] = None
    rate_native: ClassVar[Optional[str]] = None

    def __init__(self, adaptee: Any):
        self._adaptee = adaptee

    @property
    def adaptee(self) -> Any:
        return self._adaptee

    def primary_action(self) -> None:
        self._delegate("primary_action", self._native_name("primary_native"))

    def report_rate(self) -> str:
        return self._delegate("report_rate", self._native_name("rate_native"))

    def _native_name(self, attribute: str) -> str:
        native = getattr(self, attribute)
        if not native:
            raise ContractViolationError(
                f"{type(self).__name__} does not declare '{attribute}'"
            )
        return native

    def _delegate(self, operation: str, native_operation: str) -> Any:
        """Call ``native_operation`` on the adaptee once and return its result."""
        adaptee_type = type(self._adaptee).__name__
        native = getattr(self._adaptee, native_operation, None)
        if not callable(native):
            raise ContractViolationError(
                f"{adaptee_type} has no native operation '{native_operation}'",
                missing_operations=[native_operation],
            )
        try:
            return native()
        except Exception as e:
            logger.error(
                f"Delegation failed: {adaptee_type}.{native_operation}() during {operation}()",
                error=str(e),
            )
            raise DelegationError(operation, native_operation, adaptee_type, e) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(adaptee={self._adaptee!r})"


class MappedCapabilityAdapter(BaseCapabilityAdapter):
    """
    Adapter whose native operation names are given at construction.

    Lets a new variant reuse an existing type without writing an adapter
    class::

        MappedCapabilityAdapter(scooter, primary_action="kick", report_rate="speed")
    """

    def __init__(self, adaptee: Any, primary_action: str, report_rate: str):
        missing = [
            name for name in (primary_action, report_rate)
            if not callable(getattr(adaptee, name, None))
        ]
        if missing:
            raise ContractViolationError(
                f"{type(adaptee).__name__} has no native operation(s) {missing}",
                missing_operations=missing,
            )
        super().__init__(adaptee)
        self._primary_native = primary_action
        self._rate_native = report_rate

    def _native_name(self, attribute: str) -> str:
        if attribute == "primary_native":
            return self._primary_native
        return self._rate_native
