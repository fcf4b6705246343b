"""Domain port for the capability set clients depend on."""

from abc import ABC, abstractmethod


class CapabilityPort(ABC):
    """
    Port interface for the target capability set.

    Clients hold references of this type only. Every variant returned by the
    factory conforms to it, so any one of them can be passed where another
    is expected.
    """

    @abstractmethod
    def primary_action(self) -> None:
        """Perform the variant's primary action."""

    @abstractmethod
    def report_rate(self) -> str:
        """
        Report the variant's current rate.

        Returns:
            Rate string as produced by the wrapped object (e.g. ``"rate:20"``)
        """
