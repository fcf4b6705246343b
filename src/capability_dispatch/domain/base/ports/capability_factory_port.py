"""Domain port for capability creation."""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from capability_dispatch.domain.base.ports.capability_port import CapabilityPort


class CapabilityFactoryPort(ABC):
    """Creation contract: turn a discriminator into a capability."""

    @abstractmethod
    def create(self, discriminator: Any, config: Optional[Mapping[str, Any]] = None) -> CapabilityPort:
        """
        Create the variant selected by ``discriminator``.

        Args:
            discriminator: Key of a registered variant
            config: Configuration bundle for that variant

        Returns:
            Object satisfying the capability set

        Raises:
            UnknownVariantError: If no variant is registered for the key
        """

    @abstractmethod
    def available_variants(self) -> List[str]:
        """Get the discriminators this factory can build."""
