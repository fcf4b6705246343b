"""Domain ports for the capability set and its creation."""

from .capability_factory_port import CapabilityFactoryPort
from .capability_port import CapabilityPort

__all__ = ["CapabilityPort", "CapabilityFactoryPort"]
