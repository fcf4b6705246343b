"""Application layer: factory, client and contract checks."""

from .client import CapabilityClient
from .factory import VariantFactory
from .substitutability import SubstitutabilityChecker

__all__ = ["CapabilityClient", "VariantFactory", "SubstitutabilityChecker"]
