"""Capability adapters."""

from .base_adapter import BaseCapabilityAdapter, MappedCapabilityAdapter

__all__ = ["BaseCapabilityAdapter", "MappedCapabilityAdapter"]
