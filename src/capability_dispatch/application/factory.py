"""Variant factory: the single place where discriminators become capabilities."""

import json
import threading
from typing import Any, Dict, List, Mapping, Optional, Tuple

from capability_dispatch.domain.base.contracts.capability_contract import verify_capability
from capability_dispatch.domain.base.ports.capability_factory_port import CapabilityFactoryPort
from capability_dispatch.domain.base.ports.capability_port import CapabilityPort
from capability_dispatch.domain.capability.value_objects import normalize_discriminator
from capability_dispatch.infrastructure.logging.logger import get_logger
from capability_dispatch.infrastructure.registry.variant_registry import VariantRegistration, VariantRegistry

CacheKey = Tuple[str, str]
CacheEntry = Tuple[VariantRegistration, CapabilityPort]


class VariantFactory(CapabilityFactoryPort):
    """
    Factory building capability variants from a discriminator and a config bundle.

    Call sites ask for a discriminator and get back a ``CapabilityPort``;
    the choice of concrete adaptee and adapter lives in the registry.

    Args:
        registry: Registry holding the variant registrations
        default_configs: Bundle used per discriminator when ``create`` gets no config
    """

    def __init__(self,
                 registry: VariantRegistry,
                 default_configs: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self._registry = registry
        self._default_configs: Dict[str, Dict[str, Any]] = {
            key: dict(value) for key, value in (default_configs or {}).items()
        }
        self._cache: Dict[CacheKey, CacheEntry] = {}
        self._cache_lock = threading.RLock()
        self.logger = get_logger(__name__)

    @property
    def registry(self) -> VariantRegistry:
        return self._registry

    def create(self, discriminator: Any, config: Optional[Mapping[str, Any]] = None) -> CapabilityPort:
        """
        Create a new instance of the variant selected by ``discriminator``.

        Args:
            discriminator: Key of a registered variant
            config: Configuration bundle; None uses the configured defaults

        Returns:
            Adapter satisfying the capability set

        Raises:
            UnknownVariantError: If the discriminator is not registered
            ConfigurationError: If the bundle is rejected by the variant
            ContractViolationError: If the built object lacks capability operations
        """
        registration = self._registry.get_registration(discriminator)
        bundle = self._resolve_bundle(registration.discriminator, config)
        return self._build(registration, bundle)

    def get_or_create(self, discriminator: Any, config: Optional[Mapping[str, Any]] = None) -> CapabilityPort:
        """
        Get the shared instance for a discriminator and bundle, creating it once.

        Lookups are lock-free reads; creation happens under the cache lock
        with a second lookup, so concurrent callers for the same key get the
        same, fully-constructed instance. An entry built by a registration
        that has since been replaced is rebuilt from the current one.
        """
        registration = self._registry.get_registration(discriminator)
        key = registration.discriminator
        bundle = self._resolve_bundle(key, config)
        cache_key = (key, self._canonical(bundle))

        entry = self._cache.get(cache_key)
        if entry is not None and entry[0] is registration:
            return entry[1]

        with self._cache_lock:
            entry = self._cache.get(cache_key)
            if entry is None or entry[0] is not registration:
                if entry is not None:
                    self.logger.debug(f"Variant '{key}' was re-registered; rebuilding cached instance")
                entry = (registration, self._build(registration, bundle))
                self._cache[cache_key] = entry
                self.logger.debug(f"Cached variant '{key}'")
        return entry[1]

    def evict(self, discriminator: Any) -> int:
        """
        Drop every shared instance built for ``discriminator``.

        Returns:
            Number of evicted instances
        """
        try:
            key = normalize_discriminator(discriminator)
        except ValueError:
            return 0
        with self._cache_lock:
            stale = [cache_key for cache_key in self._cache if cache_key[0] == key]
            for cache_key in stale:
                del self._cache[cache_key]
        self.logger.debug(f"Evicted {len(stale)} cached instance(s) of variant '{key}'")
        return len(stale)

    def clear_cache(self) -> None:
        """Drop every shared instance."""
        with self._cache_lock:
            self._cache.clear()
        self.logger.debug("Cleared variant cache")

    def cached_count(self) -> int:
        with self._cache_lock:
            return len(self._cache)

    def available_variants(self) -> List[str]:
        return self._registry.get_registered_variants()

    def _build(self, registration: VariantRegistration, bundle: Dict[str, Any]) -> CapabilityPort:
        key = registration.discriminator
        variant_config = self._registry.create_config(key, bundle)
        adapter = self._registry.create_adapter(key, variant_config)
        verify_capability(adapter)

        self.logger.info(f"Created variant '{key}'", adapter=type(adapter).__name__)
        return adapter

    def _resolve_bundle(self, key: str, config: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        if config is None:
            return dict(self._default_configs.get(key, {}))
        return dict(config)

    @staticmethod
    def _canonical(bundle: Mapping[str, Any]) -> str:
        return json.dumps(bundle, sort_keys=True, default=str)
