"""Variant Registry - Registry pattern for capability variant factories.

This module implements the registry pattern for variant creation, replacing
if/else chains over discriminators with a mapping lookup. A new variant is a
new registration; no existing call site changes.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional
import threading

from pydantic import BaseModel, ValidationError

from capability_dispatch.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    UnknownVariantError,
)
from capability_dispatch.domain.capability.value_objects import normalize_discriminator
from capability_dispatch.infrastructure.logging.logger import get_logger


def passthrough_config(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Config factory for variants that take their bundle as a plain dict."""
    return dict(data)


class VariantRegistration:
    """Container for variant registration information."""

    def __init__(self,
                 discriminator: str,
                 adapter_factory: Callable[[Any], Any],
                 config_factory: Callable[[Mapping[str, Any]], Any] = passthrough_config,
                 description: str = ""):
        """
        Initialize variant registration.

        Args:
            discriminator: Key selecting this variant (e.g., 'car', 'bicycle')
            adapter_factory: Factory function building the adapter from a validated config
            config_factory: Factory function validating a raw configuration bundle
            description: Human readable description of the variant
        """
        self.discriminator = discriminator
        self.adapter_factory = adapter_factory
        self.config_factory = config_factory
        self.description = description

    def __repr__(self) -> str:
        return f"VariantRegistration(discriminator='{self.discriminator}')"


class VariantRegistry:
    """
    Registry for capability variant factories.

    Maps each discriminator to the functions that validate its configuration
    and build its adapter. Lookups never fall back to another variant: an
    unknown discriminator is always reported with ``UnknownVariantError``.

    Thread-safe: the mapping is guarded by a lock, and factories run outside
    of it.
    """

    def __init__(self):
        """Initialize variant registry."""
        self._registrations: Dict[str, VariantRegistration] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)

        self.logger.debug("Variant registry initialized")

    def register_variant(self,
                         discriminator: Any,
                         adapter_factory: Callable[[Any], Any],
                         config_factory: Callable[[Mapping[str, Any]], Any] = passthrough_config,
                         description: str = "",
                         replace: bool = False) -> VariantRegistration:
        """
        Register a variant with its factories.

        Args:
            discriminator: Key selecting the variant
            adapter_factory: Factory function building the adapter from a validated config
            config_factory: Factory function validating a raw configuration bundle
            description: Human readable description of the variant
            replace: Replace an existing registration instead of failing

        Returns:
            The stored registration

        Raises:
            ConfigurationError: If the discriminator is invalid or already registered
        """
        key = self._normalize(discriminator)
        if not callable(adapter_factory) or not callable(config_factory):
            raise ConfigurationError(f"Factories for variant '{key}' must be callable")

        with self._registry_lock:
            if key in self._registrations and not replace:
                raise ConfigurationError(f"Variant '{key}' is already registered")

            registration = VariantRegistration(
                discriminator=key,
                adapter_factory=adapter_factory,
                config_factory=config_factory,
                description=description,
            )
            self._registrations[key] = registration

        self.logger.info(f"Registered variant: {key}")
        self.logger.debug(f"Variant registration: {registration}")
        return registration

    def unregister_variant(self, discriminator: Any) -> None:
        """
        Remove a variant registration.

        Raises:
            UnknownVariantError: If the discriminator is not registered
        """
        key = self._normalize_lookup(discriminator)
        with self._registry_lock:
            if key not in self._registrations:
                raise UnknownVariantError(key, list(self._registrations))
            del self._registrations[key]
        self.logger.info(f"Unregistered variant: {key}")

    def create_config(self, discriminator: Any, data: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Create a validated variant configuration from a raw bundle.

        Args:
            discriminator: Key of the variant
            data: Raw configuration bundle

        Returns:
            Variant configuration instance

        Raises:
            UnknownVariantError: If the variant is not registered
            ConfigurationError: If the bundle is rejected
        """
        registration = self.get_registration(discriminator)
        key = registration.discriminator

        try:
            config = registration.config_factory(dict(data or {}))
        except ValidationError as e:
            invalid_fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            error_msg = f"Invalid configuration for variant '{key}': {invalid_fields}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg, missing_fields=invalid_fields, details=e.errors()) from e
        except DomainException:
            raise
        except Exception as e:
            error_msg = f"Failed to create config for variant '{key}': {str(e)}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

        self.logger.debug(f"Created config for variant: {key}")
        return config

    def create_adapter(self, discriminator: Any, config: Any) -> Any:
        """
        Create the adapter for a variant from a validated configuration.

        Args:
            discriminator: Key of the variant
            config: Configuration produced by ``create_config``

        Returns:
            Adapter instance

        Raises:
            UnknownVariantError: If the variant is not registered
            ConfigurationError: If the adapter factory fails unexpectedly
        """
        registration = self.get_registration(discriminator)
        key = registration.discriminator

        try:
            adapter = registration.adapter_factory(config)
        except DomainException:
            raise
        except Exception as e:
            error_msg = f"Failed to create adapter for variant '{key}': {str(e)}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

        self.logger.debug(f"Created adapter for variant: {key}")
        return adapter

    def get_registration(self, discriminator: Any) -> VariantRegistration:
        """
        Get the registration for a discriminator.

        Raises:
            UnknownVariantError: If the variant is not registered
        """
        key = self._normalize_lookup(discriminator)
        with self._registry_lock:
            registration = self._registrations.get(key)
            if registration is None:
                raise UnknownVariantError(key, list(self._registrations))
            return registration

    def get_registered_variants(self) -> List[str]:
        """
        Get list of registered variants.

        Returns:
            Registered discriminators, sorted
        """
        with self._registry_lock:
            return sorted(self._registrations)

    def describe_variants(self) -> Dict[str, str]:
        """Get the description of every registered variant."""
        with self._registry_lock:
            return {key: reg.description for key, reg in sorted(self._registrations.items())}

    def is_variant_registered(self, discriminator: Any) -> bool:
        """
        Check if a variant is registered.

        Args:
            discriminator: Key to check

        Returns:
            True if the variant is registered, False otherwise
        """
        try:
            key = normalize_discriminator(discriminator)
        except ValueError:
            return False
        with self._registry_lock:
            return key in self._registrations

    def clear_registrations(self) -> None:
        """
        Clear all variant registrations.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._registrations.clear()
        self.logger.debug("Cleared all variant registrations")

    @staticmethod
    def _normalize(discriminator: Any) -> str:
        try:
            return normalize_discriminator(discriminator)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    def _normalize_lookup(self, discriminator: Any) -> str:
        # Malformed keys can never match a registration.
        try:
            return normalize_discriminator(discriminator)
        except ValueError:
            raise UnknownVariantError(discriminator, self.get_registered_variants())


def model_config_factory(model: type) -> Callable[[Mapping[str, Any]], BaseModel]:
    """Build a config factory validating bundles against a pydantic model."""

    def create_config(data: Mapping[str, Any]) -> BaseModel:
        return model.model_validate(dict(data))

    create_config.__name__ = f"create_{model.__name__}"
    return create_config


# Global registry instance
_variant_registry: Optional[VariantRegistry] = None
_global_lock = threading.Lock()


def get_variant_registry() -> VariantRegistry:
    """
    Get the global variant registry instance.

    Returns:
        Variant registry shared by the process
    """
    global _variant_registry
    if _variant_registry is None:
        with _global_lock:
            if _variant_registry is None:
                _variant_registry = VariantRegistry()
    return _variant_registry


def reset_variant_registry() -> None:
    """
    Reset the global variant registry instance.

    This function is primarily for testing purposes.
    """
    global _variant_registry
    with _global_lock:
        _variant_registry = None
