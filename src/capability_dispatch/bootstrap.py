"""Application bootstrap: wire configuration, logging, registry and factory.

Every dependency is built here and handed over explicitly; nothing is looked
up from a global container at call time.
"""

from typing import Optional

from capability_dispatch.application.client import CapabilityClient
from capability_dispatch.application.factory import VariantFactory
from capability_dispatch.application.substitutability import SubstitutabilityChecker
from capability_dispatch.config.manager import ConfigurationManager
from capability_dispatch.infrastructure.logging.logger import get_logger, setup_logging
from capability_dispatch.infrastructure.registry.variant_registry import VariantRegistry
from capability_dispatch.variants import register_builtin_variants


class Application:
    """Wired application components."""

    def __init__(self, config_manager: ConfigurationManager, registry: VariantRegistry):
        self.config_manager = config_manager
        self.registry = registry
        self.factory = VariantFactory(
            registry,
            default_configs=config_manager.factory.variants,
        )
        self.client = CapabilityClient()
        self.checker = SubstitutabilityChecker(self.client.operate)

    @property
    def cache_instances(self) -> bool:
        return self.config_manager.factory.cache_instances


def create_application(config_file: Optional[str] = None,
                       configure_logging: bool = True,
                       registry: Optional[VariantRegistry] = None) -> Application:
    """
    Create the application.

    Args:
        config_file: Configuration file (JSON or YAML); falls back to $CAPDISPATCH_CONFIG
        configure_logging: Install log handlers from the logging configuration
        registry: Registry to use; a new one with the built-in variants by default

    Returns:
        Wired Application

    Raises:
        ConfigurationError: If the configuration cannot be loaded
    """
    config_manager = ConfigurationManager(config_file)
    app_config = config_manager.app_config

    if configure_logging:
        setup_logging(app_config.logging)

    if registry is None:
        registry = VariantRegistry()
        register_builtin_variants(registry)

    app = Application(config_manager, registry)
    get_logger(__name__).info(
        "Application initialized",
        environment=app_config.environment,
        variants=registry.get_registered_variants(),
    )
    return app
