"""Configuration management for the application."""
from __future__ import annotations
import logging
import threading
from typing import Any, Dict, Optional

from pydantic import ValidationError

from capability_dispatch.config.loader import ConfigurationLoader
from capability_dispatch.config.schemas import AppConfig, FactoryConfig, LoggingConfig
from capability_dispatch.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    This class provides:
    - Type safety through pydantic schemas
    - JSON and YAML configuration files
    - Environment variable expansion and overrides
    - Lazy, thread-safe loading

    The manager is created explicitly and handed to whoever needs it; there
    is no process-wide instance.
    """

    def __init__(self, config_file: Optional[str] = None,
                 loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._loader = loader or ConfigurationLoader()
        self._lock = threading.RLock()
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    @property
    def logging(self) -> LoggingConfig:
        return self.app_config.logging

    @property
    def factory(self) -> FactoryConfig:
        return self.app_config.factory

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data = self._loader.load_configuration(self._config_file)
        config_data = self._loader.apply_environment_overrides(config_data)
        self._raw_config = config_data

        try:
            app_config = AppConfig.model_validate(config_data)
        except ValidationError as e:
            invalid_fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s) in {invalid_fields}",
                missing_fields=invalid_fields,
                details=e.errors(),
            ) from e

        logger.info("Configuration loaded successfully")
        return app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Get a copy of the raw configuration dictionary."""
        self.app_config  # loads on first access
        return dict(self._raw_config or {})

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value from the validated configuration
        """
        value: Any = self.app_config.model_dump()
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def get_variant_defaults(self, discriminator: str) -> Dict[str, Any]:
        """Get the configured default bundle for a discriminator."""
        return self.factory.get_variant_defaults(discriminator)

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None
            self._raw_config = None
