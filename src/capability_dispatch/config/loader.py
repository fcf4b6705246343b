"""Configuration loading from files and environment."""
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from capability_dispatch.config.utils.env_expansion import expand_config_env_vars
from capability_dispatch.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "CAPDISPATCH_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"

# Environment variable -> dotted configuration key
ENV_OVERRIDES: Dict[str, str] = {
    f"{ENV_PREFIX}LOG_LEVEL": "logging.level",
    f"{ENV_PREFIX}ENVIRONMENT": "environment",
    f"{ENV_PREFIX}CACHE_INSTANCES": "factory.cache_instances",
}


class ConfigurationLoader:
    """Load raw configuration data from JSON/YAML files and the environment."""

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load configuration data from a file.

        Args:
            config_file: Path to a ``.json``, ``.yaml`` or ``.yml`` file

        Returns:
            Raw configuration dictionary with environment references expanded

        Raises:
            ConfigurationError: If the file is missing, unreadable or malformed
        """
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {config_file}: {e}") from e

        try:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(text) or {}
            else:
                data = json.loads(text) if text.strip() else {}
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration file {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping at the top level"
            )

        logger.debug("Loaded configuration from %s", config_file)
        return expand_config_env_vars(data)

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from ``config_file``, ``$CAPDISPATCH_CONFIG`` or defaults."""
        config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        if config_file:
            return self.load_from_file(config_file)
        return {}

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``CAPDISPATCH_*`` environment overrides on top of loaded data."""
        result = json.loads(json.dumps(config_data))
        for env_var, dotted_key in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            target = result
            *parents, leaf = dotted_key.split(".")
            for depth, part in enumerate(parents):
                section = target.get(part)
                if section is None:
                    # Empty section in the file, e.g. "logging:" with nothing under it
                    section = target[part] = {}
                elif not isinstance(section, dict):
                    name = ".".join(parents[:depth + 1])
                    raise ConfigurationError(
                        f"Cannot apply {env_var}: configuration section '{name}' must be a mapping, "
                        f"got {type(section).__name__}"
                    )
                target = section
            target[leaf] = value
            logger.debug("Applied environment override %s -> %s", env_var, dotted_key)
        return result
