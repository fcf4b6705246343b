"""Configuration schemas."""

from typing import Any, Dict

from .app_schema import AppConfig
from .factory_schema import FactoryConfig
from .logging_schema import LogFileConfig, LoggingConfig


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """Validate raw configuration data against the application schema."""
    return AppConfig.model_validate(data)


__all__ = [
    "AppConfig",
    "FactoryConfig",
    "LoggingConfig",
    "LogFileConfig",
    "validate_config",
]
