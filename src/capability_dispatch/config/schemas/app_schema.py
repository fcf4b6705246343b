"""Main application configuration schema."""

from pydantic import BaseModel, Field, field_validator

from .factory_schema import FactoryConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    debug: bool = Field(False, description="Debug mode")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    factory: FactoryConfig = Field(default_factory=lambda: FactoryConfig())

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v
