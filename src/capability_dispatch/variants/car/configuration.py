"""Car variant configuration."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class CarVariantConfig(BaseModel):
    """Recognized options for the car variant."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    api_key: SecretStr = Field(..., alias="apiKey", description="Remote start API key")
    top_speed: int = Field(100, gt=0, alias="topSpeed", description="Rate reported by the car")
    fuel_litres: float = Field(40.0, ge=0, alias="fuelLitres", description="Fuel in the tank")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: SecretStr) -> SecretStr:
        """Validate the API key is not blank."""
        if not v.get_secret_value().strip():
            raise ValueError("API key cannot be empty")
        return v
