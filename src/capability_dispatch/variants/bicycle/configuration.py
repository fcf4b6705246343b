"""Bicycle variant configuration."""

from pydantic import BaseModel, ConfigDict, Field


class BicycleVariantConfig(BaseModel):
    """Recognized options for the bicycle variant. The empty bundle is valid."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    top_speed: int = Field(20, gt=0, alias="topSpeed", description="Rate reported by the bicycle")
