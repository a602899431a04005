from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Generator settings pulled from HEIGHTMAP_* environment variables."""

    # Grid
    width: int = Field(default=1000, gt=0, description="Grid width in pixels")
    height: int = Field(default=600, gt=0, description="Grid height in pixels")

    # Noise
    seed: Optional[int] = Field(
        default=None, ge=0, description="Noise seed; drawn from system entropy when unset"
    )
    preset: str = Field(default="reference", description="Octave preset name")
    vectorized: bool = Field(default=True, description="Compute the raster with NumPy")

    # Output
    output_path: str = Field(default="image.png", description="Colour image destination")
    heights_output_path: Optional[str] = Field(
        default=None, description="Optional greyscale height field destination"
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["plain", "json"] = Field(default="plain", description="Logging format")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    class Config:
        env_prefix = "HEIGHTMAP_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
