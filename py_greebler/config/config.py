from pathlib import Path
from typing import Optional
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

ENV_PREFIX = "GREEBLER_"
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Application settings pulled from GREEBLER_* environment variables."""

    # Generation
    dim: int = Field(default=1024, gt=0, description="Texture width and height in pixels")
    limit: int = Field(default=16, gt=0, description="Smallest region/diameter that is subdivided")
    seed: int = Field(default=0, ge=0, lt=2**64, description="PRNG seed")

    # Scatter passes
    scatter_grooves: int = Field(default=0, ge=0, description="Random grooves")
    scatter_rectangles: int = Field(default=0, ge=0, description="Random rectangles")
    scatter_circles: int = Field(default=0, ge=0, description="Random circles")
    scatter_rows: int = Field(default=0, ge=0, description="Random primitive rows")

    # Output
    heightmap_path: str = Field(default="heightmap.png", description="Height map image path")
    normalmap_path: str = Field(default="normalmap.png", description="Normal map image path")
    height_min: float = Field(default=0.0, description="Height mapped to black")
    height_max: float = Field(default=255.0, description="Height mapped to white")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="plain", description="Logging format (plain or json)")

    class Config:
        env_prefix = ENV_PREFIX
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Build settings from the environment, filling missing GREEBLER_* keys from .env.

    Only keys carrying the package prefix are copied into the environment,
    and only when the process does not already define them.
    """
    env_file = Path(env_file) if env_file is not None else BASE_DIR / ".env"
    if env_file.exists():
        file_env = dotenv_values(env_file)
        missing_keys = {
            k: v for k, v in file_env.items()
            if k.startswith(ENV_PREFIX) and k not in os.environ and v is not None
        }
        for k, v in missing_keys.items():
            os.environ[k] = v
    return Settings()
