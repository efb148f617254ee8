"""
vidcoach.config - YAML config loading and validation.

Handles loading vidcoach.yaml, applying defaults, and validating all
parameters.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from vidcoach.exceptions import ConfigError

CONFIG_FILENAME = "vidcoach.yaml"


class VidcoachConfig(BaseModel):
    """Resolved configuration for vidcoach."""

    llm_model: str = "gpt-4o-mini"
    script_model: str = "gpt-4o"
    image_model: str = "dall-e-3"
    llm_timeout: int = Field(default=120, gt=0)
    max_workers: int = Field(default=12, gt=0)

    benchmark_capacity: int = Field(default=1000, gt=0)
    benchmark_min_history: int = Field(default=10, ge=1)

    cache_ttl_seconds: float = Field(default=30 * 60, gt=0.0)

    catalog_region: str = "US"
    catalog_max_results: int = Field(default=12, ge=1, le=50)
    catalog_api_key: str | None = None

    @field_validator("catalog_region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        if len(v) != 2 or not v.isalpha():
            raise ValueError("catalog_region must be a two-letter region code")
        return v.upper()

    @field_validator("llm_model", "script_model", "image_model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("model name must not be empty")
        return v

    def resolved_api_key(self) -> str | None:
        """Catalog API key, falling back to the YOUTUBE_API_KEY environment variable."""
        return self.catalog_api_key or os.environ.get("YOUTUBE_API_KEY")


def load_config(config_path: Path) -> VidcoachConfig:
    """Load and validate configuration from a YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {config_path}")

    with open(config_path) as f:
        raw_config = yaml.safe_load(f) or {}

    if not isinstance(raw_config, dict):
        raise ConfigError(f"{config_path} must contain a mapping of settings")

    return VidcoachConfig(**{k: v for k, v in raw_config.items() if v is not None})


def create_default_config() -> dict[str, Any]:
    """Create a default config dict suitable for writing to disk."""
    return VidcoachConfig().model_dump(exclude={"catalog_api_key"})


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
