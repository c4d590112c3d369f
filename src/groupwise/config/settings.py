"""Configuration settings and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from groupwise.errors import ConfigValidationError, ErrorContext

DEFAULT_CONFIG_FILE = "groupwise.yaml"


class GroupwiseConfig(BaseSettings):
    """Configuration for groupwise."""

    model_config = SettingsConfigDict(
        env_prefix="GROUPWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    store_path: Path = Field(
        default=Path("~/.groupwise/groups.json"),
        description="JSON file holding saved groups",
    )
    default_size: int = Field(default=2, description="Group size when none is given")
    coverage_threshold: float = Field(
        default=0.8,
        description="Fraction of partners each member must meet before a group schedule stops",
    )
    output_format: str = "console"
    color: bool = True
    verbose: bool = False

    @field_validator("default_size")
    @classmethod
    def validate_default_size(cls, v: int) -> int:
        if v < 1:
            raise ConfigValidationError(
                message=f"default_size must be at least 1, got {v}",
                field="default_size",
                value=v,
            )
        return v

    @field_validator("coverage_threshold")
    @classmethod
    def validate_coverage_threshold(cls, v: float) -> float:
        if not 0.0 < v <= 1.0:
            raise ConfigValidationError(
                message=f"coverage_threshold must be in (0, 1], got {v}",
                field="coverage_threshold",
                value=v,
                context=ErrorContext(extra={"expected": "0 < value <= 1"}),
            )
        return v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        valid = {"console", "json"}
        if v not in valid:
            raise ConfigValidationError(
                message=f"Invalid output format: {v!r}. Valid: {sorted(valid)}",
                field="output_format",
                value=v,
                context=ErrorContext(extra={"valid_formats": sorted(valid)}),
            )
        return v


def load_config(config_path: str | Path | None = None) -> GroupwiseConfig:
    """Load configuration from file and environment.

    Priority: env vars > config file > defaults. When no path is given,
    ``groupwise.yaml`` in the working directory is used if present.
    """
    config_data: dict[str, Any] = {}

    path = Path(config_path) if config_path is not None else Path(DEFAULT_CONFIG_FILE)
    if path.exists():
        try:
            with open(path) as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(
                message=f"Failed to parse YAML configuration: {e}",
                context=ErrorContext(extra={"path": str(path)}),
                cause=e,
            ) from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigValidationError(
                message=f"Configuration must be a YAML mapping, got {type(loaded).__name__}",
                context=ErrorContext(extra={"path": str(path)}),
            )
        config_data = loaded

    # Init kwargs outrank the environment in pydantic-settings, so drop any
    # file value that an env var is about to override.
    for key in list(config_data):
        if f"GROUPWISE_{key.upper()}" in os.environ:
            config_data.pop(key)

    try:
        return GroupwiseConfig(**config_data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ConfigValidationError(
            message=f"Invalid value for {field}: {first['msg']}",
            field=field or None,
            value=first.get("input"),
            cause=e,
        ) from e
