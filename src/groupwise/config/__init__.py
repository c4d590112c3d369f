"""Configuration for groupwise."""

from groupwise.config.settings import DEFAULT_CONFIG_FILE, GroupwiseConfig, load_config

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "GroupwiseConfig",
    "load_config",
]
