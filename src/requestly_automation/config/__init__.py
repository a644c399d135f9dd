"""Configuration management for extension paths and environment."""

from .environment import get_env_config

from .paths import (
    ExtensionType,
    get_extensions_dir,
    get_extension,
)

__all__ = [
    "get_env_config",
    "ExtensionType",
    "get_extensions_dir",
    "get_extension",
]
