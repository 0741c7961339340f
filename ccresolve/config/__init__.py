"""Configuration loading for ccresolve."""

from ccresolve.config.parser import (
    DEFAULT_CONFIG_NAME,
    ResolveConfig,
    build_context,
    load_context,
    parse_config,
    parse_data,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "ResolveConfig",
    "build_context",
    "load_context",
    "parse_config",
    "parse_data",
]
