"""
Core building blocks for ccresolve: build context, platform detection and
the exception hierarchy.
"""

from ccresolve.core.context import BuildContext, TargetOverride
from ccresolve.core.exceptions import (
    CCResolveError,
    ConfigError,
    UnsupportedPlatformError,
)
from ccresolve.core.platform import detect_build_triple, clear_platform_cache

__all__ = [
    "BuildContext",
    "TargetOverride",
    "CCResolveError",
    "ConfigError",
    "UnsupportedPlatformError",
    "detect_build_triple",
    "clear_platform_cache",
]
