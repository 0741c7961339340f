"""
Centralized exception hierarchy for ccresolve.

Compiler resolution itself is best-effort and never raises for a heuristic
that did not apply; these exceptions cover the surrounding layers
(configuration loading and build platform detection).
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class CCResolveError(Exception):
    """Base exception for all ccresolve errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(CCResolveError):
    """Configuration parsing or validation error."""

    pass


# ============================================================================
# Platform Exceptions
# ============================================================================


class UnsupportedPlatformError(CCResolveError, RuntimeError):
    """Raised when the build machine's triple cannot be determined."""

    def __init__(self, system: str, machine: str = ""):
        self.system = system
        self.machine = machine
        msg = f"Unsupported operating system: {system}"
        if machine:
            msg += f" ({machine})"
        super().__init__(msg)
