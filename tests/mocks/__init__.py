"""
Mock implementations for testing ccresolve components.

This package provides mock implementations of external dependencies and
system interactions to enable isolated, deterministic testing.
"""

from .process import FakeRunner

__all__ = [
    "FakeRunner",
]
