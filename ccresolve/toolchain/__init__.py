"""
Toolchain resolution module for ccresolve.

This module provides functionality for:
- Building the C and C++ target sets of a build
- Default compiler probing from the environment
- Platform quirk corrections (Android NDK, OpenBSD, musl)
- Archiver resolution
"""

from ccresolve.toolchain.archiver import infer_archiver, resolve_archiver
from ccresolve.toolchain.language import Language
from ccresolve.toolchain.prober import DefaultToolchainProber, env_candidates
from ccresolve.toolchain.quirks import PlatformQuirk, QuirkResolver, classify
from ccresolve.toolchain.resolver import (
    CompilerResolver,
    ResolutionResult,
    ResolvedCompiler,
    find,
)
from ccresolve.toolchain.runner import SubprocessRunner
from ccresolve.toolchain.targets import c_targets, cxx_targets

__all__ = [
    "infer_archiver",
    "resolve_archiver",
    "Language",
    "DefaultToolchainProber",
    "env_candidates",
    "PlatformQuirk",
    "QuirkResolver",
    "classify",
    "CompilerResolver",
    "ResolutionResult",
    "ResolvedCompiler",
    "find",
    "SubprocessRunner",
    "c_targets",
    "cxx_targets",
]
