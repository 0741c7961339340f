"""
ccresolve - native C/C++ compiler and archiver resolution.

Resolves, once per build invocation, the C compiler, C++ compiler and archiver
to use for every target triple a build produces code for.
"""

__version__ = "0.1.0"

from ccresolve.core.context import BuildContext, TargetOverride
from ccresolve.toolchain.language import Language
from ccresolve.toolchain.resolver import (
    CompilerResolver,
    ResolutionResult,
    ResolvedCompiler,
    find,
)

__all__ = [
    "__version__",
    "BuildContext",
    "TargetOverride",
    "Language",
    "CompilerResolver",
    "ResolutionResult",
    "ResolvedCompiler",
    "find",
]
