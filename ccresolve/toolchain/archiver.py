"""
Archiver resolution.

Pairs every resolved C compiler with an archiver. Precedence:

1. ``ar`` configured for the target
2. ``AR`` environment variable
3. MSVC targets: no archiver
4. musl and OpenBSD targets: ``ar`` from PATH
5. Inferred from the compiler's file name
"""

import logging
import os
from typing import Mapping, Optional

from ccresolve.core.context import TargetOverride

logger = logging.getLogger(__name__)

# Checked in this order; the rightmost occurrence of the first match is used.
COMPILER_SUFFIXES = ("gcc", "cc", "clang")


def infer_archiver(compiler: str) -> str:
    """
    Guess the archiver that sits next to a compiler.

    The part of the file name before the compiler suffix is kept so cross
    prefixes survive. The directory part is kept exactly as given.

    Args:
        compiler: Compiler path or bare name

    Returns:
        Archiver path in the compiler's directory

    Example:
        >>> infer_archiver("/opt/x/bin/arm-linux-gnueabihf-gcc")
        '/opt/x/bin/arm-linux-gnueabihf-ar'
        >>> infer_archiver("clang")
        'ar'
    """
    head, name = os.path.split(compiler)
    for suffix in COMPILER_SUFFIXES:
        idx = name.rfind(suffix)
        if idx >= 0:
            return os.path.join(head, f"{name[:idx]}ar")
    return compiler


def resolve_archiver(
    compiler: str,
    target: str,
    override: Optional[TargetOverride] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """
    Resolve the archiver for a target.

    Args:
        compiler: Resolved C compiler for the target
        target: Target triple
        override: Per-target configuration, if any
        environ: Environment to read; defaults to ``os.environ``

    Returns:
        Archiver path, or None when the toolchain has no separate archiver
    """
    if override is not None and override.ar is not None:
        return override.ar

    env = os.environ if environ is None else environ
    ar = env.get("AR")
    if ar:
        return ar

    if "msvc" in target:
        return None
    if "musl" in target or "openbsd" in target:
        return "ar"

    return infer_archiver(compiler)
