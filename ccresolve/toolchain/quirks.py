"""
ccresolve/toolchain/quirks.py

Platform-specific corrections applied to a default compiler guess.

Only used when the target has no explicit compiler configured. Each target
falls into exactly one quirk category and at most one rule fires:

- ANDROID: use the NDK's clang wrapper when an NDK root is configured
- OPENBSD: swap a pre-4.7 base GCC for the ports ``egcc``/``eg++``
- MIPS_MUSL: name the musl cross compiler for the two exact MIPS triples
- MUSL: prefer ``<musl-root>/bin/musl-gcc`` when it exists
- OTHER: leave the selection untouched

Every rule is best-effort: a failed process launch or a missing file means
the rule did not apply.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional

from ccresolve.core.context import BuildContext, TargetOverride
from ccresolve.core.interfaces import CommandRunner
from ccresolve.toolchain.language import Language
from ccresolve.toolchain.runner import SubprocessRunner

logger = logging.getLogger(__name__)


# Cross compilers for the two MIPS musl triples, keyed by exact triple.
MIPS_MUSL_COMPILERS: Dict[str, str] = {
    "mips-unknown-linux-musl": "mips-linux-musl-gcc",
    "mipsel-unknown-linux-musl": "mipsel-linux-musl-gcc",
}

# Base GCC releases older than this are replaced by the ports compiler.
LEGACY_GCC_MINORS = "0123456"


class PlatformQuirk(Enum):
    """Closed set of platform categories with compiler corrections."""

    ANDROID = "android"
    OPENBSD = "openbsd"
    MIPS_MUSL = "mips-musl"
    MUSL = "musl"
    OTHER = "other"


def classify(target: str) -> PlatformQuirk:
    """
    Determine the quirk category of a target.

    Categories are checked in a fixed order and the first match wins.

    Args:
        target: Target triple

    Returns:
        The target's quirk category

    Example:
        >>> classify("armv7-linux-androideabi")
        <PlatformQuirk.ANDROID: 'android'>
        >>> classify("mips-unknown-linux-musl")
        <PlatformQuirk.MIPS_MUSL: 'mips-musl'>
    """
    if "android" in target:
        return PlatformQuirk.ANDROID
    if "openbsd" in target:
        return PlatformQuirk.OPENBSD
    if target in MIPS_MUSL_COMPILERS:
        return PlatformQuirk.MIPS_MUSL
    if "musl" in target:
        return PlatformQuirk.MUSL
    return PlatformQuirk.OTHER


def android_ndk_compiler(ndk: Path, target: str, language: Language) -> str:
    """
    Path of the NDK compiler wrapper for a target.

    Example:
        >>> android_ndk_compiler(Path("/ndk"), "armv7-linux-androideabi", Language.C)
        '/ndk/bin/arm-linux-androideabi-clang'
    """
    name = f"{target.replace('armv7', 'arm')}-{language.clang}"
    return str(ndk / "bin" / name)


def is_legacy_gcc(version_output: str) -> bool:
    """
    Check whether ``--version`` output reports GCC 4.0 through 4.6.

    Only the first occurrence of ``" 4."`` is considered.

    Example:
        >>> is_legacy_gcc("gcc (GCC) 4.2.1 20070719")
        True
        >>> is_legacy_gcc("gcc (GCC) 4.9.4")
        False
    """
    i = version_output.find(" 4.")
    if i < 0:
        return False
    minor = version_output[i + 3 : i + 4]
    return minor != "" and minor in LEGACY_GCC_MINORS


class QuirkResolver:
    """
    Apply the quirk rule of a target's category to an initial compiler pick.

    Args:
        context: Build context, used for musl root lookup
        runner: Process runner for the OpenBSD version query and probe
    """

    def __init__(
        self, context: BuildContext, runner: Optional[CommandRunner] = None
    ):
        self.context = context
        self.runner = runner or SubprocessRunner()
        self._rules: Dict[
            PlatformQuirk,
            Callable[[str, str, Optional[TargetOverride], Language], str],
        ] = {
            PlatformQuirk.ANDROID: self._android,
            PlatformQuirk.OPENBSD: self._openbsd,
            PlatformQuirk.MIPS_MUSL: self._mips_musl,
            PlatformQuirk.MUSL: self._musl,
            PlatformQuirk.OTHER: self._passthrough,
        }

    def resolve(
        self,
        initial: str,
        target: str,
        override: Optional[TargetOverride],
        language: Language,
    ) -> str:
        """
        Correct an initial compiler selection for platform quirks.

        Args:
            initial: Compiler chosen by the default prober, exactly as given
            target: Target triple
            override: Per-target configuration, if any
            language: Language being resolved

        Returns:
            The corrected compiler, or ``initial`` if no rule applied
        """
        quirk = classify(target)
        selected = self._rules[quirk](initial, target, override, language)
        if selected != initial:
            logger.debug(
                f"{quirk.value} quirk for {target}: {initial} -> {selected}"
            )
        return selected

    def _android(self, initial, target, override, language):
        # Without an NDK the default already accounts for the triple
        if override is None or override.ndk is None:
            return initial
        return android_ndk_compiler(override.ndk, target, language)

    def _openbsd(self, initial, target, override, language):
        gnu_compiler = language.gcc
        if os.path.basename(initial) != gnu_compiler:
            return initial

        output = self.runner.output([initial, "--version"])
        if output is None or not is_legacy_gcc(output):
            return initial

        alternative = f"e{gnu_compiler}"
        if self.runner.launches([alternative]):
            logger.info(
                f"Base {gnu_compiler} on {target} is too old, using {alternative}"
            )
            return alternative
        logger.debug(f"{alternative} not available for {target}")
        return initial

    def _mips_musl(self, initial, target, override, language):
        # Only the untouched default; "./gcc" or "/usr/bin/gcc" are deliberate choices
        if initial != "gcc":
            return initial
        return MIPS_MUSL_COMPILERS[target]

    def _musl(self, initial, target, override, language):
        root = self.context.musl_root_for(target)
        if root is None:
            return initial
        guess = root / "bin" / "musl-gcc"
        if guess.exists():
            return str(guess)
        logger.debug(f"No musl-gcc at {guess}")
        return initial

    def _passthrough(self, initial, target, override, language):
        return initial
