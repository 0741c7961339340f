"""
ccresolve/toolchain/prober.py

Default toolchain probing - the compiler a build uses for a bare target.

Lookup follows the conventions of the Rust ``cc`` crate:

1. ``CC_<target>`` / ``CXX_<target>``
2. ``CC_<target_with_underscores>``
3. ``HOST_CC`` when target == host, otherwise ``TARGET_CC``
4. ``CC``
5. Platform default naming (MSVC, emscripten, Android, known cross
   prefixes, then the host's traditional driver)
"""

import logging
import os
from typing import Dict, List, Mapping, Optional

from ccresolve.core.interfaces import ToolchainProber
from ccresolve.toolchain.language import Language

logger = logging.getLogger(__name__)


# Compiler prefixes used by common cross toolchains, keyed by target triple.
CROSS_PREFIXES: Dict[str, str] = {
    "aarch64-unknown-linux-gnu": "aarch64-linux-gnu",
    "aarch64-unknown-linux-musl": "aarch64-linux-musl",
    "aarch64-unknown-netbsd": "aarch64--netbsd",
    "arm-unknown-linux-gnueabi": "arm-linux-gnueabi",
    "arm-unknown-linux-gnueabihf": "arm-linux-gnueabihf",
    "arm-unknown-linux-musleabi": "arm-linux-musleabi",
    "arm-unknown-linux-musleabihf": "arm-linux-musleabihf",
    "arm-unknown-netbsd-eabi": "arm--netbsdelf-eabi",
    "armv4t-unknown-linux-gnueabi": "arm-linux-gnueabi",
    "armv5te-unknown-linux-gnueabi": "arm-linux-gnueabi",
    "armv6-unknown-netbsd-eabihf": "armv6--netbsdelf-eabihf",
    "armv7-unknown-linux-gnueabihf": "arm-linux-gnueabihf",
    "armv7-unknown-linux-musleabihf": "arm-linux-musleabihf",
    "armv7-unknown-netbsd-eabihf": "armv7--netbsdelf-eabihf",
    "i586-unknown-linux-musl": "musl",
    "i686-pc-windows-gnu": "i686-w64-mingw32",
    "i686-unknown-linux-musl": "musl",
    "i686-unknown-netbsd": "i486--netbsdelf",
    "mips-unknown-linux-gnu": "mips-linux-gnu",
    "mipsel-unknown-linux-gnu": "mipsel-linux-gnu",
    "mips64-unknown-linux-gnuabi64": "mips64-linux-gnuabi64",
    "mips64el-unknown-linux-gnuabi64": "mips64el-linux-gnuabi64",
    "powerpc-unknown-linux-gnu": "powerpc-linux-gnu",
    "powerpc-unknown-netbsd": "powerpc--netbsd",
    "powerpc64-unknown-linux-gnu": "powerpc-linux-gnu",
    "powerpc64le-unknown-linux-gnu": "powerpc64le-linux-gnu",
    "s390x-unknown-linux-gnu": "s390x-linux-gnu",
    "sparc-unknown-linux-gnu": "sparc-linux-gnu",
    "sparc64-unknown-linux-gnu": "sparc64-linux-gnu",
    "sparc64-unknown-netbsd": "sparc64--netbsd",
    "sparcv9-sun-solaris": "sparcv9-sun-solaris",
    "thumbv6m-none-eabi": "arm-none-eabi",
    "thumbv7em-none-eabi": "arm-none-eabi",
    "thumbv7em-none-eabihf": "arm-none-eabi",
    "thumbv7m-none-eabi": "arm-none-eabi",
    "x86_64-pc-windows-gnu": "x86_64-w64-mingw32",
    "x86_64-rumprun-netbsd": "x86_64-rumprun-netbsd",
    "x86_64-unknown-linux-musl": "musl",
    "x86_64-unknown-netbsd": "x86_64--netbsd",
}


def env_candidates(var: str, target: str, host: str) -> List[str]:
    """
    Environment variable names consulted for a compiler, most specific first.

    Args:
        var: Base variable name ('CC' or 'CXX')
        target: Target triple
        host: Build machine triple

    Returns:
        Variable names in lookup order

    Example:
        >>> env_candidates("CC", "arm-linux-androideabi", "x86_64-unknown-linux-gnu")
        ['CC_arm-linux-androideabi', 'CC_arm_linux_androideabi', 'TARGET_CC', 'CC']
    """
    kind = "HOST" if target == host else "TARGET"
    target_u = target.replace("-", "_")
    return [f"{var}_{target}", f"{var}_{target_u}", f"{kind}_{var}", var]


class DefaultToolchainProber(ToolchainProber):
    """
    Probe for a target's default compiler from the environment and
    platform naming conventions.

    The returned compiler is never checked for existence.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize prober.

        Args:
            environ: Environment to read; defaults to ``os.environ``
        """
        self.environ = os.environ if environ is None else environ

    def probe(
        self, target: str, host: str, language: Language, static_crt: bool = False
    ) -> str:
        from_env = self._from_environment(target, host, language)
        if from_env is not None:
            return from_env

        compiler = self._platform_default(target, host, language)
        logger.debug(f"Default {language.env_var} for {target}: {compiler}")
        return compiler

    def _from_environment(
        self, target: str, host: str, language: Language
    ) -> Optional[str]:
        for name in env_candidates(language.env_var, target, host):
            value = self.environ.get(name)
            if value:
                logger.debug(f"Using {name}={value} for {target}")
                return value
        return None

    def _platform_default(self, target: str, host: str, language: Language) -> str:
        if "msvc" in target:
            return language.msvc
        if "emscripten" in target:
            return language.emscripten
        if "android" in target:
            return f"{target.replace('armv7', 'arm')}-{language.gcc}"
        if target != host:
            prefix = CROSS_PREFIXES.get(target)
            if prefix is not None:
                return f"{prefix}-{language.gcc}"
        if "solaris" in host or "openbsd" in host:
            return language.gcc
        return language.traditional
