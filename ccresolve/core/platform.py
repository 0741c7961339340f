"""
Build machine triple detection for ccresolve.

The resolver needs the build machine's own triple both as a member of every
target set and as the host passed to the default toolchain prober. When the
configuration does not name one, it is derived from the running interpreter's
platform.

Usage:
    from ccresolve.core.platform import detect_build_triple

    build = detect_build_triple()
    print(build)  # e.g. 'x86_64-unknown-linux-gnu'
"""

import functools
import logging
import platform
import subprocess

from ccresolve.core.exceptions import UnsupportedPlatformError

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def detect_build_triple() -> str:
    """
    Detect the triple of the machine running the build.

    This function is cached - it only runs detection once per process.

    Returns:
        Triple such as 'x86_64-unknown-linux-gnu' or 'aarch64-apple-darwin'

    Raises:
        UnsupportedPlatformError: If the operating system is not recognized

    Example:
        >>> detect_build_triple()
        'x86_64-unknown-linux-gnu'
    """
    system = platform.system().lower()
    arch = _detect_architecture()

    if system == "linux":
        if "android" in platform.platform().lower():
            triple = f"{arch}-linux-android"
        else:
            triple = f"{arch}-unknown-linux-{_detect_linux_abi()}"
    elif system == "darwin":
        triple = f"{arch}-apple-darwin"
    elif system == "windows":
        triple = f"{arch}-pc-windows-msvc"
    elif system in ("freebsd", "openbsd", "netbsd", "dragonfly"):
        triple = f"{arch}-unknown-{system}"
    elif system == "sunos":
        triple = f"{arch}-sun-solaris"
    else:
        raise UnsupportedPlatformError(system, platform.machine())

    logger.debug(f"Detected build triple: {triple}")
    return triple


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Architecture component of a triple: 'x86_64', 'aarch64', 'i686', ...
    """
    machine = platform.machine().lower()

    # Normalize architecture names
    if machine in ("x86_64", "amd64", "x64"):
        return "x86_64"
    elif machine in ("aarch64", "arm64"):
        return "aarch64"
    elif machine in ("i386", "i486", "i586", "i686", "x86"):
        return "i686"
    elif machine.startswith("armv7"):
        return "armv7"
    elif machine.startswith("arm"):
        return "arm"
    else:
        # Return original for unknown architectures (riscv64, mips, ...)
        return machine


def _detect_linux_abi() -> str:
    """
    Detect the Linux C library flavour.

    Returns:
        'musl' when ldd reports musl, otherwise 'gnu'
    """
    try:
        result = subprocess.run(
            ["ldd", "--version"], capture_output=True, text=True, timeout=5
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Could not run ldd to detect libc: {e}")
        return "gnu"

    output = result.stdout.lower() + result.stderr.lower()
    if "musl" in output:
        return "musl"
    return "gnu"


def clear_platform_cache():
    """
    Clear the build triple detection cache.

    This forces the next call to detect_build_triple() to re-detect.
    Useful for testing.
    """
    detect_build_triple.cache_clear()


__all__ = [
    "detect_build_triple",
    "clear_platform_cache",
]
