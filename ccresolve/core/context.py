"""
Build context and per-target overrides.

The build context is the read-only input of a resolution pass: the build
machine's own triple, the configured target and host triples, the per-target
overrides from configuration and the process environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class TargetOverride:
    """
    Explicit per-target toolchain configuration.

    Tool entries are kept as the exact strings that were configured.

    Attributes:
        cc: C compiler to use verbatim
        cxx: C++ compiler to use verbatim
        ar: Archiver to use verbatim
        ndk: Android NDK root directory (compilers live under ``<ndk>/bin``)
        musl_root: musl installation root for this target
    """

    cc: Optional[str] = None
    cxx: Optional[str] = None
    ar: Optional[str] = None
    ndk: Optional[Path] = None
    musl_root: Optional[Path] = None


@dataclass(frozen=True)
class BuildContext:
    """
    Process-wide inputs consumed read-only by compiler resolution.

    Attributes:
        build: Triple of the machine running the build
        targets: Triples artifacts are produced for
        hosts: Triples the produced tools will run on
        overrides: Per-target configuration keyed by exact triple
        musl_root: Global musl installation root, used when a target has none
        environ: Environment variables; ``None`` means ``os.environ``
    """

    build: str
    targets: Tuple[str, ...] = ()
    hosts: Tuple[str, ...] = ()
    overrides: Mapping[str, TargetOverride] = field(default_factory=dict)
    musl_root: Optional[Path] = None
    environ: Optional[Mapping[str, str]] = None

    def override_for(self, target: str) -> Optional[TargetOverride]:
        """Return the override record configured for ``target``, if any."""
        return self.overrides.get(target)

    def env(self) -> Mapping[str, str]:
        """Return the environment used for variable lookups."""
        return os.environ if self.environ is None else self.environ

    def musl_root_for(self, target: str) -> Optional[Path]:
        """
        Locate the musl installation root for a target.

        The per-target ``musl_root`` wins over the global one.

        Args:
            target: Target triple

        Returns:
            musl root directory or None if nothing is configured
        """
        override = self.override_for(target)
        if override is not None and override.musl_root is not None:
            return override.musl_root
        return self.musl_root
