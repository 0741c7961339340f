"""
ccresolve/toolchain/resolver.py

Compiler resolution - fills the C, C++ and archiver maps for a build.

A compiler is found through a number of vectors, in order of precedence:

1. ``cc``/``cxx`` configured for the target (used verbatim, never corrected)
2. The default toolchain prober (environment variables, platform naming)
   followed by the platform quirk rules

Every target, host and the build machine gets a C compiler and an archiver.
Hosts and the build machine additionally get a C++ compiler. After a
resolution pass no compiler should ever be probed for again; downstream
build steps use the maps produced here.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ccresolve.core.context import BuildContext
from ccresolve.core.interfaces import CommandRunner, ToolchainProber
from ccresolve.toolchain.archiver import resolve_archiver
from ccresolve.toolchain.language import Language
from ccresolve.toolchain.prober import DefaultToolchainProber
from ccresolve.toolchain.quirks import QuirkResolver
from ccresolve.toolchain.targets import c_targets, cxx_targets

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ResolvedCompiler:
    """
    A compiler selected for one target and language.

    Attributes:
        target: Target triple the compiler produces code for
        language: Language the compiler was resolved for
        path: Compiler executable path or bare name (searched in PATH),
            kept exactly as configured or probed
        opt_level: Optimization level used for shims
        warnings: Whether warnings are enabled
        debug: Whether debug info is emitted
        static_crt: Whether an MSVC runtime is linked statically
    """

    target: str
    language: Language
    path: str
    opt_level: int = 0
    warnings: bool = False
    debug: bool = False
    static_crt: bool = False

    @property
    def is_msvc(self) -> bool:
        """Whether the target uses the MSVC toolchain family."""
        return "msvc" in self.target

    def args(self) -> List[str]:
        """
        Command-line flags implied by the fixed build settings.

        Returns:
            Flags in the compiler family's syntax
        """
        if self.is_msvc:
            args = ["-nologo", "-MT" if self.static_crt else "-MD"]
            args.append("-Od" if self.opt_level == 0 else f"-O{self.opt_level}")
            if self.debug:
                args.append("-Z7")
            if not self.warnings:
                args.append("-W0")
            return args

        args = [f"-O{self.opt_level}"]
        if self.debug:
            args.append("-g")
        if self.warnings:
            args.extend(["-Wall", "-Wextra"])
        return args

    def __str__(self) -> str:
        return self.path


@dataclass
class ResolutionResult:
    """
    Output of a resolution pass.

    Attributes:
        cc: C compiler per target
        cxx: C++ compiler per host
        ar: Archiver per target; None means the toolchain needs none
    """

    cc: Dict[str, ResolvedCompiler] = field(default_factory=dict)
    cxx: Dict[str, ResolvedCompiler] = field(default_factory=dict)
    ar: Dict[str, Optional[str]] = field(default_factory=dict)

    def env_for(self, target: str) -> Dict[str, str]:
        """
        Environment variables describing a target's toolchain.

        Args:
            target: Target triple

        Returns:
            ``CC_<target>``, ``CXX_<target>`` and ``AR_<target>`` entries for
            whatever was resolved; empty if nothing was
        """
        target_u = target.replace("-", "_")
        env = {}
        if target in self.cc:
            env[f"CC_{target_u}"] = self.cc[target].path
        if target in self.cxx:
            env[f"CXX_{target_u}"] = self.cxx[target].path
        if self.ar.get(target) is not None:
            env[f"AR_{target_u}"] = self.ar[target]
        return env

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to plain data for JSON/YAML output.

        Returns:
            Dictionary with 'cc', 'cxx' and 'ar' sections keyed by target
        """

        def compiler_entry(compiler: ResolvedCompiler) -> Dict[str, Any]:
            return {"path": compiler.path, "args": compiler.args()}

        return {
            "cc": {t: compiler_entry(c) for t, c in sorted(self.cc.items())},
            "cxx": {t: compiler_entry(c) for t, c in sorted(self.cxx.items())},
            "ar": dict(sorted(self.ar.items())),
        }


class CompilerResolver:
    """
    Resolve compilers for individual targets.

    Args:
        context: Build context (build triple, overrides, environment)
        prober: Default toolchain prober; reads ``context`` env by default
        runner: Process runner used by the quirk rules
    """

    def __init__(
        self,
        context: BuildContext,
        prober: Optional[ToolchainProber] = None,
        runner: Optional[CommandRunner] = None,
    ):
        self.context = context
        self.prober = prober or DefaultToolchainProber(context.environ)
        self.quirks = QuirkResolver(context, runner)

    def resolve(self, target: str, language: Language) -> ResolvedCompiler:
        """
        Resolve the compiler for one target and language.

        Never fails: if nothing better is known the prober's guess is used.

        Args:
            target: Target triple
            language: Language to resolve for

        Returns:
            Resolved compiler with fixed build settings attached
        """
        static_crt = "msvc" in target
        override = self.context.override_for(target)
        explicit = None
        if override is not None:
            explicit = override.cc if language is Language.C else override.cxx

        if explicit is not None:
            path = explicit
        else:
            initial = self.prober.probe(
                target, self.context.build, language, static_crt=static_crt
            )
            path = self.quirks.resolve(initial, target, override, language)

        return ResolvedCompiler(
            target=target, language=language, path=path, static_crt=static_crt
        )

    def resolve_archiver(self, compiler: ResolvedCompiler) -> Optional[str]:
        """Resolve the archiver paired with a resolved C compiler."""
        return resolve_archiver(
            compiler.path,
            compiler.target,
            self.context.override_for(compiler.target),
            self.context.env(),
        )


def _map_targets(func: Callable[[str], T], targets: List[str], jobs: int) -> List[T]:
    if jobs <= 1 or len(targets) <= 1:
        return [func(t) for t in targets]
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        return list(pool.map(func, targets))


def find(
    context: BuildContext,
    prober: Optional[ToolchainProber] = None,
    runner: Optional[CommandRunner] = None,
    jobs: int = 1,
) -> ResolutionResult:
    """
    Resolve C, C++ and archiver maps for a build.

    Args:
        context: Build context
        prober: Default toolchain prober override
        runner: Process runner override
        jobs: Number of worker threads used for per-target resolution

    Returns:
        ResolutionResult with every target's compilers and archiver

    Example:
        >>> ctx = BuildContext(build="x86_64-unknown-linux-gnu")
        >>> result = find(ctx)
        >>> sorted(result.cc)
        ['x86_64-unknown-linux-gnu']
    """
    resolver = CompilerResolver(context, prober, runner)
    result = ResolutionResult()

    def resolve_c(target: str):
        compiler = resolver.resolve(target, Language.C)
        return compiler, resolver.resolve_archiver(compiler)

    targets = c_targets(context.targets, context.hosts, context.build)
    for target, (compiler, ar) in zip(
        targets, _map_targets(resolve_c, targets, jobs)
    ):
        logger.debug(f"CC_{target} = {compiler.path}")
        result.cc[target] = compiler
        if ar is not None:
            logger.debug(f"AR_{target} = {ar}")
        result.ar[target] = ar

    hosts = cxx_targets(context.hosts, context.build)
    for host, compiler in zip(
        hosts,
        _map_targets(lambda h: resolver.resolve(h, Language.CPLUSPLUS), hosts, jobs),
    ):
        logger.debug(f"CXX_{host} = {compiler.path}")
        result.cxx[host] = compiler

    logger.info(
        f"Resolved {len(result.cc)} C compiler(s) and "
        f"{len(result.cxx)} C++ compiler(s)"
    )
    return result
