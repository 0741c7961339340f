"""
Core interfaces for ccresolve.

The resolver depends on two collaborators it does not own: something that
produces an initial best-guess compiler for a bare target, and something that
launches processes. Both are abstract here so callers and tests can supply
their own.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ccresolve.toolchain.language import Language


class ToolchainProber(ABC):
    """
    Abstract interface for default compiler probing.

    Given only a target and host triple, a prober returns the compiler a build
    would use if nothing was configured for the target.
    """

    @abstractmethod
    def probe(
        self,
        target: str,
        host: str,
        language: "Language",
        static_crt: bool = False,
    ) -> str:
        """
        Produce an initial compiler selection.

        Args:
            target: Target triple
            host: Build machine triple
            language: Language the compiler is needed for
            static_crt: Whether an MSVC target links the runtime statically

        Returns:
            Compiler executable path or bare name (never empty)
        """
        pass


class CommandRunner(ABC):
    """
    Abstract interface for launching external processes.

    Quirk rules only need two things from a process: its combined output, and
    whether it could be launched at all.
    """

    @abstractmethod
    def output(self, args: List[str]) -> Optional[str]:
        """
        Run a command and capture its output.

        Args:
            args: Program and arguments

        Returns:
            Combined stdout and stderr, or None if the command could not be
            launched or exited unsuccessfully
        """
        pass

    @abstractmethod
    def launches(self, args: List[str]) -> bool:
        """
        Check whether a command can be launched.

        Args:
            args: Program and arguments

        Returns:
            True if the process started, regardless of its exit status
        """
        pass
