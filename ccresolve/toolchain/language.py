"""
Source languages a native compiler is resolved for.
"""

from enum import Enum


class Language(Enum):
    """The target programming language for a native compiler."""

    C = "c"
    CPLUSPLUS = "c++"

    @property
    def gcc(self) -> str:
        """Name of the compiler in the GCC collection."""
        return "gcc" if self is Language.C else "g++"

    @property
    def clang(self) -> str:
        """Name of the compiler in the clang suite."""
        return "clang" if self is Language.C else "clang++"

    @property
    def traditional(self) -> str:
        """Name of the system's default compiler driver."""
        return "cc" if self is Language.C else "c++"

    @property
    def emscripten(self) -> str:
        return "emcc" if self is Language.C else "em++"

    @property
    def msvc(self) -> str:
        # cl.exe compiles both languages
        return "cl.exe"

    @property
    def env_var(self) -> str:
        """Environment variable naming a compiler for this language."""
        return "CC" if self is Language.C else "CXX"
