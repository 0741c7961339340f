"""
Target set construction.

Every target needs a C compiler (for shims and as a linker), every host
additionally needs a C++ compiler. The build machine always belongs to both
sets. Sets are returned sorted so resolution logs are reproducible.
"""

from typing import Iterable, List


def c_targets(targets: Iterable[str], hosts: Iterable[str], build: str) -> List[str]:
    """
    Triples that need a C compiler: targets, hosts and the build triple.

    Args:
        targets: Configured target triples
        hosts: Configured host triples
        build: Build machine triple

    Returns:
        Sorted list of distinct triples (never empty)
    """
    return sorted({*targets, *hosts, build})


def cxx_targets(hosts: Iterable[str], build: str) -> List[str]:
    """
    Triples that need a C++ compiler: hosts and the build triple.

    Args:
        hosts: Configured host triples
        build: Build machine triple

    Returns:
        Sorted list of distinct triples (never empty)
    """
    return sorted({*hosts, build})
