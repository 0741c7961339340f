"""
Targets command implementation.

Shows which triples get a C compiler and which also get a C++ compiler.
"""

from ccresolve.cli.utils import context_from_args
from ccresolve.toolchain.targets import c_targets, cxx_targets


def run(args) -> int:
    """
    Run the targets command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    context = context_from_args(args)
    if context is None:
        return 1

    print(f"Build: {context.build}")
    print("C targets:")
    for target in c_targets(context.targets, context.hosts, context.build):
        print(f"  {target}")
    print("C++ targets:")
    for host in cxx_targets(context.hosts, context.build):
        print(f"  {host}")

    return 0
