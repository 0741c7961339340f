"""
Resolve command implementation.

Resolves the C compiler, C++ compiler and archiver of every target and
prints the result.
"""

import json
import logging

import yaml

from ccresolve.cli.utils import context_from_args
from ccresolve.toolchain.resolver import ResolutionResult, find

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the resolve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    context = context_from_args(args)
    if context is None:
        return 1

    logger.debug(f"Build triple: {context.build}")
    result = find(context, jobs=max(1, args.jobs))

    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2))
    elif args.format == "yaml":
        print(yaml.safe_dump(result.to_dict(), sort_keys=True), end="")
    else:
        print(format_text(result))

    return 0


def format_text(result: ResolutionResult) -> str:
    """
    Render a resolution result as aligned text.

    Args:
        result: Resolution result

    Returns:
        One line per target and tool
    """
    lines = []
    width = max(len(t) for t in result.cc) if result.cc else 0
    for target in sorted(result.cc):
        lines.append(f"{target:<{width}}  CC   {result.cc[target].path}")
        if target in result.cxx:
            lines.append(f"{target:<{width}}  CXX  {result.cxx[target].path}")
        ar = result.ar.get(target)
        lines.append(f"{target:<{width}}  AR   {ar if ar is not None else '(none)'}")
    return "\n".join(lines)
