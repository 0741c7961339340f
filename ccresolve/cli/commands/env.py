"""
Env command implementation.

Prints shell exports so other tools see the resolved toolchain.
"""

import logging
import shlex

from ccresolve.cli.utils import context_from_args
from ccresolve.toolchain.resolver import find

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the env command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if --only names an unresolved triple)
    """
    context = context_from_args(args)
    if context is None:
        return 1

    result = find(context)

    if args.only:
        if args.only not in result.cc:
            logger.error(f"Triple is not part of this build: {args.only}")
            return 1
        targets = [args.only]
    else:
        targets = sorted(result.cc)

    for target in targets:
        for name, value in result.env_for(target).items():
            print(f"export {name}={shlex.quote(value)}")

    return 0
