"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
eliminate duplication and ensure consistent behavior.
"""

import dataclasses
import logging
from typing import Optional

from ccresolve.config.parser import load_context
from ccresolve.core.context import BuildContext
from ccresolve.core.exceptions import CCResolveError

logger = logging.getLogger(__name__)


def context_from_args(args) -> Optional[BuildContext]:
    """
    Build the BuildContext for a command.

    Triples given with --target/--host are added to the configured ones.

    Args:
        args: Parsed arguments with config, build, targets and hosts

    Returns:
        BuildContext, or None if the configuration could not be loaded
        (the error has already been logged)
    """
    try:
        context = load_context(
            args.config, build=args.build, required=args.config is not None
        )
    except CCResolveError as e:
        logger.error(f"Error: {e}")
        return None

    extra_targets = tuple(getattr(args, "targets", None) or ())
    extra_hosts = tuple(getattr(args, "hosts", None) or ())
    if extra_targets or extra_hosts:
        context = dataclasses.replace(
            context,
            targets=context.targets + extra_targets,
            hosts=context.hosts + extra_hosts,
        )
    return context
