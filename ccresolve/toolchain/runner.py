"""
Subprocess-backed command runner.

Used by the quirk rules to query compiler versions and to test whether an
alternate compiler binary can be launched.
"""

import logging
import subprocess
from typing import List, Optional

from ccresolve.core.interfaces import CommandRunner

logger = logging.getLogger(__name__)


class SubprocessRunner(CommandRunner):
    """Run commands with :func:`subprocess.run`."""

    def output(self, args: List[str]) -> Optional[str]:
        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"Failed to run {args[0]}: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"{' '.join(args)} returned {result.returncode}")
            return None

        return result.stdout + result.stderr

    def launches(self, args: List[str]) -> bool:
        try:
            subprocess.run(
                args,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"Could not launch {args[0]}: {e}")
            return False
        return True
