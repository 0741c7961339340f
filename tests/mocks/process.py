"""
Mock process execution for testing.

FakeRunner stands in for SubprocessRunner so quirk rules can be tested
without any compiler installed.
"""

from typing import Dict, List, Optional, Set

from ccresolve.core.interfaces import CommandRunner


class FakeRunner(CommandRunner):
    """Command runner with canned outputs that records every call."""

    def __init__(
        self,
        outputs: Optional[Dict[str, Optional[str]]] = None,
        launchable: Optional[Set[str]] = None,
    ):
        """
        Initialize runner.

        Args:
            outputs: Program -> output of ``output()``; missing means failure
            launchable: Programs for which ``launches()`` succeeds
        """
        self.outputs = outputs or {}
        self.launchable = launchable or set()
        self.calls: List[List[str]] = []

    def output(self, args: List[str]) -> Optional[str]:
        self.calls.append(list(args))
        return self.outputs.get(args[0])

    def launches(self, args: List[str]) -> bool:
        self.calls.append(list(args))
        return args[0] in self.launchable
