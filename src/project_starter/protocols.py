"""Protocols for running external commands.

git, yarnpkg and npm are opaque collaborators. Everything that starts a child
process goes through a CommandRunner, so apps and tests can supply their own.
"""

from collections.abc import Sequence
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for executing external commands.

    Implementations:
    - SubprocessRunner: real child processes via asyncio
    - Test fakes that record commands instead of running them
    """

    async def run(self, args: Sequence[str]) -> None:
        """Run a command attached to the controlling terminal.

        Standard streams are inherited. Returns once the process exits.

        Args:
            args: Program and arguments

        Raises:
            StarterProcessError: If the process exits non-zero or cannot be started
        """
        ...

    async def capture(self, args: Sequence[str]) -> str:
        """Run a command and return its standard output.

        Args:
            args: Program and arguments

        Returns:
            Stripped stdout text (stderr is discarded)

        Raises:
            StarterProcessError: If the process exits non-zero or cannot be started
        """
        ...
