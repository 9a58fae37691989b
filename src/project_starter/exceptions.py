"""Starter-specific exceptions.

Messages are shown to users as-is, so they say what went wrong and what to try.
"""


class StarterError(Exception):
    """Base exception for starter operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (paths, sources, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class StarterValidationError(StarterError):
    """Target or source rejected before any work was done."""


class StarterNotFoundError(StarterValidationError):
    """Local starter path does not exist."""


class StarterProcessError(StarterError):
    """A child process (git, yarnpkg, npm) failed."""

    def __init__(
        self,
        message: str,
        command: list[str],
        returncode: int | None = None,
        context: dict | None = None,
    ):
        """Initialize with the failed command.

        Args:
            message: Human-readable error message
            command: Argument list that was executed
            returncode: Exit status, or None if the program could not be started
            context: Optional dict with additional context
        """
        super().__init__(message, context=context)
        self.command = command
        self.returncode = returncode
