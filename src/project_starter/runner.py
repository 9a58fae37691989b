"""Child-process execution backed by asyncio."""

import asyncio
import logging
from collections.abc import Sequence

from .exceptions import StarterProcessError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """CommandRunner that starts real child processes.

    One process at a time; each call waits for the child to exit. There is no
    timeout, so a hung child blocks the caller.
    """

    async def _spawn(self, command: list[str], **kwargs) -> asyncio.subprocess.Process:
        try:
            return await asyncio.create_subprocess_exec(*command, **kwargs)
        except OSError as e:
            raise StarterProcessError(
                f"Could not start {command[0]}: {e}",
                command=command,
                context={"error": str(e)},
            ) from e

    async def run(self, args: Sequence[str]) -> None:
        command = list(args)
        cmd_str = " ".join(command)
        logger.debug(f"Running: {cmd_str}")

        process = await self._spawn(command)
        returncode = await process.wait()

        if returncode != 0:
            raise StarterProcessError(
                f"Command failed (exit {returncode}): {cmd_str}",
                command=command,
                returncode=returncode,
            )

    async def capture(self, args: Sequence[str]) -> str:
        command = list(args)
        cmd_str = " ".join(command)
        logger.debug(f"Capturing: {cmd_str}")

        process = await self._spawn(
            command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.DEVNULL,
        )
        stdout_bytes, _ = await process.communicate()

        if process.returncode != 0:
            raise StarterProcessError(
                f"Command failed (exit {process.returncode}): {cmd_str}",
                command=command,
                returncode=process.returncode,
            )

        return stdout_bytes.decode("utf-8", errors="replace").strip()
