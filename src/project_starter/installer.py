"""Dependency installation for a freshly created starter.

Runs ``yarnpkg`` (optionally with Plug'n'Play) or ``npm install`` inside the
target directory. The caller's working directory is always restored.
"""

import logging
import time
from pathlib import Path

from .package_manager import install_command
from .package_manager import should_use_yarn
from .protocols import CommandRunner
from .utils import working_directory

logger = logging.getLogger(__name__)


async def install_dependencies(root_path: str | Path, use_pnp: bool, runner: CommandRunner) -> None:
    """
    Install Node dependencies in root_path.

    Process:
    1. Switch into root_path (scoped, restored on every exit path)
    2. Pick yarnpkg if available, npm otherwise
    3. Run the install with inherited standard streams
    4. Log how long it took

    Args:
        root_path: Project directory containing package.json
        use_pnp: Already-resolved Plug'n'Play flag (see resolve_use_pnp)
        runner: Command runner for probing and installing

    Raises:
        StarterProcessError: If the install command fails
        OSError: If root_path cannot be entered

    Example:
        >>> await install_dependencies(Path("my-site"), use_pnp=False, runner=SubprocessRunner())
    """
    logger.info("Installing packages...")
    done_text = "Using Plug'n'Play took" if use_pnp else "Installing node modules took"

    with working_directory(root_path):
        start = time.monotonic()
        command = install_command(await should_use_yarn(runner), use_pnp)
        logger.debug(f"Install command: {' '.join(command)}")
        await runner.run(command)
        elapsed = time.monotonic() - start
        logger.info(f"{done_text} {elapsed:.2f} seconds")
