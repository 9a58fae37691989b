"""Create a project by cloning a starter from a git host."""

import logging
import shutil
from pathlib import Path

from .installer import install_dependencies
from .protocols import CommandRunner
from .sources import HostedGitSource

logger = logging.getLogger(__name__)


def clone_command(source: HostedGitSource, root_path: str | Path) -> list[str]:
    """Build the ``git clone`` invocation for source.

    Only the requested branch or tag is fetched when the source names one.
    URL and target follow ``--`` so a target starting with ``-`` stays positional.
    """
    branch = ["-b", source.committish] if source.committish else []
    return ["git", "clone", *branch, "--single-branch", "--", source.clone_url, str(root_path)]


async def clone_starter(
    source: HostedGitSource,
    root_path: str | Path,
    use_pnp: bool,
    runner: CommandRunner,
) -> None:
    """
    Clone a hosted starter into root_path and install its dependencies.

    The clone's ``.git`` directory is removed so the new project starts
    without the starter's history. Not atomic: if installation fails the
    cloned files stay in place.

    Args:
        source: Hosted git starter
        root_path: Target directory (git creates it)
        use_pnp: Resolved Plug'n'Play flag
        runner: Command runner for git and the package manager

    Raises:
        StarterProcessError: If git or the install command fails
    """
    logger.info(f"Creating new project from git: {source.clone_url}")

    await runner.run(clone_command(source, root_path))

    logger.info("Created starter directory layout")

    git_dir = Path(root_path) / ".git"
    if git_dir.exists():
        shutil.rmtree(git_dir)
        logger.debug(f"Removed {git_dir}")

    await install_dependencies(root_path, use_pnp, runner)
