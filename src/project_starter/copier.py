"""Create a project by copying a starter from the local filesystem."""

import logging
import shutil
from pathlib import Path

from .exceptions import StarterNotFoundError
from .exceptions import StarterValidationError
from .installer import install_dependencies
from .protocols import CommandRunner
from .sources import LocalPathSource

logger = logging.getLogger(__name__)

IGNORED_DIRS = frozenset({".git", ".hg"})

CURRENT_DIR_MESSAGE = (
    "You can't create a starter from the existing directory. If you want to "
    "create a new project in the current directory, the trailing dot isn't "
    "necessary. If you want to create a new project from a local starter, run "
    'something like "new my-site ../my-starter"'
)


def _ignore_vcs_dirs(directory: str, names: list[str]) -> set[str]:
    """shutil.copytree ignore hook: skip version-control directories."""
    return {name for name in names if name in IGNORED_DIRS and (Path(directory) / name).is_dir()}


async def copy_starter(
    source: LocalPathSource,
    root_path: str | Path,
    use_pnp: bool,
    runner: CommandRunner,
) -> bool:
    """
    Copy a local starter into root_path and install its dependencies.

    Validation happens before anything is written.

    Args:
        source: Local starter directory
        root_path: Target directory (created with mode 0o755 if missing)
        use_pnp: Resolved Plug'n'Play flag
        runner: Command runner for the package manager

    Returns:
        True once the starter is copied and installed

    Raises:
        StarterNotFoundError: If the starter path does not exist
        StarterValidationError: If the starter path is "." or contains root_path
        StarterProcessError: If the install command fails
        OSError: If creating or copying files fails
    """
    starter_path = Path(source.path)

    if not starter_path.exists():
        raise StarterNotFoundError(
            f"starter {source.path} doesn't exist",
            context={"starter": source.path},
        )

    if source.path == ".":
        raise StarterValidationError(CURRENT_DIR_MESSAGE, context={"starter": source.path})

    target = Path(root_path)
    if target.resolve().is_relative_to(starter_path.resolve()):
        raise StarterValidationError(
            f"Cannot copy {source.path} to a subdirectory of itself, {target}",
            context={"starter": source.path, "root_path": str(target)},
        )

    target.mkdir(mode=0o755, parents=True, exist_ok=True)

    logger.info(f"Creating new project from local starter: {source.path}")
    logger.info(f"Copying local starter to {target} ...")

    shutil.copytree(starter_path, target, ignore=_ignore_vcs_dirs, dirs_exist_ok=True)

    logger.info("Created starter directory layout")

    await install_dependencies(target, use_pnp, runner)

    return True
