"""Entry point: create a new project from a starter.

Validates the target, resolves Plug'n'Play, classifies the starter and hands
off to the cloner or the copier.
"""

import logging
import os

from pydantic import BaseModel
from pydantic import ConfigDict

from .cloner import clone_starter
from .copier import copy_starter
from .exceptions import StarterValidationError
from .package_manager import resolve_use_pnp
from .protocols import CommandRunner
from .runner import SubprocessRunner
from .sources import HostedGitSource
from .sources import classify_source
from .utils import has_manifest
from .utils import looks_like_url

logger = logging.getLogger(__name__)


class InitOptions(BaseModel):
    """Caller-supplied options for create_project."""

    model_config = ConfigDict(frozen=True)

    # Kept as str: Path() would collapse "https://" and hide a URL mistake
    root_path: str | None = None


async def create_project(
    starter: str,
    options: InitOptions | None = None,
    use_pnp: bool = False,
    runner: CommandRunner | None = None,
) -> None:
    """
    Create a new project from a starter (hosted git repository or local directory).

    Process:
    1. Validate target path (not a URL, not already an npm project)
    2. Resolve Plug'n'Play against the installed yarn
    3. Classify starter and clone or copy it
    4. Install dependencies

    Args:
        starter: Hosted git reference (``user/repo``, git URL) or local path
        options: Target options; root_path defaults to the current directory
        use_pnp: Request Plug'n'Play install (needs yarn >= 1.12)
        runner: Command runner (defaults to SubprocessRunner)

    Raises:
        StarterValidationError: If the target or starter is rejected
        StarterProcessError: If git or the package manager fails
        OSError: If filesystem operations fail

    Example:
        >>> await create_project(
        ...     "gatsbyjs/gatsby-starter-blog",
        ...     InitOptions(root_path="my-blog"),
        ... )
    """
    options = options or InitOptions()
    runner = runner or SubprocessRunner()
    root_path = options.root_path or os.getcwd()

    if looks_like_url(root_path):
        raise StarterValidationError(
            "It looks like you forgot to add a name for your new project. "
            f'Try running instead "new my-project {root_path}"',
            context={"root_path": root_path},
        )

    if has_manifest(root_path):
        raise StarterValidationError(
            f"Directory {root_path} is already an npm project",
            context={"root_path": root_path},
        )

    use_pnp = await resolve_use_pnp(runner, use_pnp)

    source = classify_source(starter)
    if isinstance(source, HostedGitSource):
        await clone_starter(source, root_path, use_pnp, runner)
    else:
        await copy_starter(source, root_path, use_pnp, runner)
