"""project-starter - Create a new project from a git-hosted or local starter.

Public API: classify a starter, clone or copy it, install its dependencies.
Process execution is injected through CommandRunner so apps and tests can
control it.
"""

from .cloner import clone_starter
from .copier import copy_starter
from .create import InitOptions
from .create import create_project
from .exceptions import StarterError
from .exceptions import StarterNotFoundError
from .exceptions import StarterProcessError
from .exceptions import StarterValidationError
from .installer import install_dependencies
from .package_manager import YarnInfo
from .package_manager import check_yarn_version
from .package_manager import resolve_use_pnp
from .package_manager import should_use_yarn
from .protocols import CommandRunner
from .runner import SubprocessRunner
from .sources import HostedGitSource
from .sources import LocalPathSource
from .sources import StarterSource
from .sources import classify_source
from .utils import working_directory

__all__ = [
    # Entry point
    "create_project",
    "InitOptions",
    # Sources
    "classify_source",
    "HostedGitSource",
    "LocalPathSource",
    "StarterSource",
    # Steps
    "clone_starter",
    "copy_starter",
    "install_dependencies",
    # Package manager
    "should_use_yarn",
    "check_yarn_version",
    "resolve_use_pnp",
    "YarnInfo",
    # Process execution
    "CommandRunner",
    "SubprocessRunner",
    # Utilities
    "working_directory",
    # Exceptions
    "StarterError",
    "StarterNotFoundError",
    "StarterProcessError",
    "StarterValidationError",
]

__version__ = "0.1.0"
