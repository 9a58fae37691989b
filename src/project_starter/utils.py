"""Small helpers shared by the cloner, copier and installer."""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"


@contextmanager
def working_directory(path: str | Path) -> Iterator[Path]:
    """Temporarily switch the process working directory.

    The previous directory is restored when the block exits, whether it
    returns normally or raises.

    Args:
        path: Directory to switch into

    Yields:
        The directory that was current before the switch

    Example:
        >>> with working_directory("my-site"):
        ...     subprocess.run(["npm", "install"], check=True)
    """
    previous = Path.cwd()
    os.chdir(path)
    logger.debug(f"Changed working directory to {path}")
    try:
        yield previous
    finally:
        os.chdir(previous)
        logger.debug(f"Restored working directory to {previous}")


def looks_like_url(value: str) -> bool:
    """True if value parses as an absolute URL (has both scheme and host).

    Examples:
        >>> looks_like_url("https://github.com/org/starter")
        True
        >>> looks_like_url("my-site")
        False
    """
    parts = urlsplit(value)
    return bool(parts.scheme and parts.netloc)


def has_manifest(root_path: str | Path) -> bool:
    """True if root_path already holds a package manifest."""
    return (Path(root_path) / MANIFEST_FILE).exists()
