"""Package-manager selection.

yarn is preferred when installed. It is invoked as ``yarnpkg`` rather than
``yarn`` because Hadoop ships a ``yarn`` binary too
(https://github.com/yarnpkg/yarn/issues/673).

Plug'n'Play installs need yarn 1.12.0 or newer; anything else silently
falls back to a regular install, with a warning for the user.
"""

import logging
import re

from pydantic import BaseModel
from pydantic import ConfigDict

from .exceptions import StarterProcessError
from .protocols import CommandRunner

logger = logging.getLogger(__name__)

YARN = "yarnpkg"
NPM = "npm"
PNP_FLAG = "--enable-pnp"
MIN_PNP_VERSION = (1, 12, 0)

_SUFFIX_RE = re.compile(r"^(.+?)[-+].+$")


class YarnInfo(BaseModel):
    """Detected yarn version and whether it supports Plug'n'Play."""

    model_config = ConfigDict(frozen=True)

    version: str | None = None
    has_min_pnp: bool = False


def parse_version(text: str) -> tuple[int, ...] | None:
    """Parse a version string into integer components.

    Pre-release and build suffixes are dropped before parsing.

    Examples:
        >>> parse_version("1.22.19")
        (1, 22, 19)
        >>> parse_version("1.13.0-rc.1")
        (1, 13, 0)
        >>> parse_version("berry") is None
        True
    """
    text = text.strip()
    match = _SUFFIX_RE.match(text)
    if match:
        text = match.group(1)
    try:
        return tuple(int(part) for part in text.split("."))
    except ValueError:
        return None


async def should_use_yarn(runner: CommandRunner) -> bool:
    """True if ``yarnpkg --version`` runs successfully."""
    try:
        await runner.capture([YARN, "--version"])
    except StarterProcessError:
        return False
    return True


async def check_yarn_version(runner: CommandRunner) -> YarnInfo:
    """Probe yarn's version and compare it with MIN_PNP_VERSION.

    Args:
        runner: Command runner used for the probe

    Returns:
        YarnInfo; version is None if yarn could not be queried
    """
    try:
        version = await runner.capture([YARN, "--version"])
    except StarterProcessError:
        return YarnInfo()

    parsed = parse_version(version)
    has_min_pnp = parsed is not None and parsed >= MIN_PNP_VERSION
    logger.debug(f"Detected yarn {version} (Plug'n'Play supported: {has_min_pnp})")
    return YarnInfo(version=version or None, has_min_pnp=has_min_pnp)


async def resolve_use_pnp(runner: CommandRunner, use_pnp: bool) -> bool:
    """Decide whether Plug'n'Play can actually be used.

    Args:
        runner: Command runner used for probing yarn
        use_pnp: Whether the user asked for Plug'n'Play

    Returns:
        True only if PnP was requested and a recent enough yarn is installed
    """
    if not use_pnp:
        return False

    if not await should_use_yarn(runner):
        logger.warning("NPM does not support PnP")
        return False

    yarn_info = await check_yarn_version(runner)
    if not yarn_info.has_min_pnp:
        if yarn_info.version:
            logger.warning(
                f"You are using Yarn {yarn_info.version} together with the --use-pnp flag, "
                f"but Plug'n'Play is only supported starting from the 1.12 release.\n\n"
                f"Please update to Yarn 1.12 or higher for a better, fully supported experience.\n"
            )
        # 1.11 never shipped stable PnP support, so treat it as absent too
        return False

    return True


def install_command(use_yarn: bool, use_pnp: bool) -> list[str]:
    """Build the install invocation.

    PnP only applies to yarn; it is ignored for npm.
    """
    if use_yarn:
        return [YARN, PNP_FLAG] if use_pnp else [YARN]
    return [NPM, "install"]
