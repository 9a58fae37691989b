"""Starter source classification.

A starter string names either a repository on a known git host or a local
directory. ``classify_source`` is the only place that decides which; callers
dispatch on the returned type.

Recognized hosted forms (``#<committish>`` allowed on all of them):
- ``user/project`` (GitHub shorthand)
- ``github:user/project``, ``gitlab:user/project``, ``bitbucket:user/project``
- ``git@github.com:user/project.git``
- ``ssh://git@github.com/user/project``, ``git+ssh://git@github.com/user/project``
  (also with an scp-style ``github.com:user/project`` path)
- ``https://github.com/user/project``, ``git+https://...``, ``http://...``
- ``git://github.com/user/project``
"""

import logging
import re
from typing import Literal
from urllib.parse import urlsplit

from pydantic import BaseModel
from pydantic import ConfigDict

logger = logging.getLogger(__name__)

HostName = Literal["github", "gitlab", "bitbucket"]
Representation = Literal["shortcut", "sshurl", "https", "git"]

HOST_DOMAINS: dict[str, str] = {
    "github": "github.com",
    "gitlab": "gitlab.com",
    "bitbucket": "bitbucket.org",
}
_DOMAIN_HOSTS = {domain: host for host, domain in HOST_DOMAINS.items()}

_SHORTHAND_RE = re.compile(r"^[^:@%/\s.-][^:@%/\s]*/[^:@\s/%]+(?:#.*)?$")
_HOST_PREFIX_RE = re.compile(r"^(github|gitlab|bitbucket):([^/\s]+)/([^/\s#]+)(?:#(.*))?$")
_SCP_RE = re.compile(r"^git@([^:/\s]+):([^/\s]+)/([^/\s#]+)(?:#(.*))?$")
# scp-style colon inside an ssh URL (ssh://git@host:user/repo); a numeric port is left alone
_SSH_SCP_PATH_RE = re.compile(r"^((?:git\+)?ssh://[^/@]+@[^/:]+):(?![0-9]+/)")

_SCHEME_REPRESENTATIONS: dict[str, Representation] = {
    "ssh": "sshurl",
    "git+ssh": "sshurl",
    "https": "https",
    "http": "https",
    "git+https": "https",
    "git": "git",
}


class HostedGitSource(BaseModel):
    """Repository on a known git host (immutable)."""

    model_config = ConfigDict(frozen=True)

    host: HostName
    user: str
    project: str
    committish: str | None = None
    default_representation: Representation = "shortcut"
    raw: str = ""

    @property
    def domain(self) -> str:
        return HOST_DOMAINS[self.host]

    def ssh_url(self) -> str:
        """SSH clone URL, without committish."""
        return f"git@{self.domain}:{self.user}/{self.project}.git"

    def https_url(self) -> str:
        """HTTPS clone URL, without committish or ``git+`` prefix."""
        return f"https://{self.domain}/{self.user}/{self.project}.git"

    @property
    def clone_url(self) -> str:
        """URL to hand to ``git clone``.

        SSH when the source was written as an SSH URL (so private repos keep
        working), HTTPS otherwise.
        """
        if self.default_representation == "sshurl":
            return self.ssh_url()
        return self.https_url()


class LocalPathSource(BaseModel):
    """Starter directory on the local filesystem (immutable)."""

    model_config = ConfigDict(frozen=True)

    path: str


StarterSource = HostedGitSource | LocalPathSource


def _strip_git_suffix(project: str) -> str:
    return project[:-4] if project.endswith(".git") else project


def _hosted(
    host: str,
    user: str,
    project: str,
    committish: str | None,
    representation: Representation,
    raw: str,
) -> HostedGitSource | None:
    project = _strip_git_suffix(project)
    if not user or not project:
        return None
    return HostedGitSource(
        host=host,
        user=user,
        project=project,
        committish=committish or None,
        default_representation=representation,
        raw=raw,
    )


def _from_url(source: str) -> HostedGitSource | None:
    """Parse scheme-qualified URLs (``https://``, ``ssh://``, ``git://`` ...)."""
    parts = urlsplit(_SSH_SCP_PATH_RE.sub(r"\1/", source, count=1))
    representation = _SCHEME_REPRESENTATIONS.get(parts.scheme.lower())
    if representation is None or not parts.hostname:
        return None

    domain = parts.hostname.lower().removeprefix("www.")
    host = _DOMAIN_HOSTS.get(domain)
    if host is None:
        return None

    segments = [segment for segment in parts.path.split("/") if segment]
    if len(segments) != 2:
        return None

    return _hosted(host, segments[0], segments[1], parts.fragment, representation, source)


def parse_hosted_git(source: str) -> HostedGitSource | None:
    """
    Parse a string as a hosted git reference.

    Args:
        source: Starter string as given by the user

    Returns:
        HostedGitSource if the string names a repository on a known host, None otherwise

    Example:
        >>> info = parse_hosted_git("gatsbyjs/gatsby-starter-blog#v2")
        >>> info.clone_url
        'https://github.com/gatsbyjs/gatsby-starter-blog.git'
        >>> info.committish
        'v2'
    """
    source = source.strip()
    if not source:
        return None

    if "://" in source:
        return _from_url(source)

    match = _SCP_RE.match(source)
    if match:
        domain, user, project, committish = match.groups()
        host = _DOMAIN_HOSTS.get(domain.lower().removeprefix("www."))
        if host is None:
            return None
        return _hosted(host, user, project, committish, "sshurl", source)

    match = _HOST_PREFIX_RE.match(source)
    if match:
        host, user, project, committish = match.groups()
        return _hosted(host, user, project, committish, "shortcut", source)

    if _SHORTHAND_RE.match(source):
        repo, _, committish = source.partition("#")
        user, project = repo.split("/", 1)
        return _hosted("github", user, project, committish, "shortcut", source)

    return None


def classify_source(source: str) -> StarterSource:
    """Classify a starter string as hosted git repository or local path.

    Args:
        source: Starter string as given by the user

    Returns:
        HostedGitSource when the string is a recognized hosted git reference,
        LocalPathSource (holding the string verbatim) otherwise
    """
    hosted = parse_hosted_git(source)
    if hosted is not None:
        logger.debug(f"Starter {source!r} is hosted on {hosted.host}: {hosted.user}/{hosted.project}")
        return hosted

    logger.debug(f"Starter {source!r} is a local path")
    return LocalPathSource(path=source)
