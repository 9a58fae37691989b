"""Shared fixtures: an in-memory CommandRunner."""

from collections.abc import Callable
from collections.abc import Sequence
from pathlib import Path

import pytest
from project_starter import StarterProcessError


class FakeRunner:
    """Records commands instead of running them.

    Each call is stored as (args, cwd at call time) so tests can check where
    the install ran.
    """

    def __init__(
        self,
        yarn_version: str | None = None,
        failing: Sequence[str] = (),
        side_effects: dict[str, Callable[[list[str]], None]] | None = None,
    ):
        """
        Args:
            yarn_version: Output of ``yarnpkg --version``; None means yarn is absent
            failing: Programs whose ``run`` exits non-zero
            side_effects: Program name -> callback invoked with args before returning
        """
        self.yarn_version = yarn_version
        self.failing = set(failing)
        self.side_effects = side_effects or {}
        self.calls: list[tuple[list[str], Path]] = []

    @property
    def commands(self) -> list[list[str]]:
        return [args for args, _ in self.calls]

    @property
    def run_commands(self) -> list[list[str]]:
        """Commands other than version probes."""
        return [args for args in self.commands if args[1:] != ["--version"]]

    async def run(self, args: Sequence[str]) -> None:
        command = list(args)
        self.calls.append((command, Path.cwd()))

        if command[0] in self.side_effects:
            self.side_effects[command[0]](command)

        if command[0] in self.failing:
            raise StarterProcessError(f"{command[0]} failed", command=command, returncode=1)

    async def capture(self, args: Sequence[str]) -> str:
        command = list(args)
        self.calls.append((command, Path.cwd()))

        if command[0] == "yarnpkg" and self.yarn_version is not None:
            return self.yarn_version
        raise StarterProcessError(f"{command[0]} not found", command=command)


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def fake_runner():
    """FakeRunner with no yarn installed (npm only)."""
    return FakeRunner()


@pytest.fixture
def starter_dir(tmp_path):
    """Local starter with a package.json, a source file and VCS metadata."""
    starter = tmp_path / "starter"
    (starter / "src").mkdir(parents=True)
    (starter / "package.json").write_text('{"name": "starter"}')
    (starter / "src" / "index.js").write_text("console.log('hi')\n")
    (starter / ".git").mkdir()
    (starter / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (starter / ".hg").mkdir()
    (starter / ".gitignore").write_text("node_modules\n")
    return starter
