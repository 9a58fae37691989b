"""Tests for dependency installation."""

import logging
from pathlib import Path

import pytest
from project_starter import StarterProcessError
from project_starter import install_dependencies


@pytest.mark.asyncio
async def test_install_with_npm_when_yarn_absent(tmp_path, monkeypatch, fake_runner):
    """Test npm install runs inside the project directory."""
    monkeypatch.chdir(tmp_path)
    project = tmp_path / "site"
    project.mkdir()

    await install_dependencies(project, use_pnp=False, runner=fake_runner)

    assert fake_runner.run_commands == [["npm", "install"]]
    install_cwd = fake_runner.calls[-1][1]
    assert install_cwd == project.resolve()


@pytest.mark.asyncio
async def test_install_with_yarn(tmp_path, monkeypatch, make_runner):
    monkeypatch.chdir(tmp_path)
    runner = make_runner(yarn_version="1.22.19")

    await install_dependencies(tmp_path, use_pnp=False, runner=runner)

    assert runner.run_commands == [["yarnpkg"]]


@pytest.mark.asyncio
async def test_install_with_pnp(tmp_path, monkeypatch, make_runner, caplog):
    monkeypatch.chdir(tmp_path)
    runner = make_runner(yarn_version="1.22.19")

    with caplog.at_level(logging.INFO):
        await install_dependencies(tmp_path, use_pnp=True, runner=runner)

    assert runner.run_commands == [["yarnpkg", "--enable-pnp"]]
    assert "Using Plug'n'Play took" in caplog.text


@pytest.mark.asyncio
async def test_install_logs_elapsed_time(tmp_path, monkeypatch, fake_runner, caplog):
    monkeypatch.chdir(tmp_path)

    with caplog.at_level(logging.INFO):
        await install_dependencies(tmp_path, use_pnp=False, runner=fake_runner)

    assert "Installing packages..." in caplog.text
    assert "Installing node modules took" in caplog.text
    assert "seconds" in caplog.text


@pytest.mark.asyncio
async def test_install_restores_cwd_on_success(tmp_path, monkeypatch, fake_runner):
    monkeypatch.chdir(tmp_path)
    project = tmp_path / "site"
    project.mkdir()
    before = Path.cwd()

    await install_dependencies(project, use_pnp=False, runner=fake_runner)

    assert Path.cwd() == before


@pytest.mark.asyncio
async def test_install_restores_cwd_on_failure(tmp_path, monkeypatch, make_runner):
    """Test a failing install process still restores the working directory."""
    monkeypatch.chdir(tmp_path)
    project = tmp_path / "site"
    project.mkdir()
    runner = make_runner(failing=["npm"])
    before = Path.cwd()

    with pytest.raises(StarterProcessError) as exc_info:
        await install_dependencies(project, use_pnp=False, runner=runner)

    assert exc_info.value.command == ["npm", "install"]
    assert exc_info.value.returncode == 1
    assert Path.cwd() == before


@pytest.mark.asyncio
async def test_install_missing_directory(tmp_path, monkeypatch, fake_runner):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(FileNotFoundError):
        await install_dependencies(tmp_path / "missing", use_pnp=False, runner=fake_runner)

    assert fake_runner.calls == []
    assert Path.cwd() == tmp_path.resolve()
