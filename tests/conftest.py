"""Shared fixtures for the hook tests."""

import shutil
import subprocess
from pathlib import Path

import pytest

from git_hooks.tools import ToolRun


def git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def git_repo(tmp_path, monkeypatch):
    """An empty git repository as the working directory."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "config", "user.email", "hooks@example.com")
    git(repo, "config", "user.name", "Hook Tests")
    monkeypatch.chdir(repo)
    return repo


class FakeTools:
    """Stands in for ``run_tool``: records commands and replays canned results."""

    def __init__(self, results=None, default=None):
        self.results = dict(results or {})
        self.default = default if default is not None else (0, "", "")
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, command, cwd):
        command = tuple(command)
        self.calls.append(command)
        returncode, stdout, stderr = self.default
        for key, value in self.results.items():
            if key in command:
                returncode, stdout, stderr = value
                break
        return ToolRun(command, returncode, stdout, stderr)
