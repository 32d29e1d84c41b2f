"""Git plumbing helpers shared by the pre-commit and commit-msg hooks."""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Optional


def _run_git(args: Sequence[str], error: str, cwd: Optional[Path] = None) -> str:
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
    except subprocess.CalledProcessError as e:
        raise RuntimeError(f"{error}: {e.stderr.strip()}") from e
    return result.stdout


def get_git_root() -> Path:
    """Get the root directory of the git repository.

    Returns:
        Path to the git repository root.

    Raises:
        RuntimeError: If not in a git repository.
    """
    return Path(_run_git(["rev-parse", "--show-toplevel"], "Not in a git repository").strip())


def get_git_dir() -> Path:
    """Get the git directory (usually ``<root>/.git``) as an absolute path.

    Raises:
        RuntimeError: If not in a git repository.
    """
    output = _run_git(["rev-parse", "--absolute-git-dir"], "Not in a git repository")
    return Path(output.strip())


def get_staged_files(cwd: Optional[Path] = None) -> list[str]:
    """List files staged as added or modified, relative to the repository root.

    Paths are read NUL-separated so names with spaces or newlines survive.

    Raises:
        RuntimeError: If the git command fails.
    """
    output = _run_git(
        ["diff", "--cached", "--name-only", "--diff-filter=AM", "-z"],
        "Failed to list staged files",
        cwd=cwd,
    )
    return [path for path in output.split("\0") if path]


def get_unstaged_changes(paths: Sequence[str], cwd: Optional[Path] = None) -> list[str]:
    """Return the subset of ``paths`` whose working tree differs from the index.

    Raises:
        RuntimeError: If the git command fails.
    """
    if not paths:
        return []
    output = _run_git(
        ["diff", "--name-only", "-z", "--", *paths],
        "Failed to diff working tree against index",
        cwd=cwd,
    )
    return [path for path in output.split("\0") if path]


def get_current_branch(cwd: Optional[Path] = None) -> Optional[str]:
    """Get the short name of the checked-out branch.

    Works on an unborn branch (no commits yet).

    Returns:
        The branch name, or None when HEAD is detached.
    """
    result = subprocess.run(
        ["git", "symbolic-ref", "--quiet", "--short", "HEAD"],
        capture_output=True,
        text=True,
        check=False,
        cwd=cwd,
    )
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None
