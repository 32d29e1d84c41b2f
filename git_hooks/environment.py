"""Verify that the external linters and formatters are installed."""

import shutil
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Optional

MARKER_NAME = "git-hooks-tools-verified"

Which = Callable[[str], Optional[str]]


class MissingToolError(RuntimeError):
    """Raised when a required executable cannot be found on PATH."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"Required tool '{tool}' is not installed or not on PATH")
        self.tool = tool


def find_missing_tool(tools: Sequence[str], which: Which = shutil.which) -> Optional[str]:
    """Return the first tool in ``tools`` that ``which`` cannot resolve, if any."""
    for tool in tools:
        if which(tool) is None:
            return tool
    return None


def validate_environment(tools: Sequence[str], which: Which = shutil.which) -> None:
    """Check that every required tool resolves on the search path.

    Args:
        tools: Executable names to look up.
        which: Lookup function, ``shutil.which`` by default.

    Raises:
        MissingToolError: For the first tool that is missing.
    """
    missing = find_missing_tool(tools, which)
    if missing is not None:
        raise MissingToolError(missing)


def marker_path(git_dir: Path) -> Path:
    return git_dir / MARKER_NAME


def is_recorded(git_dir: Path) -> bool:
    """True if a previous run in this repository already validated the tools."""
    return marker_path(git_dir).exists()


def record_validation(git_dir: Path, tools: Sequence[str]) -> Path:
    """Write the marker file so later runs skip the lookup.

    The marker lists the validated tools; it lives in the git directory and is
    never committed.
    """
    path = marker_path(git_dir)
    path.write_text("\n".join(tools) + "\n", encoding="utf-8")
    return path
