"""Thin wrapper for running external linters and formatters."""

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ToolRun:
    """Captured result of one tool invocation."""

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr, stripped."""
        return "\n".join(part.strip() for part in (self.stdout, self.stderr) if part.strip())


def run_tool(command: Sequence[str], cwd: Path) -> ToolRun:
    """Run a tool to completion and capture its output.

    No timeout is applied; a hung tool blocks the hook until interrupted.
    A missing executable is reported as exit code 127 instead of raising, so
    one absent tool fails its own check without stopping the others.
    """
    try:
        result = subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            check=False,
            cwd=cwd,
        )
    except FileNotFoundError as e:
        return ToolRun(tuple(command), 127, "", f"{command[0]}: command not found ({e})")
    return ToolRun(tuple(command), result.returncode, result.stdout, result.stderr)
