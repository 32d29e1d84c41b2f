"""Run yapf and gofmt in place and fail when they change staged files.

A formatter that rewrites a file leaves the working tree out of sync with the
index. The commit is then aborted so the change can be reviewed and staged;
the next run over the staged result finds nothing to change.
"""

from collections.abc import Sequence
from pathlib import Path

from git_hooks._git import get_unstaged_changes
from git_hooks.output import CheckResult
from git_hooks.tools import run_tool

YAPF_COMMAND = ("yapf", "--in-place", "--recursive")
GOFMT_COMMAND = ("gofmt", "-w")


def _run_formatter(
    name: str,
    command: Sequence[str],
    files: Sequence[str],
    cwd: Path,
) -> CheckResult:
    run = run_tool([*command, *files], cwd)
    if not run.ok:
        details = run.output.splitlines() or [f"{name} exited with status {run.returncode}"]
        return CheckResult.failure(name, details)

    changed = get_unstaged_changes(files, cwd=cwd)
    if changed:
        details = [
            f"{len(changed)} file(s) reformatted, review and stage them before committing:",
            *(f"  {path}" for path in changed),
        ]
        return CheckResult.failure(name, details)
    return CheckResult.success(name)


def run_yapf(files: Sequence[str], cwd: Path, extra_args: Sequence[str] = ()) -> CheckResult:
    """Format Python files with yapf. Generated files must already be filtered out."""
    if not files:
        return CheckResult.skipped("yapf", "only generated files")
    return _run_formatter("yapf", [*YAPF_COMMAND, *extra_args], files, cwd)


def run_gofmt(files: Sequence[str], cwd: Path) -> CheckResult:
    """Format Go files with ``gofmt -w``."""
    return _run_formatter("gofmt", GOFMT_COMMAND, files, cwd)
