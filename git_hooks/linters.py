"""Run pylint and golangci-lint over staged files.

Both tools are asked for JSON output so messages can be rendered uniformly;
when the output does not parse, it is passed through as-is.
"""

import json
import posixpath
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Optional

from git_hooks.output import CheckResult
from git_hooks.tools import ToolRun, run_tool

PYLINT_COMMAND = ("pylint", "--output-format=json")
GOLANGCI_LINT_COMMAND = ("golangci-lint", "run", "--output.json.path=stdout")


def _load_json(text: str) -> Optional[Any]:
    """Parse tool output as JSON, tolerating log lines printed around it."""
    text = text.strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    # golangci-lint may print warnings before the JSON document
    for line in reversed(text.splitlines()):
        line = line.strip()
        if line.startswith(("{", "[")):
            try:
                return json.loads(line)
            except json.JSONDecodeError:
                return None
    return None


def format_pylint_messages(payload: Any) -> Optional[list[str]]:
    """Render pylint JSON messages as ``path:line:column: id (symbol) message``.

    Returns None if the payload is not a pylint message list.
    """
    if not isinstance(payload, list):
        return None
    lines = []
    for item in payload:
        if not isinstance(item, dict):
            return None
        lines.append(
            f"{item.get('path', '?')}:{item.get('line', 0)}:{item.get('column', 0)}: "
            f"{item.get('message-id', '')} ({item.get('symbol', '')}) {item.get('message', '')}"
        )
    return lines


def format_golangci_issues(payload: Any) -> Optional[list[str]]:
    """Render golangci-lint JSON issues as ``file:line:column: text (linter)``.

    Returns None if the payload is not a golangci-lint report.
    """
    if not isinstance(payload, dict):
        return None
    issues = payload.get("Issues")
    if issues is None:
        return [] if "Report" in payload else None
    lines = []
    for issue in issues:
        pos = issue.get("Pos") or {}
        lines.append(
            f"{pos.get('Filename', '?')}:{pos.get('Line', 0)}:{pos.get('Column', 0)}: "
            f"{issue.get('Text', '')} ({issue.get('FromLinter', '')})"
        )
    return lines


def _details(run: ToolRun, rendered: Optional[list[str]]) -> list[str]:
    if rendered:
        return rendered
    if run.output:
        return run.output.splitlines()
    return [f"{run.command[0]} exited with status {run.returncode}"]


def run_pylint(files: Sequence[str], cwd: Path, extra_args: Sequence[str] = ()) -> CheckResult:
    """Lint the exact list of staged Python files in a single pylint call.

    Any non-zero exit fails the check.
    """
    run = run_tool([*PYLINT_COMMAND, *extra_args, *files], cwd)
    if run.ok:
        return CheckResult.success("pylint")
    rendered = format_pylint_messages(_load_json(run.stdout))
    return CheckResult.failure("pylint", _details(run, rendered))


def unique_directories(files: Iterable[str]) -> list[str]:
    """Sorted, de-duplicated parent directories of ``files`` (``.`` for the root)."""
    return sorted({posixpath.dirname(path) or "." for path in files})


def package_pattern(directory: str) -> str:
    """Turn a directory into a recursive Go package pattern, e.g. ``./a/b/...``."""
    if directory == ".":
        return "./..."
    return f"./{directory}/..."


def run_golangci_lint(files: Sequence[str], cwd: Path, extra_args: Sequence[str] = ()) -> CheckResult:
    """Lint each directory containing a staged Go file.

    golangci-lint works on packages, so it runs once per unique directory with
    a recursive pattern. A directory and one of its subdirectories are both
    scanned, which can report the subdirectory's issues twice.
    """
    details: list[str] = []
    for directory in unique_directories(files):
        run = run_tool([*GOLANGCI_LINT_COMMAND, *extra_args, package_pattern(directory)], cwd)
        if run.ok:
            continue
        rendered = format_golangci_issues(_load_json(run.stdout))
        details.extend(_details(run, rendered))

    if details:
        return CheckResult.failure("golangci-lint", details)
    return CheckResult.success("golangci-lint")
