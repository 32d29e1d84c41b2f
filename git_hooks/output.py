"""Check results, exit-status aggregation and terminal output."""

import sys
import traceback
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal, Optional, TextIO

Status = Literal["SUCCESS", "FAILED", "SKIPPED"]

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_MISSING_TOOL = 2

GREEN = "\033[0;32m"
RED = "\033[0;31m"
YELLOW = "\033[1;33m"
NC = "\033[0m"

STATUS_COLORS: dict[str, str] = {
    "SUCCESS": GREEN,
    "FAILED": RED,
    "SKIPPED": YELLOW,
}


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one named check.

    Attributes:
        name: Human-readable check name, e.g. "pylint".
        status: SUCCESS, FAILED or SKIPPED.
        details: Lines printed under a failed check (file:line pairs, tool output).
    """

    name: str
    status: Status
    details: list[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.status == "FAILED"

    @classmethod
    def success(cls, name: str) -> "CheckResult":
        return cls(name, "SUCCESS")

    @classmethod
    def failure(cls, name: str, details: Iterable[str] = ()) -> "CheckResult":
        return cls(name, "FAILED", list(details))

    @classmethod
    def skipped(cls, name: str, reason: str = "") -> "CheckResult":
        return cls(name, "SKIPPED", [reason] if reason else [])


def exit_status(results: Iterable[CheckResult]) -> int:
    """Fold check results into one exit code.

    A single failure makes the whole run fail; skipped checks never do.
    """
    failed = False
    for result in results:
        failed = failed or result.failed
    return EXIT_FAILED if failed else EXIT_OK


def format_status(result: CheckResult, color: bool = True) -> str:
    """Render the one-line status for a check, e.g. ``SUCCESS: pylint``."""
    word = result.status
    if color:
        word = f"{STATUS_COLORS[result.status]}{word}{NC}"
    line = f"{word}: {result.name}"
    if result.status == "SKIPPED" and result.details:
        line += f" ({result.details[0]})"
    return line


def report(result: CheckResult, color: bool = True, stream: Optional[TextIO] = None) -> CheckResult:
    """Print a check's status line and, for failures, its indented details.

    Returns the result unchanged so callers can report and collect in one step.
    """
    if stream is None:
        stream = sys.stdout
    print(format_status(result, color=color), file=stream)
    if result.failed:
        for detail in result.details:
            print(f"    {detail}", file=stream)
    return result


def log_error(message: str, exception: Optional[Exception] = None) -> None:
    """Log an error with full context.

    Args:
        message: Error message.
        exception: Optional exception to log details from.
    """
    print(f"\n{'='*60}", file=sys.stderr)
    print(f"ERROR: {message}", file=sys.stderr)
    if exception:
        print(f"Exception type: {type(exception).__name__}", file=sys.stderr)
        print(f"Exception message: {str(exception)}", file=sys.stderr)
        print("\nTraceback:", file=sys.stderr)
        traceback.print_exception(type(exception), exception, exception.__traceback__, file=sys.stderr)
    print(f"{'='*60}\n", file=sys.stderr)
